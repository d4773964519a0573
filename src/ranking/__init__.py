"""Team ladder rating engine."""

from ranking.ranker import (
    RATING_SCALE,
    GameResult,
    Ranker,
    RankerParameters,
    RatingUpdate,
    calculate_expected_outcome,
    normalize_score_margin,
    to_display_rating,
)

__all__ = [
    "RATING_SCALE",
    "GameResult",
    "Ranker",
    "RankerParameters",
    "RatingUpdate",
    "calculate_expected_outcome",
    "normalize_score_margin",
    "to_display_rating",
]
