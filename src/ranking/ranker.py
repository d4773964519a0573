"""Team ladder rating logic.

Games must be ingested in chronological order (day, then time, then game id).
Feeding them out of order does not raise by default; it silently produces a
different rating trajectory. Build the ranker with ``check_order=True`` to
fail loudly instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from math import tanh

# Stored ratings are integers in tenths of a rating point.
RATING_SCALE = 10


@dataclass(frozen=True)
class RankerParameters:
    """Tuning constants, all in scaled rating units unless noted."""

    initial_rating: int = 0
    k_factor: float = 400.0
    scale_factor: float = 4000.0
    home_advantage: float = 300.0
    # Score points, not rating units.
    margin_scale: float = 100.0
    tournament_multiplier: float = 1.25

    def __post_init__(self) -> None:
        if self.k_factor <= 0.0:
            raise ValueError("k_factor must be > 0")
        if self.scale_factor <= 0.0:
            raise ValueError("scale_factor must be > 0")
        if self.home_advantage < 0.0:
            raise ValueError("home_advantage must be >= 0")
        if self.margin_scale <= 0.0:
            raise ValueError("margin_scale must be > 0")
        if self.tournament_multiplier <= 0.0:
            raise ValueError("tournament_multiplier must be > 0")


@dataclass(frozen=True)
class GameResult:
    """One played game, pre-joined with tournament hosting metadata."""

    home_team: int
    away_team: int
    home_score: int
    away_score: int
    is_tournament: bool = False
    home_hosting_tournament: bool = False
    away_hosting_tournament: bool = False
    day: date | None = None
    time: str | None = None
    game_id: int | None = None


@dataclass(frozen=True)
class RatingUpdate:
    home_team: int
    away_team: int
    home_pre: int
    away_pre: int
    delta: int
    home_post: int
    away_post: int
    expected_outcome: float
    actual_outcome: float
    venue_offset: float
    learning_rate: float


def calculate_expected_outcome(rating_difference: float, scale_factor: float) -> float:
    """Map a rating difference to an expected outcome in (-1, 1)."""
    return 2.0 / (1.0 + 10.0 ** (-rating_difference / scale_factor)) - 1.0


def normalize_score_margin(home_score: int, away_score: int, margin_scale: float) -> float:
    """Squash a score differential into (-1, 1) with diminishing returns."""
    return tanh((home_score - away_score) / margin_scale)


def to_display_rating(rating: int) -> float:
    return rating / RATING_SCALE


class Ranker:
    """Stateful game-by-game team ladder calculator."""

    def __init__(self, params: RankerParameters | None = None, *, check_order: bool = False) -> None:
        self.params = params or RankerParameters()
        self.check_order = check_order
        self._ratings: dict[int, int] = {}
        self._last_order_key: tuple | None = None

    def rating(self, team_id: int) -> int:
        return self._ratings.get(team_id, self.params.initial_rating)

    def tracked_team_count(self) -> int:
        return len(self._ratings)

    def finalize(self) -> dict[int, int]:
        """Return a snapshot of current team ratings."""
        return dict(self._ratings)

    def _venue_offset(self, game: GameResult) -> float:
        # A hosting home team only holds the home slot by venue assignment.
        if game.home_hosting_tournament:
            return 0.0
        return self.params.home_advantage

    def _learning_rate(self, game: GameResult) -> float:
        if game.is_tournament:
            return self.params.k_factor * self.params.tournament_multiplier
        return self.params.k_factor

    def _check_order(self, game: GameResult) -> None:
        if game.day is None:
            return
        order_key = (game.day, game.time or "", game.game_id if game.game_id is not None else -1)
        if self._last_order_key is not None and order_key < self._last_order_key:
            raise ValueError(
                f"game_id={game.game_id} on {game.day} arrived after a later game "
                f"({self._last_order_key[0]}, game_id={self._last_order_key[2]})"
            )
        self._last_order_key = order_key

    def ingest(self, game: GameResult) -> RatingUpdate:
        if game.home_team == game.away_team:
            raise ValueError(f"game_id={game.game_id} has identical teams ({game.home_team})")
        if game.home_score < 0 or game.away_score < 0:
            raise ValueError(
                f"game_id={game.game_id} has negative score {game.home_score}-{game.away_score}"
            )
        if self.check_order:
            self._check_order(game)

        home_pre = self.rating(game.home_team)
        away_pre = self.rating(game.away_team)

        venue_offset = self._venue_offset(game)
        expected = calculate_expected_outcome(
            home_pre - away_pre + venue_offset,
            self.params.scale_factor,
        )
        actual = normalize_score_margin(game.home_score, game.away_score, self.params.margin_scale)
        learning_rate = self._learning_rate(game)
        delta = round(learning_rate * (actual - expected))

        home_post = home_pre + delta
        away_post = away_pre - delta
        self._ratings[game.home_team] = home_post
        self._ratings[game.away_team] = away_post

        return RatingUpdate(
            home_team=game.home_team,
            away_team=game.away_team,
            home_pre=home_pre,
            away_pre=away_pre,
            delta=delta,
            home_post=home_post,
            away_post=away_post,
            expected_outcome=expected,
            actual_outcome=actual,
            venue_offset=venue_offset,
            learning_rate=learning_rate,
        )
