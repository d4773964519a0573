"""Recognised ladder filters."""

from __future__ import annotations

from dataclasses import dataclass

GENERA = ("Women", "Men", "Open to All")
REGIONS = ("", "Europe", "Northern America", "Latin America", "Pacific")
DEFAULT_GENUS = "Women"


@dataclass(frozen=True)
class LadderQuery:
    """Genus and region filter for one ladder.

    An empty genus ranks all genera together; an empty region means any region.
    """

    genus: str = DEFAULT_GENUS
    region: str = ""

    def __post_init__(self) -> None:
        if self.genus and self.genus not in GENERA:
            raise ValueError(f"Unknown genus {self.genus!r}; expected one of {GENERA}")
        if self.region not in REGIONS:
            raise ValueError(f"Unknown region {self.region!r}; expected one of {REGIONS}")


__all__ = ["DEFAULT_GENUS", "GENERA", "LadderQuery", "REGIONS"]
