"""Turn a ratings mapping into a ranked ladder."""

from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import dataclass

from domain.common import TeamInfo
from ranking.ranker import to_display_rating


@dataclass(frozen=True)
class LadderEntry:
    rank: int
    team: int
    team_info: TeamInfo
    rating: float


def filter_active(ratings: Mapping[int, int], active_teams: Collection[int]) -> dict[int, int]:
    """Restrict ratings to active teams without touching the values."""
    return {team: rating for team, rating in ratings.items() if team in active_teams}


def sort_ladder(ratings: Mapping[int, int]) -> list[int]:
    """Team ids ordered by rating descending, then team id ascending."""
    return sorted(ratings, key=lambda team: (-ratings[team], team))


def build_ladder(
    ratings: Mapping[int, int],
    team_info: Mapping[int, TeamInfo],
    *,
    region: str = "",
) -> list[LadderEntry]:
    """Rank teams, skipping those outside ``region`` when one is given."""
    entries: list[LadderEntry] = []
    for team in sort_ladder(ratings):
        info = team_info.get(team, TeamInfo(team=team))
        if region and info.region != region:
            continue
        entries.append(
            LadderEntry(
                rank=len(entries) + 1,
                team=team,
                team_info=info,
                rating=to_display_rating(ratings[team]),
            )
        )
    return entries


__all__ = ["LadderEntry", "build_ladder", "filter_active", "sort_ladder"]
