"""Ladder computation over the game store."""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableMapping
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta

from domain.common import TeamInfo
from domain.ladder import LadderEntry, build_ladder, filter_active
from domain.query import LadderQuery
from ranking.ranker import GameResult, Ranker, RankerParameters
from repositories.errors import TeamNotFoundError
from repositories.games import fetch_game_results
from repositories.teams import fetch_active_teams, fetch_team_info

LadderCacheKey = tuple[str, str, date]


@dataclass(frozen=True)
class RankingSummary:
    """Outcome of one full ranking pass."""

    genus: str
    processed_games: int
    tracked_teams: int
    active_teams: int
    ratings: dict[int, int]


def rank_games(
    games: Iterable[GameResult],
    params: RankerParameters,
    *,
    check_order: bool = False,
) -> Ranker:
    """Fold an ordered game stream through a fresh ranker."""
    ranker = Ranker(params, check_order=check_order)
    for game in games:
        ranker.ingest(game)
    return ranker


class LadderService:
    """Builds ladders from the game store.

    Each ranking call rebuilds ratings from full history with its own ranker.
    """

    def __init__(
        self,
        session_factory,
        params: RankerParameters,
        *,
        active_window_days: int = 365,
        check_order: bool = False,
        cache: MutableMapping[LadderCacheKey, tuple[LadderEntry, ...]] | None = None,
        echo: Callable[[str], None] | None = None,
    ) -> None:
        if active_window_days < 0:
            raise ValueError("active_window_days must be >= 0")
        self.session_factory = session_factory
        self.params = params
        self.active_window_days = active_window_days
        self.check_order = check_order
        self.cache = cache
        self.echo = echo

    def _today(self) -> date:
        return datetime.now(UTC).date()

    def compute_ratings(self, genus: str = "", *, as_of: date | None = None) -> RankingSummary:
        """Rate every team for ``genus`` and drop teams inactive in the window.

        An ``active_window_days`` of 0 disables the activity filter.
        """
        as_of = as_of or self._today()
        with self.session_factory() as session:
            games = fetch_game_results(session, genus=genus)
            ranker = rank_games(games, self.params, check_order=self.check_order)
            ratings = ranker.finalize()

            if self.active_window_days == 0:
                active_ratings = ratings
            else:
                since = as_of - timedelta(days=self.active_window_days)
                active = fetch_active_teams(session, ratings.keys(), since=since)
                active_ratings = filter_active(ratings, active)

        if self.echo is not None:
            self.echo(
                f"genus={genus or 'all'} "
                f"processed_games={len(games)} "
                f"tracked_teams={ranker.tracked_team_count()} "
                f"active_teams={len(active_ratings)}"
            )

        return RankingSummary(
            genus=genus,
            processed_games=len(games),
            tracked_teams=ranker.tracked_team_count(),
            active_teams=len(active_ratings),
            ratings=active_ratings,
        )

    def ladder(self, query: LadderQuery, *, as_of: date | None = None) -> list[LadderEntry]:
        as_of = as_of or self._today()
        cache_key = (query.genus, query.region, as_of)
        if self.cache is not None and cache_key in self.cache:
            return list(self.cache[cache_key])

        summary = self.compute_ratings(query.genus, as_of=as_of)
        with self.session_factory() as session:
            team_info = fetch_team_info(session, summary.ratings.keys())
        entries = build_ladder(summary.ratings, team_info, region=query.region)

        if self.cache is not None:
            self.cache[cache_key] = tuple(entries)
        return entries

    def team(self, team_id: int) -> TeamInfo:
        with self.session_factory() as session:
            teams = fetch_team_info(session, [team_id])
        try:
            return teams[team_id]
        except KeyError as exc:
            raise TeamNotFoundError(team_id) from exc


__all__ = ["LadderService", "RankingSummary", "rank_games"]
