"""Fetch played games in ranking order."""

from __future__ import annotations

from sqlalchemy import and_, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, aliased

from models import EXHIBITION_TEAM_TYPE, Game, Team, TournamentHostingTeam
from ranking.ranker import GameResult
from repositories.errors import DataSourceError

DEFAULT_RULESET = "WFTDA"


def fetch_game_results(
    session: Session,
    *,
    genus: str = "",
    ruleset: str = DEFAULT_RULESET,
) -> list[GameResult]:
    """Fetch played games sorted by day, time and game id.

    Unplayed games, games involving an exhibition team and games under other
    rulesets are excluded. A non-empty ``genus`` keeps only games where both
    teams belong to it.
    """
    home = aliased(Team, name="team_h")
    away = aliased(Team, name="team_a")
    home_host = aliased(TournamentHostingTeam, name="tour_h")
    away_host = aliased(TournamentHostingTeam, name="tour_a")

    conditions = [
        func.coalesce(home.type, "") != EXHIBITION_TEAM_TYPE,
        func.coalesce(away.type, "") != EXHIBITION_TEAM_TYPE,
        Game.ruleset == ruleset,
        Game.home_score.is_not(None),
        Game.away_score.is_not(None),
    ]
    if genus:
        conditions.append(home.genus == genus)
        conditions.append(away.genus == genus)

    statement = (
        select(
            Game.game.label("game_id"),
            Game.day,
            Game.time,
            Game.home_team,
            Game.away_team,
            Game.home_score,
            Game.away_score,
            Game.tournament.is_not(None).label("is_tournament"),
            home_host.team.is_not(None).label("home_hosting_tournament"),
            away_host.team.is_not(None).label("away_hosting_tournament"),
        )
        .select_from(Game)
        .join(home, home.team == Game.home_team)
        .join(away, away.team == Game.away_team)
        .outerjoin(
            home_host,
            and_(home_host.tournament == Game.tournament, home_host.team == Game.home_team),
        )
        .outerjoin(
            away_host,
            and_(away_host.tournament == Game.tournament, away_host.team == Game.away_team),
        )
        .where(*conditions)
        .order_by(Game.day, Game.time, Game.game)
    )

    try:
        rows = session.execute(statement).mappings().all()
    except SQLAlchemyError as exc:
        raise DataSourceError(f"Failed to fetch games (genus={genus!r}): {exc}") from exc

    return [
        GameResult(
            home_team=row["home_team"],
            away_team=row["away_team"],
            home_score=row["home_score"],
            away_score=row["away_score"],
            is_tournament=bool(row["is_tournament"]),
            home_hosting_tournament=bool(row["home_hosting_tournament"]),
            away_hosting_tournament=bool(row["away_hosting_tournament"]),
            day=row["day"],
            time=row["time"],
            game_id=row["game_id"],
        )
        for row in rows
    ]
