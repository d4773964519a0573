"""Team metadata and activity lookups."""

from __future__ import annotations

from collections.abc import Collection
from datetime import date

from sqlalchemy import bindparam, select, union
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, aliased

from domain.common import TeamInfo
from models import Game, Team
from repositories.errors import DataSourceError


def _id_list(team_ids: Collection[int]):
    # Rendered inline so large id sets stay clear of bound-variable limits.
    return bindparam("team_ids", list(team_ids), expanding=True, literal_execute=True)


def fetch_team_info(session: Session, team_ids: Collection[int]) -> dict[int, TeamInfo]:
    """Fetch display metadata; teams with a parent team show the parent's league."""
    if not team_ids:
        return {}

    parent = aliased(Team, name="parent")
    statement = (
        select(Team, parent.league.label("parent_league"))
        .outerjoin(parent, Team.parent_team == parent.team)
        .where(Team.team.in_(_id_list(team_ids)))
    )

    try:
        rows = session.execute(statement).all()
    except SQLAlchemyError as exc:
        raise DataSourceError(f"Failed to fetch team info: {exc}") from exc

    result: dict[int, TeamInfo] = {}
    for team, parent_league in rows:
        league = parent_league if team.parent_team is not None else team.league
        result[team.team] = TeamInfo(
            team=team.team,
            name=team.name or "",
            parent_team=team.parent_team,
            league=league or "",
            type=team.type or "",
            location=team.location or "",
            website=team.website or "",
            region=team.region or "",
            genus=team.genus or "",
        )
    return result


def fetch_active_teams(session: Session, team_ids: Collection[int], *, since: date) -> set[int]:
    """Teams with a game on or after ``since``, home or away. Future games count."""
    if not team_ids:
        return set()

    ids = _id_list(team_ids)
    statement = union(
        select(Game.home_team.label("team")).where(Game.day >= since, Game.home_team.in_(ids)),
        select(Game.away_team.label("team")).where(Game.day >= since, Game.away_team.in_(ids)),
    )

    try:
        rows = session.execute(statement).scalars().all()
    except SQLAlchemyError as exc:
        raise DataSourceError(f"Failed to fetch active teams: {exc}") from exc

    return set(rows)
