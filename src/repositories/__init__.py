"""Database repository helpers."""

from repositories.errors import DataSourceError, TeamNotFoundError
from repositories.games import DEFAULT_RULESET, fetch_game_results
from repositories.schema import ensure_schema
from repositories.teams import fetch_active_teams, fetch_team_info

__all__ = [
    "DEFAULT_RULESET",
    "DataSourceError",
    "TeamNotFoundError",
    "ensure_schema",
    "fetch_active_teams",
    "fetch_game_results",
    "fetch_team_info",
]
