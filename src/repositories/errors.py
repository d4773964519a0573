"""Error kinds raised by the data access layer."""

from __future__ import annotations


class DataSourceError(RuntimeError):
    """Reading from the game/team store failed."""


class TeamNotFoundError(LookupError):
    def __init__(self, team_id: int) -> None:
        super().__init__(f"Team not found: {team_id}")
        self.team_id = team_id


__all__ = ["DataSourceError", "TeamNotFoundError"]
