"""Shared types for the ladder service."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TeamInfo:
    """Display metadata for one team."""

    team: int
    name: str = ""
    parent_team: int | None = None
    league: str = ""
    type: str = ""
    location: str = ""
    website: str = ""
    region: str = ""
    genus: str = ""
