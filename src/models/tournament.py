"""tournaments and tournament_hosting_teams table models."""

from __future__ import annotations

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class Tournament(Base):
    __tablename__ = "tournaments"

    tournament: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    name: Mapped[str | None] = mapped_column(String(256), nullable=True)


class TournamentHostingTeam(Base):
    """Teams organising a tournament they also play in."""

    __tablename__ = "tournament_hosting_teams"

    tournament: Mapped[int] = mapped_column(ForeignKey("tournaments.tournament"), primary_key=True)
    team: Mapped[int] = mapped_column(ForeignKey("teams.team"), primary_key=True)
