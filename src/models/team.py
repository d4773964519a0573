"""teams table model."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base

EXHIBITION_TEAM_TYPE = "Exhibition Team"


class Team(Base):
    """A roller derby team, optionally belonging to a parent team's league."""

    __tablename__ = "teams"
    __table_args__ = (Index("idx_teams_genus", "genus"),)

    team: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    parent_team: Mapped[int | None] = mapped_column(ForeignKey("teams.team"), nullable=True)
    league: Mapped[str | None] = mapped_column(String(256), nullable=True)
    name: Mapped[str | None] = mapped_column(String(256), nullable=True)
    type: Mapped[str | None] = mapped_column(String(64), nullable=True)
    location: Mapped[str | None] = mapped_column(String(256), nullable=True)
    website: Mapped[str | None] = mapped_column(String(512), nullable=True)
    region: Mapped[str | None] = mapped_column(String(64), nullable=True)
    genus: Mapped[str | None] = mapped_column(String(64), nullable=True)
