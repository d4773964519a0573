"""games table model."""

from __future__ import annotations

from datetime import date

from sqlalchemy import Date, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class Game(Base):
    """One scheduled or played game. Null scores mean not yet played."""

    __tablename__ = "games"
    __table_args__ = (
        Index("idx_games_order", "day", "time", "game"),
        Index("idx_games_home_day", "home_team", "day"),
        Index("idx_games_away_day", "away_team", "day"),
    )

    game: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    day: Mapped[date] = mapped_column(Date, nullable=False)
    time: Mapped[str | None] = mapped_column(String(16), nullable=True)
    home_team: Mapped[int] = mapped_column(ForeignKey("teams.team"), nullable=False)
    away_team: Mapped[int] = mapped_column(ForeignKey("teams.team"), nullable=False)
    home_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    away_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    tournament: Mapped[int | None] = mapped_column(ForeignKey("tournaments.tournament"), nullable=True)
    ruleset: Mapped[str] = mapped_column(String(32), nullable=False, default="WFTDA")
