"""Shared fixtures for database-backed tests."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from db import create_db_engine, create_session_factory
from models import Game, Team, Tournament, TournamentHostingTeam
from repositories.schema import ensure_schema


@pytest.fixture
def engine() -> Iterator[Engine]:
    engine = create_db_engine("sqlite://")
    ensure_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return create_session_factory(engine)


@pytest.fixture
def seeded_session_factory(session_factory: sessionmaker[Session]) -> sessionmaker[Session]:
    """Small league: teams 1-3 Women, 4 Men, 5 exhibition, 6 a B team of 1."""
    with session_factory() as session:
        session.add_all(
            [
                Team(team=1, name="Alpha", league="Alpha League", type="Travel Team", region="Europe", genus="Women"),
                Team(team=2, name="Bravo", league="Bravo League", type="Travel Team", region="Europe", genus="Women"),
                Team(team=3, name="Charlie", league="Charlie League", region="Northern America", genus="Women"),
                Team(team=4, name="Delta", league="Delta League", region="Europe", genus="Men"),
                Team(team=5, name="Echo All Stars", type="Exhibition Team", region="Europe", genus="Women"),
                Team(team=6, name="Alpha B", parent_team=1, league="Own League", region="Europe", genus="Women"),
                Tournament(tournament=10, name="Alpha Invitational"),
                TournamentHostingTeam(tournament=10, team=1),
            ]
        )
        session.flush()
        session.add_all(
            [
                Game(game=1, day=date(2024, 1, 10), time="18:00", home_team=1, away_team=2,
                     home_score=150, away_score=100, tournament=10),
                Game(game=2, day=date(2024, 1, 10), time="14:00", home_team=2, away_team=3,
                     home_score=120, away_score=130),
                Game(game=3, day=date(2024, 1, 5), home_team=3, away_team=1),
                Game(game=4, day=date(2024, 1, 6), home_team=1, away_team=5,
                     home_score=200, away_score=50),
                Game(game=5, day=date(2024, 1, 7), home_team=1, away_team=4,
                     home_score=180, away_score=90),
                Game(game=6, day=date(2024, 1, 8), home_team=1, away_team=2,
                     home_score=170, away_score=60, ruleset="MRDA"),
                Game(game=7, day=date(2024, 1, 10), time="18:00", home_team=2, away_team=1,
                     home_score=110, away_score=115, tournament=10),
                Game(game=8, day=date(2030, 1, 1), home_team=4, away_team=3),
            ]
        )
        session.commit()
    return session_factory
