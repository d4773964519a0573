"""Schema creation for the game/team store."""

from __future__ import annotations

from sqlalchemy.engine import Engine

from models import Base


def ensure_schema(engine: Engine) -> None:
    """Create all tables and indexes if they do not exist."""
    Base.metadata.create_all(bind=engine)
