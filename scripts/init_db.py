#!/usr/bin/env python3
"""Create the game/team store schema."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from db import DEFAULT_DB_URL, create_db_engine
from repositories.schema import ensure_schema

app = typer.Typer(add_completion=False, help="Database setup.")


@app.command()
def init_db(
    db_url: Annotated[
        str,
        typer.Option("--db-url", help="Database URL. Defaults to ./rankings.db."),
    ] = DEFAULT_DB_URL,
) -> None:
    """Create missing tables and indexes."""
    engine = create_db_engine(db_url)
    ensure_schema(engine)
    typer.echo(f"schema ready db_url={db_url}")


if __name__ == "__main__":
    app()
