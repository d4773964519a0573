#!/usr/bin/env python3
"""Print metadata for one team."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from db import DEFAULT_DB_URL, create_db_engine, create_session_factory
from domain.pipeline import LadderService
from ranking.ranker import RankerParameters
from repositories.errors import DataSourceError, TeamNotFoundError

app = typer.Typer(add_completion=False, no_args_is_help=True, help="Team details.")


@app.command()
def show_team(
    team_id: Annotated[int, typer.Argument(help="Team identifier.")],
    db_url: Annotated[
        str,
        typer.Option("--db-url", help="Database URL. Defaults to ./rankings.db."),
    ] = DEFAULT_DB_URL,
) -> None:
    """Look up one team's display metadata."""
    engine = create_db_engine(db_url)
    service = LadderService(create_session_factory(engine), RankerParameters())

    try:
        info = service.team(team_id)
    except TeamNotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    except DataSourceError as exc:
        typer.echo(f"error={exc}", err=True)
        raise typer.Exit(code=1) from exc

    for label, value in (
        ("team", info.team),
        ("name", info.name),
        ("league", info.league),
        ("parent_team", info.parent_team),
        ("type", info.type),
        ("location", info.location),
        ("region", info.region),
        ("genus", info.genus),
        ("website", info.website),
    ):
        typer.echo(f"{label:<12} {'' if value is None else value}")


if __name__ == "__main__":
    app()
