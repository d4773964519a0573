#!/usr/bin/env python3
"""Print the current team ladder, optionally filtered by genus and region."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from db import DEFAULT_DB_URL, create_db_engine, create_session_factory
from domain.config import DEFAULT_CONFIG_PATH, load_ranking_config
from domain.pipeline import LadderService
from domain.query import DEFAULT_GENUS, LadderQuery
from repositories.errors import DataSourceError

app = typer.Typer(add_completion=False, help="Team ladder.")


@app.command()
def show_ladder(
    genus: Annotated[
        str,
        typer.Option("--genus", help="Women, Men, 'Open to All', or '' for all genera."),
    ] = DEFAULT_GENUS,
    region: Annotated[
        str,
        typer.Option(
            "--region",
            help="Europe, 'Northern America', 'Latin America', Pacific, or '' for any.",
        ),
    ] = "",
    top_n: Annotated[
        int,
        typer.Option("--top-n", help="Number of teams to print. Use 0 for all."),
    ] = 0,
    config: Annotated[
        Path,
        typer.Option("--config", help="Ladder system TOML file."),
    ] = DEFAULT_CONFIG_PATH,
    check_order: Annotated[
        bool,
        typer.Option("--check-order", help="Fail if games arrive out of chronological order."),
    ] = False,
    db_url: Annotated[
        str,
        typer.Option("--db-url", help="Database URL. Defaults to ./rankings.db."),
    ] = DEFAULT_DB_URL,
) -> None:
    """Rank all teams from full game history and print the ladder."""
    if top_n < 0:
        raise typer.BadParameter("--top-n must be >= 0")
    try:
        query = LadderQuery(genus=genus, region=region)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    try:
        system_config = load_ranking_config(config)
    except (FileNotFoundError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc

    engine = create_db_engine(db_url)
    service = LadderService(
        create_session_factory(engine),
        system_config.parameters,
        active_window_days=system_config.active_window_days,
        check_order=check_order,
        echo=typer.echo,
    )

    try:
        entries = service.ladder(query)
    except DataSourceError as exc:
        typer.echo(f"error={exc}", err=True)
        raise typer.Exit(code=1) from exc

    if top_n:
        entries = entries[:top_n]
    if not entries:
        typer.echo(f"No teams found for genus={query.genus!r} region={query.region!r}.")
        return

    typer.echo(f"system={system_config.name} genus={query.genus or 'all'} region={query.region or 'any'}")
    typer.echo(f"config={json.dumps(system_config.as_config_json(), sort_keys=True)}")
    for entry in entries:
        info = entry.team_info
        typer.echo(
            f"{entry.rank:4d}. {info.name or entry.team:<40} "
            f"rating={entry.rating:7.1f} league={info.league} region={info.region}"
        )


if __name__ == "__main__":
    app()
