"""Load ladder system definitions from TOML files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from domain.config_base import BaseSystemConfig, load_system_config, load_system_configs
from ranking.ranker import RankerParameters

ROOT_DIR = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG_DIR = ROOT_DIR / "configs" / "ranking"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "default.toml"


@dataclass(frozen=True)
class RankingSystemConfig(BaseSystemConfig):
    """Configuration for one ladder computation."""

    parameters: RankerParameters

    def as_config_json(self) -> dict[str, Any]:
        return {
            **super().as_config_json(),
            "initial_rating": self.parameters.initial_rating,
            "k_factor": self.parameters.k_factor,
            "scale_factor": self.parameters.scale_factor,
            "home_advantage": self.parameters.home_advantage,
            "margin_scale": self.parameters.margin_scale,
            "tournament_multiplier": self.parameters.tournament_multiplier,
        }


def load_ranking_config(file_path: Path) -> RankingSystemConfig:
    """Load and validate one ladder system TOML file."""
    return load_system_config(file_path, _parse_ranking_config)


def load_ranking_configs(config_dir: Path) -> list[RankingSystemConfig]:
    """Load and validate all ladder system TOML files in a directory."""
    return load_system_configs(
        config_dir,
        _parse_ranking_config,
        duplicate_name_label="ranking",
    )


def _parse_ranking_config(raw: dict[str, Any], file_path: Path) -> RankingSystemConfig:
    system_raw = raw.get("system", {})
    ranking_raw = raw.get("ranking", {})

    name = str(system_raw.get("name", "")).strip()
    if not name:
        raise ValueError(f"{file_path}: [system].name is required")

    description_value = system_raw.get("description")
    description = None if description_value is None else str(description_value)

    active_window_days = int(system_raw.get("active_window_days", 365))
    if active_window_days < 0:
        raise ValueError(f"{file_path}: [system].active_window_days must be >= 0")

    try:
        parameters = RankerParameters(
            initial_rating=int(ranking_raw.get("initial_rating", 0)),
            k_factor=float(ranking_raw.get("k_factor", 400.0)),
            scale_factor=float(ranking_raw.get("scale_factor", 4000.0)),
            home_advantage=float(ranking_raw.get("home_advantage", 300.0)),
            margin_scale=float(ranking_raw.get("margin_scale", 100.0)),
            tournament_multiplier=float(ranking_raw.get("tournament_multiplier", 1.25)),
        )
    except ValueError as exc:
        raise ValueError(f"{file_path}: [ranking].{exc}") from exc

    return RankingSystemConfig(
        name=name,
        description=description,
        file_path=file_path,
        active_window_days=active_window_days,
        parameters=parameters,
    )

