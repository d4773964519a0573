"""Shared TOML config-loading utilities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, TypeVar
import tomllib


@dataclass(frozen=True)
class BaseSystemConfig:
    """Metadata shared by every ladder system config."""

    name: str
    description: str | None
    file_path: Path
    active_window_days: int

    def as_config_json(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "active_window_days": self.active_window_days,
        }


T = TypeVar("T", bound=BaseSystemConfig)


def load_system_config(
    file_path: Path,
    parser: Callable[[dict[str, Any], Path], T],
) -> T:
    """Load one TOML config file."""
    if not file_path.is_file():
        raise FileNotFoundError(f"Config file not found: {file_path}")
    with file_path.open("rb") as file:
        raw = tomllib.load(file)
    return parser(raw, file_path)


def load_system_configs(
    config_dir: Path,
    parser: Callable[[dict[str, Any], Path], T],
    *,
    duplicate_name_label: str = "ladder",
) -> list[T]:
    """Load all TOML files in a directory with duplicate-name validation."""
    if not config_dir.exists():
        raise FileNotFoundError(f"Config directory not found: {config_dir}")
    if not config_dir.is_dir():
        raise NotADirectoryError(f"Config path is not a directory: {config_dir}")

    config_files = sorted(config_dir.glob("*.toml"))
    if not config_files:
        raise ValueError(f"No .toml config files found in: {config_dir}")

    systems = [load_system_config(file_path, parser) for file_path in config_files]

    names = [system.name for system in systems]
    if len(names) != len(set(names)):
        raise ValueError(
            f"Duplicate {duplicate_name_label} system names found in {config_dir}: {names}"
        )

    return systems


__all__ = ["BaseSystemConfig", "load_system_config", "load_system_configs"]
