"""Loader for the reference tables shipped inside the package."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from retirecast.utils.exceptions import ConfigError

TABLES_DIR = Path(__file__).resolve().parent.parent / "tables"


def load_yaml(path: Path) -> Any:
    """Parse a YAML file with the safe loader."""
    with open(path) as f:
        return yaml.safe_load(f)


def load_table(name: str, required: tuple[str, ...] = ()) -> dict[str, Any]:
    """Load ``tables/<name>.yaml`` as a mapping.

    Args:
        name: Table name without extension, e.g. ``"rmd_divisors"``.
        required: Top-level keys the caller reads.

    Raises:
        ConfigError: If the table is missing, is not a mapping, or lacks a
            required key.
    """
    path = TABLES_DIR / f"{name}.yaml"
    try:
        data = load_yaml(path)
    except FileNotFoundError as exc:
        raise ConfigError(f"reference table not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"reference table {name!r} is not valid YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"reference table {name!r} must be a mapping")
    missing = [key for key in required if key not in data]
    if missing:
        raise ConfigError(f"reference table {name!r} is missing {', '.join(missing)}")
    return data
