"""Read depcycle settings from .depcycle.toml or pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from depcycle.errors import ConfigError
from depcycle.model import DEFAULT_VENDOR_DIRS

logger = logging.getLogger(__name__)

_KNOWN_KEYS = {"include_vendored_modules", "fail_on_error", "vendor_dirs"}


@dataclass(frozen=True)
class Config:
    """Host policy: which cycles count and whether they fail the check."""

    include_vendored_modules: bool = False
    fail_on_error: bool = True
    vendor_dirs: tuple[str, ...] = DEFAULT_VENDOR_DIRS


def load_config(project_dir: Path) -> Config:
    """Return the config for *project_dir*, or defaults when none is found.

    ``.depcycle.toml`` (table ``[depcycle]``) takes precedence over
    ``[tool.depcycle]`` in ``pyproject.toml``.
    """
    table = _read_table(project_dir / ".depcycle.toml", ("depcycle",))
    if table is None:
        table = _read_table(project_dir / "pyproject.toml", ("tool", "depcycle"))
    if table is None:
        return Config()
    return config_from_table(table)


def config_from_table(table: dict[str, Any]) -> Config:
    """Validate a ``[depcycle]`` table and turn it into a :class:`Config`."""
    values: dict[str, Any] = {}

    for key in ("include_vendored_modules", "fail_on_error"):
        if key in table:
            value = table[key]
            if not isinstance(value, bool):
                raise ConfigError(f"{key} must be a boolean, got {value!r}")
            values[key] = value

    if "vendor_dirs" in table:
        dirs = table["vendor_dirs"]
        if not isinstance(dirs, list) or not all(isinstance(d, str) for d in dirs):
            raise ConfigError(f"vendor_dirs must be a list of strings, got {dirs!r}")
        values["vendor_dirs"] = tuple(dirs)

    for key in sorted(table.keys() - _KNOWN_KEYS):
        logger.warning("Ignoring unknown depcycle setting: %s", key)

    return Config(**values)


def _read_table(path: Path, keys: tuple[str, ...]) -> dict[str, Any] | None:
    if not path.exists():
        return None
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return None

    for key in keys:
        data = data.get(key)
        if not isinstance(data, dict):
            return None
    logger.debug("Loaded config from %s", path)
    return data
