"""Configuration loading: an optional YAML file plus environment overrides."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

CONFIG_NAME = ".ehrplus-cli"
SUPPORTED_EXTENSIONS = ("yaml", "yml", "json")


@dataclass
class Settings:
    """Loaded configuration values with environment variables taking precedence."""

    values: dict[str, Any] = field(default_factory=dict)
    environ: Mapping[str, str] = field(default_factory=dict)
    config_file: Path | None = None

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted, case-insensitive key; an upper-case env var wins."""
        env_value = self.environ.get(key.upper())
        if env_value is not None:
            return env_value
        node: Any = self.values
        for part in key.lower().split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node


def _normalise(data: Any) -> Any:
    if isinstance(data, dict):
        return {str(k).lower(): _normalise(v) for k, v in data.items()}
    return data


def _candidates(home: Path):
    for ext in SUPPORTED_EXTENSIONS:
        yield home / f"{CONFIG_NAME}.{ext}"
    yield home / CONFIG_NAME


def default_config_path(home: str | os.PathLike | None = None) -> Path | None:
    """Return the first configuration file found in the home directory, if any."""
    base = Path(home) if home is not None else Path.home()
    return next((path for path in _candidates(base) if path.is_file()), None)


def _read(path: Path) -> dict[str, Any] | None:
    try:
        with path.open(encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except (OSError, yaml.YAMLError, UnicodeDecodeError):
        return None
    if data is None:
        return {}
    if not isinstance(data, dict):
        return None
    return _normalise(data)


def load_config(
    config_file: str | os.PathLike | None = None,
    environ: Mapping[str, str] | None = None,
    home: str | os.PathLike | None = None,
) -> Settings:
    """Load settings from an explicit file or the home directory.

    A file that is missing or unreadable is ignored; ``config_file`` on the
    result is set only when a file was actually read.
    """
    env = dict(os.environ if environ is None else environ)
    path: Path | None
    if config_file:
        path = Path(config_file)
        if path.suffix.lstrip(".").lower() not in SUPPORTED_EXTENSIONS:
            path = None
    else:
        path = default_config_path(home)

    data = _read(path) if path is not None else None
    if data is None:
        return Settings(values={}, environ=env, config_file=None)
    return Settings(values=data, environ=env, config_file=path)