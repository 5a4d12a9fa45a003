"""Settings — defaults, then .runcollapse/config.toml, then RUNCOLLAPSE_* env vars."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel

try:
    import tomllib
except ModuleNotFoundError:  # Python < 3.11
    import tomli as tomllib  # type: ignore[no-redef]

ENV_PREFIX = "RUNCOLLAPSE_"


class Settings(BaseModel):
    """User-tunable knobs for the CLI."""

    log_level: str = "WARNING"
    format: str = "text"
    separator: str = " "


def _load_toml(config_dir: Path | None) -> dict[str, Any]:
    toml_path = (config_dir or Path.cwd()) / ".runcollapse" / "config.toml"
    if not toml_path.is_file():
        return {}
    with open(toml_path, "rb") as f:
        data = tomllib.load(f)
    return data.get("settings", {})


def load_settings(config_dir: Path | None = None) -> Settings:
    """Merge defaults with the user's config file and environment."""
    values = _load_toml(config_dir)
    for name in Settings.model_fields:
        env_value = os.getenv(ENV_PREFIX + name.upper())
        if env_value is not None:
            values[name] = env_value
    return Settings(**values)
