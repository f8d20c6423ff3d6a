# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Configuration loading

User settings live in a TOML file merged over DEFAULTS. Command-line
flags override both.

Copyright 2025 DNAi inc.
"""

import copy
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from imgmd.exceptions import ConfigError

CONFIG_ENV_VAR = "IMGMD_CONFIG"

DEFAULTS: Dict[str, Any] = {
    "include": {"exif": True, "iptc": True, "tiff": True, "gps": True},
    "output": {"indent": 2},
    "logging": {"level": "warning"},
}


def default_config_path() -> Path:
    """$IMGMD_CONFIG if set, otherwise ~/.config/imgmd/config.toml."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".config" / "imgmd" / "config.toml"


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge two dictionaries without mutating the originals."""
    merged: Dict[str, Any] = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load a TOML config file and merge it over defaults.

    Args:
        path: Config file; defaults to default_config_path()

    Returns:
        Merged configuration. A missing file yields a copy of DEFAULTS.

    Raises:
        IsADirectoryError: If the path is a directory
        ConfigError: If the file is not valid TOML or a setting has the
            wrong type
    """
    path = Path(path) if path is not None else default_config_path()
    if path.is_dir():
        raise IsADirectoryError(f"Config path points to a directory: {path}")

    user_config: Dict[str, Any] = {}
    if path.exists():
        try:
            with path.open("rb") as fh:
                user_config = tomllib.load(fh)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e

    config = _deep_merge(DEFAULTS, user_config)
    _validate(config, path)
    return config


def _validate(config: Dict[str, Any], path: Path) -> None:
    """
    Check the types of the settings imgmd reads.

    Raises:
        ConfigError: If a section or value has the wrong type
    """
    for section in DEFAULTS:
        if not isinstance(config[section], dict):
            raise ConfigError(f"Invalid config file {path}: [{section}] must be a table")

    for family, value in config["include"].items():
        if not isinstance(value, bool):
            raise ConfigError(f"Invalid config file {path}: include.{family} must be true or false")

    indent = config["output"]["indent"]
    if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
        raise ConfigError(f"Invalid config file {path}: output.indent must be a non-negative integer")

    if not isinstance(config["logging"]["level"], str):
        raise ConfigError(f"Invalid config file {path}: logging.level must be a string")
