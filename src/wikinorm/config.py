"""Configuration loader for wikinorm.toml."""

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

from .errors import ConfigError
from .normal import NormalizeOptions

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "wikinorm.toml"


def load_config(config_path: Path | None = None) -> NormalizeOptions:
    """
    Load normalization options from wikinorm.toml.
    
    Search order:
    1. config_path (if provided)
    2. cwd/wikinorm.toml
    
    Args:
        config_path: Explicit path to config file
    
    Returns:
        NormalizeOptions with resolved settings
    
    Raises:
        ConfigError: If the [normalize] table has unknown keys or non-boolean values
    """
    toml_data: dict[str, Any] = {}
    
    search_paths = []
    if config_path:
        search_paths.append(Path(config_path))
    search_paths.append(Path.cwd() / CONFIG_FILENAME)
    
    for path in search_paths:
        if path.exists():
            with open(path, "rb") as f:
                toml_data = tomllib.load(f)
            logger.debug("Loaded normalization config from %s", path)
            break
    else:
        logger.debug("No %s found, using default options", CONFIG_FILENAME)
    
    normalize_data = toml_data.get("normalize", {})
    if not isinstance(normalize_data, dict):
        raise ConfigError("[normalize] must be a table")
    
    known = {f.name for f in fields(NormalizeOptions)}
    unknown = sorted(set(normalize_data) - known)
    if unknown:
        raise ConfigError(f"Unknown [normalize] option(s): {', '.join(unknown)}")
    
    for key, value in normalize_data.items():
        if not isinstance(value, bool):
            raise ConfigError(
                f"[normalize] {key} must be a boolean, got {type(value).__name__}"
            )
    
    return NormalizeOptions(**normalize_data)
