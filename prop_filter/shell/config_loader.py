"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

The Config model is defined in prop_filter/core/config.py.
"""

import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from prop_filter.core.config import DEFAULT_LIGHTING_LEVELS, Config


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "config/config.yaml"


def _parse_lighting_levels(value: Any) -> tuple[str, ...]:
    """Parse lighting levels from a list or comma-separated string."""
    if value is None:
        return DEFAULT_LIGHTING_LEVELS
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(",") if part.strip())
    return tuple(str(v) for v in value)


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    Pure function.

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    defaults = Config()

    return Config(
        properties_path=str(data.get("properties_path", defaults.properties_path)),
        lighting_levels=_parse_lighting_levels(data.get("lighting_levels")),
        log_level=str(data.get("log_level", defaults.log_level)).upper(),
        show_summary=bool(data.get("show_summary", defaults.show_summary)),
    )


def apply_env_overrides(config: Config) -> Config:
    """Override config values from environment variables.

    Environment variables:
        PROPERTIES_PATH: Path to the property dataset
        LOG_LEVEL: Logging level name

    Returns:
        New Config with overrides applied
    """
    overrides: dict[str, Any] = {}

    properties_path = os.environ.get("PROPERTIES_PATH")
    if properties_path:
        overrides["properties_path"] = properties_path

    log_level = os.environ.get("LOG_LEVEL")
    if log_level:
        overrides["log_level"] = log_level.upper()

    if overrides:
        logger.debug("Applying environment overrides: %s", sorted(overrides))
        return replace(config, **overrides)

    return config


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", DEFAULT_CONFIG_PATH)

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: dataset %s, %d lighting levels",
        config.properties_path,
        len(config.lighting_levels),
    )

    return config
