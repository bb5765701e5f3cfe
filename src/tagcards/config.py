"""
Loading of tagcards configuration from YAML and the environment.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .config_models import TagcardsConfig
from .errors import ConfigError

DEFAULT_CONFIG_PATH = "config.yaml"
SEPARATOR_ENV = "TAGCARDS_DEFAULT_SEPARATOR"
CONFIG_SECTION = "tagcards"


def load_config(
    config_path: str | Path = DEFAULT_CONFIG_PATH,
    overrides: Optional[Dict[str, Any]] = None,
    required: bool = True,
) -> TagcardsConfig:
    """Load and validate the tagcards configuration.

    Values from the `tagcards:` section of the YAML file are combined with
    `overrides` (non-None values win), then the separator from the
    TAGCARDS_DEFAULT_SEPARATOR environment variable is applied.

    Args:
        config_path: Path to the YAML configuration file
        overrides: Values taking precedence over the file, e.g. from CLI flags
        required: If False, a missing file is treated as an empty section

    Returns:
        Validated TagcardsConfig instance

    Raises:
        ConfigError: If the file is missing, is not valid YAML, or the
            resulting configuration does not validate
    """
    config_file = Path(config_path)
    section: Dict[str, Any] = {}

    if config_file.exists():
        try:
            yaml_data = yaml.safe_load(config_file.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_file}:\n{e}") from e
        if not isinstance(yaml_data, dict):
            raise ConfigError(f"Expected a mapping at the top of {config_file}")
        section = yaml_data.get(CONFIG_SECTION) or {}
        if not isinstance(section, dict):
            raise ConfigError(f"'{CONFIG_SECTION}' in {config_file} must be a mapping")
    elif required:
        raise ConfigError(f"Configuration file not found: {config_file}")

    data = dict(section)
    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value

    env_separator = resolve_default_separator()
    if env_separator:
        data["default_separator"] = env_separator

    try:
        return TagcardsConfig.model_validate(data)
    except ValidationError as ve:
        raise ConfigError(f"Invalid configuration in {config_file}:\n{ve}") from ve


def resolve_default_separator() -> Optional[str]:
    """Return the separator set in the environment, if any."""
    value = os.getenv(SEPARATOR_ENV, "").strip()
    return value or None
