"""Helpers for reading and validating configuration files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml
from loguru import logger
from pydantic import ValidationError

from .main import Config


def read_yaml(config_path: str | Path) -> Dict[str, Any]:
    """
    Read a YAML configuration file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Parsed mapping (empty if the file is empty)

    Raises:
        FileNotFoundError: If the file does not exist
        yaml.YAMLError: If the file is not valid YAML
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    content = path.read_text(encoding="utf-8")
    data = yaml.safe_load(content)
    return data or {}


def validate_config(config_data: Dict[str, Any]) -> Config:
    """
    Validate configuration data against the Config model.

    Raises:
        pydantic.ValidationError: If the configuration is invalid
    """
    try:
        return Config.model_validate(config_data)
    except ValidationError as e:
        logger.error(f"❌ Invalid configuration: {e}")
        raise


def load_config(config_path: str | Path) -> Config:
    """Read and validate a YAML configuration file."""
    config = validate_config(read_yaml(config_path))
    logger.info(f"⚙️ Loaded configuration from {config_path}")
    return config
