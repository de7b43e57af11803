"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from capcolor.core.config.models import AppConfig
from capcolor.core.utils.logging import configure_logging as _configure_logging

logger = logging.getLogger(__name__)

# Overrides AppConfig.corpus_path when set
CORPUS_PATH_ENV = "CAPCOLOR_CORPUS_PATH"


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("capcolor.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    if suffix in (".yaml", ".yml"):
        return "yaml"
    raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load a raw configuration mapping from JSON or YAML.

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)
    with path.open("r", encoding="utf-8") as f:
        if fmt == "json":
            try:
                content = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {path}: {e}") from e
        else:
            try:
                content = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e

    # safe_load returns None for empty files
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    A missing file yields all defaults. ``CAPCOLOR_CORPUS_PATH`` overrides
    the configured corpus path.

    Args:
        path: Path to app config file (.json, .yaml, or .yml).
              Defaults to ``AppConfig.default_path()``.

    Returns:
        Validated AppConfig instance

    Raises:
        ValidationError: If config is invalid
    """
    path = Path(path) if path is not None else AppConfig.default_path()

    if path.exists():
        config = AppConfig.model_validate(load_config(path))
    else:
        logger.debug("No config file at %s, using defaults", path)
        config = AppConfig()

    corpus_override = os.getenv(CORPUS_PATH_ENV)
    if corpus_override:
        logger.debug("Loaded %s from environment", CORPUS_PATH_ENV)
        config = config.model_copy(update={"corpus_path": corpus_override})

    return config


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()

    _configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )
