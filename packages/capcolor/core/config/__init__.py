"""Configuration management for capcolor."""

from capcolor.core.config.loader import (
    CORPUS_PATH_ENV,
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from capcolor.core.config.models import AppConfig, EngineConfig, LoggingConfig

__all__ = [
    # Loaders
    "load_config",
    "load_app_config",
    "detect_format",
    "configure_logging",
    "CORPUS_PATH_ENV",
    # Models
    "AppConfig",
    "EngineConfig",
    "LoggingConfig",
]
