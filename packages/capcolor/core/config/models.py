"""Configuration models for capcolor."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from capcolor.core.matching.engine import PRIORITY_GROUPS
from capcolor.core.palette.color_math import WCAG_AA_CONTRAST
from capcolor.core.profiling.analyzer import TOP_COLORS_LIMIT


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file path (stdout if None)")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.upper()
        return v


class EngineConfig(BaseModel):
    """Color assignment engine settings.

    Example:
        >>> EngineConfig().max_colors
        10
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_colors: int = Field(default=10, gt=0, description="Maximum requested colors per call")

    contrast_threshold: float = Field(
        default=WCAG_AA_CONTRAST,
        ge=1.0,
        le=21.0,
        description="Legend/body contrast ratio the legend search aims for",
    )

    top_colors_limit: int = Field(
        default=TOP_COLORS_LIMIT, gt=0, description="Colors kept per group distribution"
    )

    priority_groups: tuple[str, ...] = Field(
        default=PRIORITY_GROUPS,
        description="Group order for frequency-based placement",
    )

    default_layout_name: str = Field(
        default="Base", min_length=1, description="Reference layout used when none is named"
    )

    use_base_image_colors: bool = Field(
        default=True, description="Honor reference layouts named in requests"
    )


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    corpus_path: str = Field(
        default="data/gmk_keycaps.json", description="Reference corpus JSON file"
    )
    engine: EngineConfig = EngineConfig()
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("capcolor.yaml")
