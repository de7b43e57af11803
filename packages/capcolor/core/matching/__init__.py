"""Color assignment strategies."""

from capcolor.core.matching.engine import (
    PRIORITY_GROUPS,
    MatchingEngine,
    MatchResult,
    legend_for,
)
from capcolor.core.matching.remapper import BaseImageRemapper

__all__ = [
    "PRIORITY_GROUPS",
    "BaseImageRemapper",
    "MatchResult",
    "MatchingEngine",
    "legend_for",
]
