"""Public API for reference-corpus profiling."""

from capcolor.core.profiling.analyzer import (
    TOP_COLORS_LIMIT,
    PatternAnalyzer,
    most_common_color,
)

__all__ = [
    "TOP_COLORS_LIMIT",
    "PatternAnalyzer",
    "most_common_color",
]
