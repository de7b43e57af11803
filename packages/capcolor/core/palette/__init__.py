"""Color table and color math."""

from capcolor.core.palette.catalog import DEFAULT_CODE, STANDARD_GMK_COLORS, ColorTable
from capcolor.core.palette.color_math import (
    WCAG_AA_CONTRAST,
    contrast_ratio,
    distance_matrix,
    hex_to_rgb,
    relative_luminance,
    rgb_distance,
)

__all__ = [
    "DEFAULT_CODE",
    "STANDARD_GMK_COLORS",
    "WCAG_AA_CONTRAST",
    "ColorTable",
    "contrast_ratio",
    "distance_matrix",
    "hex_to_rgb",
    "relative_luminance",
    "rgb_distance",
]
