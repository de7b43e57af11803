"""RGB distance and WCAG contrast helpers."""

from __future__ import annotations

from collections.abc import Sequence
import math

import numpy as np

RGB = tuple[int, int, int]

# WCAG AA minimum contrast for normal text
WCAG_AA_CONTRAST = 4.5

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def hex_to_rgb(hex_color: str) -> RGB | None:
    """Parse ``#RRGGBB`` (leading ``#`` optional) into an RGB triple.

    Returns:
        (r, g, b) with channels in 0-255, or None if the string is not a
        six-digit hex color.
    """
    stripped = hex_color.strip().lstrip("#")
    if len(stripped) != 6 or not all(c in _HEX_DIGITS for c in stripped):
        return None
    return (
        int(stripped[0:2], 16),
        int(stripped[2:4], 16),
        int(stripped[4:6], 16),
    )


def rgb_distance(a: RGB | None, b: RGB | None) -> float:
    """Euclidean distance in RGB space; infinite when either side is unknown."""
    if a is None or b is None:
        return math.inf
    return math.sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2 + (a[2] - b[2]) ** 2)


def distance_matrix(rows: Sequence[RGB | None], cols: Sequence[RGB | None]) -> np.ndarray:
    """Pairwise RGB distances, shape ``(len(rows), len(cols))``.

    Unknown colors yield ``inf`` in every cell of their row or column.
    """
    if not rows or not cols:
        return np.full((len(rows), len(cols)), np.inf)

    a = np.array([r if r is not None else (np.nan,) * 3 for r in rows], dtype=float)
    b = np.array([c if c is not None else (np.nan,) * 3 for c in cols], dtype=float)
    dist = np.sqrt(((a[:, None, :] - b[None, :, :]) ** 2).sum(axis=2))
    result: np.ndarray = np.where(np.isnan(dist), np.inf, dist)
    return result


def _linearize(channel: int) -> float:
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: RGB) -> float:
    """WCAG relative luminance of an sRGB color."""
    r, g, b = (_linearize(v) for v in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(a: RGB | None, b: RGB | None) -> float:
    """WCAG contrast ratio in ``[1, 21]``; 0 when either color is unknown.

    Example:
        >>> contrast_ratio((0, 0, 0), (255, 255, 255))
        21.0
    """
    if a is None or b is None:
        return 0.0
    l1 = relative_luminance(a)
    l2 = relative_luminance(b)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)
