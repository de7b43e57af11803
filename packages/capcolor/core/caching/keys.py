"""Order-independent cache keys for requested color lists.

Downstream consumers cache expensive work (image synthesis) per color
combination. Hex inputs are reduced to their nearest color code first, so
near-identical hex values share a key.
"""

from __future__ import annotations

from collections.abc import Sequence
import hashlib

from capcolor.core.models.colors import ColorInput
from capcolor.core.palette.catalog import ColorTable

# Hex digits kept from the SHA-256 digest
KEY_LENGTH = 16


def compute_color_key(codes: Sequence[str]) -> str:
    """Hash a list of color codes, ignoring order.

    Example:
        >>> compute_color_key(["N9", "CR"]) == compute_color_key(["CR", "N9"])
        True
    """
    joined = ",".join(sorted(codes))
    return hashlib.sha256(joined.encode("utf-8")).hexdigest()[:KEY_LENGTH]


def color_cache_key(requested: Sequence[ColorInput], table: ColorTable) -> str:
    """Cache key for a request: codes of all requested colors, sorted and hashed."""
    return compute_color_key([table.to_code(color) for color in requested])
