"""Cache key helpers for consumers of engine output."""

from capcolor.core.caching.keys import KEY_LENGTH, color_cache_key, compute_color_key

__all__ = [
    "KEY_LENGTH",
    "color_cache_key",
    "compute_color_key",
]
