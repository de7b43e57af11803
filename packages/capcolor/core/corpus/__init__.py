"""Reference corpus I/O."""

from capcolor.core.corpus.loader import (
    DEFAULT_LAYOUT_NAME,
    find_keycap,
    find_layout,
    find_reference_layout,
    load_corpus,
    parse_corpus,
)

__all__ = [
    "DEFAULT_LAYOUT_NAME",
    "find_keycap",
    "find_layout",
    "find_reference_layout",
    "load_corpus",
    "parse_corpus",
]
