"""Exception hierarchy for the color-group engine."""

from __future__ import annotations


class CapColorError(Exception):
    """Base class for all capcolor errors."""


class InvalidInputError(CapColorError, ValueError):
    """Raised when a color request is rejected before any processing.

    Covers an empty color list, a list longer than the configured limit,
    and color entries missing their kind tag or value.
    """


class UnresolvedColorError(CapColorError, KeyError):
    """Raised when a symbolic color code has no known hex value."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Unknown color code: {code}")
        self.code = code
