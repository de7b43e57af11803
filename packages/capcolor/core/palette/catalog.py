"""Color code table: GMK color codes <-> hex values.

The table is built per call from two sources. Corpus colors come first and
keep the first hex value seen for each code; the static reference table
below fills in standard codes the corpus does not define.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import logging

from capcolor.core.errors import UnresolvedColorError
from capcolor.core.models.colors import ColorInput
from capcolor.core.models.corpus import Keycap
from capcolor.core.palette.color_math import RGB, hex_to_rgb, rgb_distance

logger = logging.getLogger(__name__)

# Returned by code_of when the table has no usable entries
DEFAULT_CODE = "CR"

# Standard GMK color codes (https://matrixzj.github.io/docs/gmk-keycaps/ColorCodes/)
STANDARD_GMK_COLORS: dict[str, str] = {
    "CR": "#171718",
    "N9": "#393b3b",
    "CC": "#67635b",
    "2B": "#727474",
    "BJ": "#91867a",
    "CB": "#9b9284",
    "U9": "#aca693",
    "L9": "#d8d2c3",
    "T9": "#c3c3ba",
    "3K": "#ccc6c0",
    "2M": "#c6c9c7",
    "GR1": "#c5c7ca",
    "CP": "#e1dbd1",
    "WS1": "#f7f2ea",
    "WS4": "#eee2d0",
    "BR1": "#653c25",
    "N7": "#00773a",
    "AE": "#689b34",
    "3B": "#768e72",
    "3A": "#7fa580",
    "V4": "#00589f",
    "N5": "#0084c2",
    "TU1": "#00627a",
    "TU2": "#00a4a9",
    "DY": "#5d437e",
    "RO1": "#8d242f",
    "P3": "#bc251e",
    "V1": "#d02f1c",
    "RO2": "#dd1126",
    "3C": "#c87e74",
    "MG1": "#cb3d6e",
    "V2": "#ee6900",
    "N6": "#e5a100",
    "CV": "#f8c200",
    "GE1": "#ebd400",
}


class ColorTable:
    """Bidirectional lookup between color codes and hex values.

    Iteration order is corpus codes in scan order, then static codes the
    corpus did not define. Nearest-code ties resolve in that order.

    Example:
        >>> table = ColorTable.from_corpus([])
        >>> table.hex_of("CR")
        '#171718'
        >>> table.code_of("#000000")
        'CR'
    """

    def __init__(self, entries: dict[str, str]) -> None:
        self._hex: dict[str, str] = dict(entries)

    @classmethod
    def from_corpus(
        cls,
        corpus: Iterable[Keycap],
        static: dict[str, str] | None = None,
    ) -> ColorTable:
        """Build a table from corpus color vocabularies plus the static table.

        Args:
            corpus: Keycap records to scan.
            static: Reference table for codes missing from the corpus.
                Defaults to ``STANDARD_GMK_COLORS``.
        """
        entries: dict[str, str] = {}
        for keycap in corpus:
            for color in keycap.colors:
                if color.gmk_code is False or not color.hex:
                    continue
                if color.code not in entries:
                    entries[color.code] = color.hex

        corpus_count = len(entries)
        for code, hex_value in (STANDARD_GMK_COLORS if static is None else static).items():
            entries.setdefault(code, hex_value)

        logger.debug(
            "Built color table: %d codes (%d from corpus)",
            len(entries),
            corpus_count,
        )
        return cls(entries)

    def hex_of(self, code: str) -> str | None:
        """Hex value of a code, or None if unknown."""
        return self._hex.get(code)

    def get(self, code: str) -> str:
        """Hex value of a code.

        Raises:
            UnresolvedColorError: If the code is unknown.
        """
        hex_value = self._hex.get(code)
        if hex_value is None:
            raise UnresolvedColorError(code)
        return hex_value

    def resolve_hex(self, color: ColorInput | str) -> str | None:
        """Hex form of a requested or corpus color.

        A requested color is resolved by its kind: hex values are returned
        as-is, codes go through the table. Untyped corpus strings count as
        hex when they start with ``#``.
        """
        if isinstance(color, ColorInput):
            return color.value if color.is_hex else self._hex.get(color.value)
        if color.startswith("#"):
            return color
        return self._hex.get(color)

    def rgb_of(self, color: ColorInput | str) -> RGB | None:
        hex_value = self.resolve_hex(color)
        if hex_value is None:
            return None
        return hex_to_rgb(hex_value)

    def describe(self, color: ColorInput | str) -> str:
        """Hex value for display, passing unknown codes through unchanged."""
        hex_value = self.resolve_hex(color)
        if hex_value is None:
            value = color.value if isinstance(color, ColorInput) else color
            logger.debug("Color code '%s' not in table, passing through", value)
            return value
        return hex_value

    def code_of(self, hex_color: str) -> str:
        """Nearest code to a hex color by Euclidean RGB distance.

        Ties resolve to the first code in table order. Falls back to
        ``DEFAULT_CODE`` when nothing is comparable.
        """
        target = hex_to_rgb(hex_color)
        best_code = DEFAULT_CODE
        min_distance = float("inf")
        for code, hex_value in self._hex.items():
            distance = rgb_distance(target, hex_to_rgb(hex_value))
            if distance < min_distance:
                min_distance = distance
                best_code = code
        return best_code

    def to_code(self, color: ColorInput) -> str:
        """Symbolic code for a requested color (hex reduced to the nearest code)."""
        if color.is_hex:
            return self.code_of(color.value)
        return color.value

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._hex.items())

    def __contains__(self, code: object) -> bool:
        return code in self._hex

    def __len__(self) -> int:
        return len(self._hex)
