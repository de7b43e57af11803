"""Color-group generation facade.

Validates a request, builds the per-call lookup tables and dispatches to
either the reference-layout remapper or the learned-pattern engine:

    request + corpus
        -> ColorTable (per call)
        -> reference layout found?  BaseImageRemapper
           otherwise                PatternAnalyzer + MatchingEngine
        -> GenerationResult
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from capcolor.core.caching.keys import color_cache_key
from capcolor.core.config.models import EngineConfig
from capcolor.core.corpus.loader import find_reference_layout
from capcolor.core.errors import InvalidInputError
from capcolor.core.matching.engine import MatchingEngine
from capcolor.core.matching.remapper import BaseImageRemapper
from capcolor.core.models.assignment import Assignment
from capcolor.core.models.colors import ColorInput
from capcolor.core.models.corpus import Keycap, KeycapColorGroup
from capcolor.core.models.request import (
    AssignmentStrategy,
    GenerationRequest,
    GenerationResult,
)
from capcolor.core.palette.catalog import ColorTable
from capcolor.core.profiling.analyzer import PatternAnalyzer
from capcolor.core.utils.logging import get_logger, log_performance


class ColorGroupGenerator:
    """Entry point for turning requested colors into group assignments.

    Holds only configuration; every call builds its own tables from the
    corpus it is given, so one instance can serve concurrent callers.

    Args:
        config: Engine settings (defaults if None).

    Example:
        >>> generator = ColorGroupGenerator()
        >>> result = generator.generate(GenerationRequest(colors=["CR", "N9"]), corpus)
        >>> result.assignment.to_color_groups()
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self._config = config or EngineConfig()

    @property
    def config(self) -> EngineConfig:
        return self._config

    def parse_colors(self, request: GenerationRequest) -> list[ColorInput]:
        """Validate and tag the requested colors.

        ``colors`` wins over the legacy ``color_codes`` field.

        Raises:
            InvalidInputError: On an empty or oversized list, or a bad entry.
        """
        for name, value in (("colors", request.colors), ("colorCodes", request.color_codes)):
            if isinstance(value, (str, bytes)):
                raise InvalidInputError(f"{name} must be an array, not a string")

        raw: list[Any]
        field = "colors"
        if request.colors:
            raw = list(request.colors)
        elif request.color_codes:
            field = "colorCodes"
            raw = list(request.color_codes)
        else:
            raise InvalidInputError(
                "colors or colorCodes is required and must be a non-empty array"
            )

        if len(raw) > self._config.max_colors:
            raise InvalidInputError(f"{field} must not exceed {self._config.max_colors} items")

        if field == "colorCodes":
            for code in raw:
                if not isinstance(code, str) or not code.strip():
                    raise InvalidInputError("Each color code must be a non-empty string")
            return [ColorInput.symbolic(code.strip()) for code in raw]
        return [ColorInput.parse(entry) for entry in raw]

    @log_performance
    def generate(self, request: GenerationRequest, corpus: Iterable[Keycap]) -> GenerationResult:
        """Produce group assignments for a request.

        Args:
            request: Requested colors and optional reference layout.
            corpus: Reference keycap records (read only).

        Returns:
            Assignment, strategy used, and cache key.

        Raises:
            InvalidInputError: If the requested colors are invalid.
        """
        colors = self.parse_colors(request)
        corpus = list(corpus)
        table = ColorTable.from_corpus(corpus)
        cache_key = color_cache_key(colors, table)
        request_logger = get_logger(__name__, cache_key=cache_key)

        use_reference = self._config.use_base_image_colors and request.use_base_image_colors
        if use_reference and request.base_layout_keycap_id:
            layout_name = request.base_layout_name or self._config.default_layout_name
            found = find_reference_layout(corpus, request.base_layout_keycap_id, layout_name)
            if found is not None:
                keycap, layout = found
                assignment = self._remapper(table).remap(layout.color_groups, colors)
                request_logger.info(
                    "Remapped reference layout %s - %s (%d groups)",
                    keycap.name,
                    layout.name,
                    len(assignment),
                )
                return GenerationResult(
                    assignment=assignment,
                    strategy=AssignmentStrategy.BASE_LAYOUT,
                    reference=f"{keycap.name} - {layout.name}",
                    base_color_groups=layout.color_groups,
                    cache_key=cache_key,
                )

        distributions = PatternAnalyzer(self._config.top_colors_limit).analyze(corpus)
        match = self._engine(table).match(colors, corpus, distributions)
        request_logger.info(
            "Assigned %d groups via %s",
            len(match.assignment),
            match.strategy.value,
        )
        return GenerationResult(
            assignment=match.assignment,
            strategy=match.strategy,
            reference=match.pattern.label if match.pattern is not None else None,
            cache_key=cache_key,
        )

    def assign(self, colors: Sequence[ColorInput], corpus: Iterable[Keycap]) -> Assignment:
        """Learned-pattern assignment for already-tagged colors."""
        corpus = list(corpus)
        table = ColorTable.from_corpus(corpus)
        distributions = PatternAnalyzer(self._config.top_colors_limit).analyze(corpus)
        return self._engine(table).assign(colors, corpus, distributions)

    def remap(
        self,
        reference_groups: Sequence[KeycapColorGroup],
        colors: Sequence[ColorInput],
        corpus: Iterable[Keycap] = (),
    ) -> Assignment:
        """Reference-layout assignment for already-tagged colors."""
        table = ColorTable.from_corpus(corpus)
        return self._remapper(table).remap(reference_groups, colors)

    def _engine(self, table: ColorTable) -> MatchingEngine:
        return MatchingEngine(table, priority_groups=self._config.priority_groups)

    def _remapper(self, table: ColorTable) -> BaseImageRemapper:
        return BaseImageRemapper(table, contrast_threshold=self._config.contrast_threshold)
