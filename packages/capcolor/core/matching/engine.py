"""Learned-pattern color assignment.

Two strategies, tried in order:

1. Pattern match: find corpus layouts using exactly as many distinct body
   colors as were requested, pick the one whose colors are closest to the
   request, and substitute requested colors into its groups.
2. Frequency fallback: walk groups in priority order and give each the
   unused requested color closest to the group's most common historical
   body color.

All nearest-neighbor steps are greedy and order-sensitive (first strictly
smaller distance wins). This is not an optimal bipartite assignment.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
import logging
import math

from capcolor.core.models.assignment import Assignment
from capcolor.core.models.colors import ColorInput
from capcolor.core.models.corpus import Keycap, ReferencePattern
from capcolor.core.models.distribution import Distribution
from capcolor.core.models.request import AssignmentStrategy
from capcolor.core.palette.catalog import ColorTable
from capcolor.core.palette.color_math import RGB, distance_matrix, rgb_distance

logger = logging.getLogger(__name__)

PRIORITY_GROUPS: tuple[str, ...] = ("alpha", "modifier", "num", "function", "nav", "special")

# Group whose legend takes the second requested color
_ALPHA_GROUP = "alpha"


@dataclass(frozen=True)
class MatchResult:
    """Assignment plus the path that produced it."""

    assignment: Assignment
    strategy: AssignmentStrategy
    pattern: ReferencePattern | None = None


class MatchingEngine:
    """Assigns requested colors to groups using learned corpus patterns.

    Args:
        table: Color table used to resolve codes to RGB.
        priority_groups: Group order for the frequency fallback.
    """

    def __init__(
        self,
        table: ColorTable,
        priority_groups: Sequence[str] = PRIORITY_GROUPS,
    ) -> None:
        self._table = table
        self._priority_groups = tuple(priority_groups)

    def assign(
        self,
        requested: Sequence[ColorInput],
        corpus: Iterable[Keycap],
        distributions: dict[str, Distribution],
    ) -> Assignment:
        """Assign requested colors to groups.

        Args:
            requested: Requested colors, in caller order.
            corpus: Reference keycap records.
            distributions: Per-group distributions from PatternAnalyzer.

        Returns:
            Ordered assignment; empty when nothing was requested.
        """
        return self.match(requested, corpus, distributions).assignment

    def match(
        self,
        requested: Sequence[ColorInput],
        corpus: Iterable[Keycap],
        distributions: dict[str, Distribution],
    ) -> MatchResult:
        """Same as :meth:`assign`, also reporting the strategy used."""
        colors = list(requested)
        if not colors:
            return MatchResult(Assignment(), AssignmentStrategy.FREQUENCY_FALLBACK)

        candidates = self.find_matching_patterns(corpus, len(colors))
        if candidates:
            best = self.select_best_pattern(colors, candidates)
            bodies = self._map_onto_pattern(colors, best)
            if bodies:
                logger.info(
                    "Matched %d colors to pattern '%s' (%d candidates)",
                    len(colors),
                    best.label,
                    len(candidates),
                )
                return MatchResult(
                    assignment=_with_legends(bodies, colors),
                    strategy=AssignmentStrategy.PATTERN_MATCH,
                    pattern=best,
                )

        logger.info(
            "No %d-color pattern in corpus, distributing by group frequency",
            len(colors),
        )
        bodies, consumed = self._distribute_by_frequency(colors, distributions)
        return MatchResult(
            assignment=_with_legends(bodies, consumed),
            strategy=AssignmentStrategy.FREQUENCY_FALLBACK,
        )

    @staticmethod
    def find_matching_patterns(
        corpus: Iterable[Keycap], color_count: int
    ) -> list[ReferencePattern]:
        """Layouts whose distinct body colors number exactly ``color_count``."""
        matches: list[ReferencePattern] = []
        for keycap in corpus:
            for layout in keycap.layouts:
                if not layout.color_groups:
                    continue
                pattern = ReferencePattern.from_layout(keycap, layout)
                if len(pattern.unique_colors) == color_count:
                    matches.append(pattern)
        return matches

    def color_similarity(
        self, requested: Sequence[ColorInput], pattern_colors: Sequence[str]
    ) -> float:
        """Average greedy nearest-neighbor distance from request to pattern.

        Each requested color, in order, takes the closest pattern color not
        already taken. Lower is more similar.
        """
        distances = distance_matrix(
            [self._table.rgb_of(c) for c in requested],
            [self._table.rgb_of(c) for c in pattern_colors],
        )
        total = 0.0
        used: set[int] = set()
        for i in range(len(requested)):
            best_j = _nearest(distances[i], used)
            if best_j >= 0:
                total += float(distances[i, best_j])
                used.add(best_j)
        return total / len(requested)

    def select_best_pattern(
        self,
        requested: Sequence[ColorInput],
        candidates: Sequence[ReferencePattern],
    ) -> ReferencePattern:
        """Candidate with the lowest similarity cost; earliest wins ties."""
        best = candidates[0]
        best_score = math.inf
        for candidate in candidates:
            score = self.color_similarity(requested, candidate.unique_colors)
            if score < best_score:
                best_score = score
                best = candidate
        logger.debug("Best pattern '%s' with similarity %.2f", best.label, best_score)
        return best

    def _map_onto_pattern(
        self, colors: list[ColorInput], pattern: ReferencePattern
    ) -> dict[str, ColorInput]:
        """Substitute requested colors for the pattern's body colors."""
        distances = distance_matrix(
            [self._table.rgb_of(c) for c in pattern.unique_colors],
            [self._table.rgb_of(c) for c in colors],
        )

        mapping: dict[str, int] = {}
        used: set[int] = set()
        for p, pattern_color in enumerate(pattern.unique_colors):
            best_i = _nearest(distances[p], used)
            if best_i >= 0:
                mapping[pattern_color] = best_i
                used.add(best_i)

        # Unmatched requested colors fill pattern colors that found no match
        for i in range(len(colors)):
            if i in used:
                continue
            for pattern_color in pattern.unique_colors:
                if pattern_color not in mapping:
                    mapping[pattern_color] = i
                    break

        bodies: dict[str, ColorInput] = {}
        for group in pattern.color_groups:
            if not group.approx:
                continue
            index = mapping.get(group.approx)
            bodies[group.id] = colors[index] if index is not None else colors[0]
        return bodies

    def _distribute_by_frequency(
        self,
        colors: list[ColorInput],
        distributions: dict[str, Distribution],
    ) -> tuple[dict[str, ColorInput], list[ColorInput]]:
        """Greedy placement by each group's most common historical color.

        Works on a copy of ``colors``: chosen colors are swapped forward so
        the copy ends up in consumption order, which is returned alongside
        the body colors.
        """
        working = list(colors)
        rgbs = [self._table.rgb_of(c) for c in working]
        bodies: dict[str, ColorInput] = {}
        index = 0

        for group_id in self._priority_groups:
            if index >= len(working):
                break
            distribution = distributions.get(group_id)
            if distribution is not None:
                index = self._place(group_id, distribution, working, rgbs, index, bodies)

        remaining = [
            g for g in distributions if g not in self._priority_groups and g not in bodies
        ]
        for group_id in remaining:
            if index >= len(working):
                break
            index = self._place(group_id, distributions[group_id], working, rgbs, index, bodies)

        # Out of requested colors: leftover groups reuse the first one
        for group_id, distribution in distributions.items():
            if group_id in bodies:
                continue
            most_common = distribution.most_common
            if most_common:
                bodies[group_id] = working[0] if working else ColorInput.from_raw(most_common)

        return bodies, working

    def _place(
        self,
        group_id: str,
        distribution: Distribution,
        working: list[ColorInput],
        rgbs: list[RGB | None],
        index: int,
        bodies: dict[str, ColorInput],
    ) -> int:
        most_common = distribution.most_common
        if most_common:
            target = self._table.rgb_of(most_common)
            best = index
            min_distance = math.inf
            for i in range(index, len(working)):
                distance = rgb_distance(target, rgbs[i])
                if distance < min_distance:
                    min_distance = distance
                    best = i
            if best != index:
                working[index], working[best] = working[best], working[index]
                rgbs[index], rgbs[best] = rgbs[best], rgbs[index]

        bodies[group_id] = working[index]
        return index + 1


def _nearest(row: Sequence[float], used: set[int]) -> int:
    """Index of the smallest entry not in ``used``; -1 if every remaining entry is infinite."""
    best = -1
    min_distance = math.inf
    for j, distance in enumerate(row):
        if j in used:
            continue
        if distance < min_distance:
            min_distance = distance
            best = j
    return best


def legend_for(group_id: str, colors: Sequence[ColorInput]) -> ColorInput:
    """Fixed legend convention: ``alpha`` takes the second color, others the first."""
    if group_id == _ALPHA_GROUP and len(colors) > 1:
        return colors[1]
    return colors[0]


def _with_legends(bodies: dict[str, ColorInput], colors: Sequence[ColorInput]) -> Assignment:
    return Assignment.from_pairs(
        (group_id, body, legend_for(group_id, colors)) for group_id, body in bodies.items()
    )
