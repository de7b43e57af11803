"""Corpus profiling: per-group body-color distributions."""

from __future__ import annotations

from collections.abc import Iterable
import logging

from capcolor.core.models.corpus import Keycap
from capcolor.core.models.distribution import Distribution

logger = logging.getLogger(__name__)

# Number of colors kept in Distribution.top_colors
TOP_COLORS_LIMIT = 3


class PatternAnalyzer:
    """Learns which body colors each group typically uses.

    Only the body (``approx``) color of a group counts toward its
    distribution; legend colors are ignored. Layouts without color groups
    and groups without a body color are skipped.

    Args:
        top_colors_limit: Number of colors to keep in ``top_colors``.
    """

    def __init__(self, top_colors_limit: int = TOP_COLORS_LIMIT) -> None:
        self._top_colors_limit = top_colors_limit

    def analyze(self, corpus: Iterable[Keycap]) -> dict[str, Distribution]:
        """Build a distribution for every group id seen in the corpus.

        Args:
            corpus: Keycap records to scan.

        Returns:
            Group id -> Distribution, in first-seen group order.
        """
        frequencies: dict[str, dict[str, int]] = {}

        for keycap in corpus:
            for layout in keycap.layouts:
                if not layout.color_groups:
                    continue
                for group in layout.color_groups:
                    if not group.approx:
                        continue
                    counts = frequencies.setdefault(group.id, {})
                    counts[group.approx] = counts.get(group.approx, 0) + 1

        distributions = {
            group_id: self._build_distribution(group_id, counts)
            for group_id, counts in frequencies.items()
        }
        logger.debug("Analyzed color patterns for %d groups", len(distributions))
        return distributions

    def _build_distribution(self, group_id: str, counts: dict[str, int]) -> Distribution:
        total = sum(counts.values())
        # sorted() is stable, so equal counts keep corpus scan order
        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
        top_colors = tuple(color for color, _ in ranked[: self._top_colors_limit])
        dominant_ratio = ranked[0][1] / total if total > 0 else 0.0

        return Distribution(
            group_id=group_id,
            color_frequency=dict(counts),
            top_colors=top_colors,
            dominant_ratio=dominant_ratio,
        )


def most_common_color(distributions: dict[str, Distribution], group_id: str) -> str | None:
    """Most frequent body color of a group, or None if the group is unknown."""
    distribution = distributions.get(group_id)
    if distribution is None:
        return None
    return distribution.most_common
