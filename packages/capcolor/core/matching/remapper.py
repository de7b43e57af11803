"""Remap an explicit reference layout onto requested colors."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from capcolor.core.models.assignment import Assignment
from capcolor.core.models.colors import ColorInput
from capcolor.core.models.corpus import KeycapColorGroup
from capcolor.core.palette.catalog import ColorTable
from capcolor.core.palette.color_math import RGB, WCAG_AA_CONTRAST, contrast_ratio, rgb_distance

logger = logging.getLogger(__name__)


class BaseImageRemapper:
    """Replaces each reference group's colors with the nearest requested ones.

    A requested color picked for any group is marked used for the rest of
    the call, so later groups prefer colors not yet taken. When a group's
    legend would come out identical to its body, the legend is replaced by
    the unused requested color with the best contrast against the body.

    Args:
        table: Color table used to resolve codes to RGB.
        contrast_threshold: Contrast ratio below which the legend search
            keeps looking for a more readable color.
    """

    def __init__(self, table: ColorTable, contrast_threshold: float = WCAG_AA_CONTRAST) -> None:
        self._table = table
        self._contrast_threshold = contrast_threshold

    def remap(
        self,
        reference_groups: Sequence[KeycapColorGroup],
        requested: Sequence[ColorInput],
    ) -> Assignment:
        """Build an assignment from reference groups and requested colors.

        Args:
            reference_groups: Groups of the reference layout, in order.
            requested: Requested colors, in caller order.

        Returns:
            One entry per reference group. With no requested colors the
            reference colors are returned unchanged.
        """
        colors = list(requested)
        if not colors:
            return self._unchanged(reference_groups)

        used: set[ColorInput] = set()
        pairs: list[tuple[str, ColorInput, ColorInput]] = []
        seen: set[str] = set()

        for group in reference_groups:
            if group.id in seen:
                logger.warning("Duplicate reference group '%s' ignored", group.id)
                continue
            seen.add(group.id)

            body_rgb = self._rgb(group.approx)
            body = self._closest(body_rgb, colors, used) or colors[0]

            legend_rgb = self._rgb(group.legend)
            legend = self._closest(legend_rgb, colors, used)
            if legend is None or legend == body:
                legend = self._contrast_color(body, legend_rgb, colors, used) or body

            used.add(body)
            if legend != body:
                used.add(legend)

            logger.debug(
                "Remapped group '%s': %s/%s -> %s/%s",
                group.id,
                group.approx,
                group.legend,
                body.value,
                legend.value,
            )
            pairs.append((group.id, body, legend))

        return Assignment.from_pairs(pairs)

    def _rgb(self, color: str | None) -> RGB | None:
        if not color:
            return None
        return self._table.rgb_of(color)

    def _closest(
        self,
        target: RGB | None,
        colors: Sequence[ColorInput],
        used: set[ColorInput],
    ) -> ColorInput | None:
        """Nearest unused requested color to ``target``; None if nothing is comparable."""
        if target is None:
            return None

        best: ColorInput | None = None
        min_distance = float("inf")
        for color in colors:
            if color in used:
                continue
            rgb = self._table.rgb_of(color)
            if rgb is None:
                continue
            distance = rgb_distance(target, rgb)
            if distance < min_distance:
                min_distance = distance
                best = color
        return best

    def _contrast_color(
        self,
        body: ColorInput,
        legend_target: RGB | None,
        colors: Sequence[ColorInput],
        used: set[ColorInput],
    ) -> ColorInput | None:
        """Legend candidate that reads well against ``body``.

        Starts from the color nearest the original legend. If its contrast
        is below the threshold, any unused non-body color with higher
        contrast replaces it, keeping the highest seen.
        """
        body_rgb = self._table.rgb_of(body)
        if body_rgb is None:
            return None

        best = self._closest(legend_target, colors, used)
        best_contrast = contrast_ratio(body_rgb, self._table.rgb_of(best)) if best else 0.0

        if best_contrast < self._contrast_threshold:
            for color in colors:
                if color in used or color == body:
                    continue
                ratio = contrast_ratio(body_rgb, self._table.rgb_of(color))
                if ratio > best_contrast:
                    best = color
                    best_contrast = ratio

        return best

    @staticmethod
    def _unchanged(reference_groups: Sequence[KeycapColorGroup]) -> Assignment:
        pairs: dict[str, tuple[ColorInput, ColorInput]] = {}
        for group in reference_groups:
            if not group.approx or group.id in pairs:
                continue
            body = ColorInput.from_raw(group.approx)
            legend = ColorInput.from_raw(group.legend) if group.legend else body
            pairs[group.id] = (body, legend)
        return Assignment.from_pairs((gid, body, legend) for gid, (body, legend) in pairs.items())
