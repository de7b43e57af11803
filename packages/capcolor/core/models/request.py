"""Request and result models for the color-group generator."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from capcolor.core.models.assignment import Assignment
from capcolor.core.models.corpus import KeycapColorGroup


class AssignmentStrategy(str, Enum):
    """Which engine path produced an assignment."""

    BASE_LAYOUT = "base_layout"
    PATTERN_MATCH = "pattern_match"
    FREQUENCY_FALLBACK = "frequency_fallback"


@dataclass(frozen=True)
class GenerationRequest:
    """Color-group generation request.

    ``colors`` entries are validated by the generator, not here, so a bad
    entry surfaces as ``InvalidInputError`` rather than a pydantic error.

    Attributes:
        colors: Requested colors (ColorInput, tagged mappings, or strings).
        color_codes: Legacy list of symbolic codes, used when ``colors`` is empty.
        base_layout_keycap_id: Keycap set whose layout should be remapped.
        base_layout_name: Layout within that set (default from config).
        use_base_image_colors: Whether to honor ``base_layout_keycap_id``.
    """

    colors: Sequence[Any] = ()
    color_codes: Sequence[str] = ()
    base_layout_keycap_id: str | None = None
    base_layout_name: str | None = None
    use_base_image_colors: bool = True


class GenerationResult(BaseModel):
    """Outcome of a generation call.

    Attributes:
        assignment: Final per-group colors.
        strategy: Engine path that produced the assignment.
        reference: ``"<keycap> - <layout>"`` of the reference used, if any.
        base_color_groups: Original groups of the remapped base layout.
        cache_key: Order-independent key of the requested colors.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    assignment: Assignment
    strategy: AssignmentStrategy
    reference: str | None = None
    base_color_groups: tuple[KeycapColorGroup, ...] | None = None
    cache_key: str
