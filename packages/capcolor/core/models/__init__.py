"""Engine data models."""

from capcolor.core.models.assignment import Assignment, GroupColors
from capcolor.core.models.colors import ColorInput, ColorKind
from capcolor.core.models.corpus import (
    Keycap,
    KeycapColor,
    KeycapColorGroup,
    KeycapLayout,
    ReferencePattern,
)
from capcolor.core.models.distribution import Distribution
from capcolor.core.models.request import (
    AssignmentStrategy,
    GenerationRequest,
    GenerationResult,
)

__all__ = [
    "Assignment",
    "AssignmentStrategy",
    "ColorInput",
    "ColorKind",
    "Distribution",
    "GenerationRequest",
    "GenerationResult",
    "GroupColors",
    "Keycap",
    "KeycapColor",
    "KeycapColorGroup",
    "KeycapLayout",
    "ReferencePattern",
]
