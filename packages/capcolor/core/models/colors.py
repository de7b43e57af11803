"""Requested color models.

A requested color is either a symbolic GMK color code (``"CR"``) or a raw
hex string (``"#FF0000"``). The kind travels with the value through the
whole engine so an assignment can hand back exactly what the caller sent.
"""

from __future__ import annotations

from enum import Enum
import re
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from capcolor.core.errors import InvalidInputError

# Wire tag used by older clients for symbolic codes
_LEGACY_SYMBOLIC_TAG = "gmk"

_HEX_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")


class ColorKind(str, Enum):
    """How a requested color was expressed by the caller."""

    SYMBOLIC = "symbolic"
    HEX = "hex"


class ColorInput(BaseModel):
    """Single requested color, tagged with its representation kind.

    Attributes:
        kind: Symbolic code or hex string.
        value: The color code (e.g. ``"N9"``) or hex string (e.g. ``"#393B3B"``),
            kept verbatim apart from surrounding whitespace.

    Example:
        >>> ColorInput.parse("#FF0000").kind
        <ColorKind.HEX: 'hex'>
        >>> ColorInput.parse({"type": "gmk", "value": "CR"}).kind
        <ColorKind.SYMBOLIC: 'symbolic'>
    """

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    kind: ColorKind
    value: str = Field(..., min_length=1)

    @field_validator("kind", mode="before")
    @classmethod
    def normalize_kind(cls, v: Any) -> Any:
        """Accept the legacy ``gmk`` tag as an alias for ``symbolic``."""
        if isinstance(v, str):
            lowered = v.strip().lower()
            return ColorKind.SYMBOLIC.value if lowered == _LEGACY_SYMBOLIC_TAG else lowered
        return v

    @model_validator(mode="after")
    def validate_hex_value(self) -> ColorInput:
        """Hex-tagged values must be ``#RRGGBB``."""
        if self.kind is ColorKind.HEX and not _HEX_PATTERN.match(self.value):
            raise ValueError(f"Invalid hex color: {self.value!r}. Must be '#RRGGBB'")
        return self

    @property
    def is_hex(self) -> bool:
        return self.kind is ColorKind.HEX

    @classmethod
    def symbolic(cls, code: str) -> ColorInput:
        return cls(kind=ColorKind.SYMBOLIC, value=code)

    @classmethod
    def hex(cls, value: str) -> ColorInput:
        return cls(kind=ColorKind.HEX, value=value)

    @classmethod
    def from_raw(cls, value: str) -> ColorInput:
        """Tag an untyped corpus color: ``#RRGGBB`` is hex, anything else a code."""
        if _HEX_PATTERN.match(value.strip()):
            return cls.hex(value)
        return cls.symbolic(value)

    @classmethod
    def parse(cls, raw: Any) -> ColorInput:
        """Build a ColorInput from a wire value.

        Accepts an existing ColorInput, a bare string, or a mapping with a
        ``type``/``kind`` tag and a ``value``.

        Raises:
            InvalidInputError: If the tag or value is missing or invalid.
        """
        if isinstance(raw, ColorInput):
            return raw
        if isinstance(raw, str):
            kind: Any = ColorKind.HEX if raw.strip().startswith("#") else ColorKind.SYMBOLIC
            value: Any = raw
        elif isinstance(raw, dict):
            kind = raw.get("type", raw.get("kind"))
            value = raw.get("value")
            if not kind:
                raise InvalidInputError(f"Color entry is missing its type: {raw!r}")
        else:
            raise InvalidInputError(f"Unsupported color entry: {raw!r}")

        if not isinstance(value, str) or not value.strip():
            raise InvalidInputError("Each color must have a valid value")
        try:
            return cls(kind=kind, value=value)
        except ValidationError as e:
            if any(err["loc"] == ("kind",) for err in e.errors()):
                raise InvalidInputError(
                    f"Invalid color type: {kind}. Must be 'symbolic', 'gmk' or 'hex'"
                ) from e
            raise InvalidInputError(f"Invalid hex color: {value}. Must be '#RRGGBB'") from e

    def to_wire(self) -> dict[str, str]:
        return {"type": self.kind.value, "value": self.value}

    def __str__(self) -> str:
        return self.value
