"""Reference corpus models.

Mirror the keycap-set JSON document the engine learns from. Field aliases
keep the camelCase keys of the source document; Python code uses the
snake_case names.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class KeycapColor(BaseModel):
    """Named color in a keycap set's own vocabulary.

    Attributes:
        code: Color code, e.g. ``"CR"``.
        name: Human-readable name, e.g. ``"Black"``.
        hex: Canonical hex value, when the set documents one.
        gmk_code: Whether ``code`` is a standard GMK code. ``False`` marks
            set-specific colors that must not enter the color table.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    code: str
    name: str = ""
    hex: str | None = None
    gmk_code: bool | None = Field(default=None, alias="gmkCode")


class KeycapColorGroup(BaseModel):
    """Body/legend colors of one keyboard region.

    Attributes:
        id: Group identifier (``alpha``, ``modifier``, ``novelty-red``, ...).
        approx: Body (keycap plastic) color, code or hex.
        legend: Legend (printed text) color, code or hex.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    approx: str | None = None
    legend: str | None = None


class KeycapLayout(BaseModel):
    """One kit/layout of a keycap set (``Base``, ``Novelties``, ...)."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    name: str
    type: str | None = None
    color_groups: tuple[KeycapColorGroup, ...] = Field(default=(), alias="colorGroups")
    image: str | None = None


class Keycap(BaseModel):
    """Keycap set record from the reference corpus."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    layouts: tuple[KeycapLayout, ...] = ()
    colors: tuple[KeycapColor, ...] = ()


class ReferencePattern(BaseModel):
    """A (keycap, layout) pair viewed as a color pattern.

    Attributes:
        keycap_name: Name of the keycap set.
        layout_name: Name of the layout within the set.
        color_groups: Group assignments of the layout.
        unique_colors: Distinct body colors in first-seen order.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    keycap_name: str
    layout_name: str
    color_groups: tuple[KeycapColorGroup, ...]
    unique_colors: tuple[str, ...]

    @classmethod
    def from_layout(cls, keycap: Keycap, layout: KeycapLayout) -> ReferencePattern:
        seen: set[str] = set()
        unique: list[str] = []
        for group in layout.color_groups:
            if group.approx and group.approx not in seen:
                seen.add(group.approx)
                unique.append(group.approx)
        return cls(
            keycap_name=keycap.name,
            layout_name=layout.name,
            color_groups=layout.color_groups,
            unique_colors=tuple(unique),
        )

    @property
    def label(self) -> str:
        return f"{self.keycap_name} - {self.layout_name}"
