"""Assignment output models."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, model_validator

from capcolor.core.models.colors import ColorInput


class GroupColors(BaseModel):
    """Final body/legend colors for one group.

    Both colors keep the kind they were requested with, so a hex input is
    returned as the exact string the caller sent.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    group_id: str
    approx: ColorInput
    legend: ColorInput

    def to_wire(self) -> dict[str, str]:
        """Serialize to the ``colorGroups`` wire shape."""
        return {
            "id": self.group_id,
            "approx": self.approx.value,
            "legend": self.legend.value,
            "approxType": self.approx.kind.value,
            "legendType": self.legend.kind.value,
        }


class Assignment(BaseModel):
    """Ordered mapping of group id to body/legend colors.

    Example:
        >>> cr, n9 = ColorInput.symbolic("CR"), ColorInput.symbolic("N9")
        >>> a = Assignment.from_pairs([("alpha", cr, n9)])
        >>> a.get("alpha").legend.value
        'N9'
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    groups: tuple[GroupColors, ...] = ()

    @model_validator(mode="after")
    def validate_unique_group_ids(self) -> Assignment:
        ids = [g.group_id for g in self.groups]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate group ids in assignment: {ids}")
        return self

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, ColorInput, ColorInput]]) -> Assignment:
        return cls(
            groups=tuple(
                GroupColors(group_id=gid, approx=approx, legend=legend)
                for gid, approx, legend in pairs
            )
        )

    @property
    def group_ids(self) -> list[str]:
        return [g.group_id for g in self.groups]

    def get(self, group_id: str) -> GroupColors | None:
        for group in self.groups:
            if group.group_id == group_id:
                return group
        return None

    def is_empty(self) -> bool:
        return not self.groups

    def __len__(self) -> int:
        return len(self.groups)

    def to_color_groups(self) -> list[dict[str, str]]:
        return [g.to_wire() for g in self.groups]
