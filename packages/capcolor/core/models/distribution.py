"""Per-group color distribution learned from the reference corpus."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Distribution(BaseModel):
    """Body-color frequency for one group across the whole corpus.

    Attributes:
        group_id: Group identifier.
        color_frequency: Occurrence count per body color, in corpus scan order.
        top_colors: Up to three most frequent colors, ties in scan order.
        dominant_ratio: Count of the top color divided by total occurrences.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    group_id: str
    color_frequency: dict[str, int]
    top_colors: tuple[str, ...]
    dominant_ratio: float = Field(ge=0.0, le=1.0)

    @property
    def total(self) -> int:
        return sum(self.color_frequency.values())

    @property
    def most_common(self) -> str | None:
        return self.top_colors[0] if self.top_colors else None
