"""Reference corpus loading and lookup."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from capcolor.core.models.corpus import Keycap, KeycapLayout

logger = logging.getLogger(__name__)

DEFAULT_LAYOUT_NAME = "Base"


def parse_corpus(raw: Any) -> list[Keycap]:
    """Validate raw corpus records, skipping malformed entries.

    Args:
        raw: A list of keycap mappings, or a mapping with a ``keycaps`` list.

    Returns:
        Valid keycap records in input order.

    Raises:
        ValueError: If ``raw`` is not a list of records.
    """
    if isinstance(raw, dict) and "keycaps" in raw:
        raw = raw["keycaps"]
    if not isinstance(raw, list):
        raise ValueError(f"Corpus must be a list of keycap records, got {type(raw).__name__}")

    keycaps: list[Keycap] = []
    skipped = 0
    for index, entry in enumerate(raw):
        try:
            keycaps.append(Keycap.model_validate(entry))
        except ValidationError as e:
            skipped += 1
            logger.warning("Skipping malformed corpus entry %d: %s", index, e.errors()[0]["msg"])

    if skipped:
        logger.warning("Skipped %d of %d corpus entries", skipped, len(raw))
    return keycaps


def load_corpus(path: str | Path) -> list[Keycap]:
    """Load a keycap corpus from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or not a list of records.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Corpus file does not exist: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    keycaps = parse_corpus(raw)
    logger.info("Loaded %d keycap sets from %s", len(keycaps), path)
    return keycaps


def find_keycap(corpus: Sequence[Keycap], keycap_id: str) -> Keycap | None:
    """Find a keycap set by name.

    Returns the first keycap whose name equals ``keycap_id``, equals it
    ignoring case, or contains it ignoring case.
    """
    lowered = keycap_id.lower()
    for keycap in corpus:
        name = keycap.name.lower()
        if keycap.name == keycap_id or name == lowered or lowered in name:
            return keycap
    return None


def find_layout(keycap: Keycap, layout_name: str) -> KeycapLayout | None:
    """Find a layout by case-insensitive name."""
    lowered = layout_name.lower()
    for layout in keycap.layouts:
        if layout.name.lower() == lowered:
            return layout
    return None


def find_reference_layout(
    corpus: Sequence[Keycap],
    keycap_id: str,
    layout_name: str = DEFAULT_LAYOUT_NAME,
) -> tuple[Keycap, KeycapLayout] | None:
    """Resolve a keycap/layout pair that has color groups.

    Returns:
        (keycap, layout), or None if the keycap or layout is missing or the
        layout defines no color groups. Each miss is logged.
    """
    keycap = find_keycap(corpus, keycap_id)
    if keycap is None:
        logger.warning(
            "Reference keycap not found: %s (e.g. %s)",
            keycap_id,
            ", ".join(_names(corpus[:5])),
        )
        return None

    layout = find_layout(keycap, layout_name)
    if layout is None:
        logger.warning(
            "Reference layout not found: %s - %s (available: %s)",
            keycap.name,
            layout_name,
            ", ".join(layout.name for layout in keycap.layouts),
        )
        return None

    if not layout.color_groups:
        logger.warning("Reference layout has no color groups: %s - %s", keycap.name, layout.name)
        return None

    return keycap, layout


def _names(keycaps: Iterable[Keycap]) -> list[str]:
    return [k.name for k in keycaps]
