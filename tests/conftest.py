"""Shared pytest fixtures for capcolor tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
import logging
from pathlib import Path

import pytest

from capcolor.core.models.colors import ColorInput
from capcolor.core.models.corpus import Keycap, KeycapColor, KeycapColorGroup, KeycapLayout
from capcolor.core.palette.catalog import ColorTable

GroupSpec = tuple[str, str, str]
KeycapFactory = Callable[..., Keycap]


def build_keycap(
    name: str,
    layouts: dict[str, list[GroupSpec]],
    colors: dict[str, str] | None = None,
) -> Keycap:
    """Build a Keycap from ``{layout_name: [(group_id, approx, legend), ...]}``."""
    return Keycap(
        name=name,
        layouts=tuple(
            KeycapLayout(
                name=layout_name,
                color_groups=tuple(
                    KeycapColorGroup(id=gid, approx=approx, legend=legend)
                    for gid, approx, legend in groups
                ),
            )
            for layout_name, groups in layouts.items()
        ),
        colors=tuple(
            KeycapColor(code=code, name=code, hex=hex_value, gmk_code=True)
            for code, hex_value in (colors or {}).items()
        ),
    )


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Undo configure_logging() calls made during a test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    # pytest's own capture handlers are subclasses and manage themselves
    owned = (logging.StreamHandler, logging.FileHandler)
    yield
    for handler in list(root.handlers):
        if handler not in handlers and type(handler) in owned:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


# ============================================================================
# Corpus Fixtures
# ============================================================================


@pytest.fixture
def make_keycap() -> KeycapFactory:
    """Factory for ad-hoc keycap records."""
    return build_keycap


@pytest.fixture
def classic_keycap() -> Keycap:
    """Two-color dark set: black alphas on grey mods."""
    return build_keycap(
        "GMK Classic Dark",
        {"Base": [("alpha", "CR", "N9"), ("modifier", "N9", "CR")]},
        colors={"CR": "#171718", "N9": "#393b3b"},
    )


@pytest.fixture
def three_color_keycap() -> Keycap:
    """Three-color set: beige alphas, black mods, red accents."""
    return build_keycap(
        "GMK Tri",
        {"Base": [("alpha", "WS1", "CR"), ("modifier", "CR", "WS1"), ("nav", "RO2", "WS1")]},
    )


@pytest.fixture
def table() -> ColorTable:
    """Color table with only the static reference codes."""
    return ColorTable.from_corpus([])


# ============================================================================
# Color Fixtures
# ============================================================================


@pytest.fixture
def red_blue() -> list[ColorInput]:
    return [ColorInput.hex("#FF0000"), ColorInput.hex("#0000FF")]


@pytest.fixture
def fixtures_dir() -> Path:
    """Get test fixtures directory."""
    return Path(__file__).parent / "fixtures"
