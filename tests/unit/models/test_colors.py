"""Tests for requested color parsing."""

from __future__ import annotations

from pydantic import ValidationError
import pytest

from capcolor.core.errors import InvalidInputError
from capcolor.core.models.colors import ColorInput, ColorKind


class TestColorInputParse:
    def test_bare_hex_string(self) -> None:
        color = ColorInput.parse("#FF0000")
        assert color.kind is ColorKind.HEX
        assert color.value == "#FF0000"

    def test_bare_code_string(self) -> None:
        color = ColorInput.parse("N9")
        assert color.kind is ColorKind.SYMBOLIC
        assert not color.is_hex

    @pytest.mark.parametrize("tag", ["symbolic", "gmk", "GMK", " Symbolic "])
    def test_symbolic_tags(self, tag: str) -> None:
        assert ColorInput.parse({"type": tag, "value": "CR"}).kind is ColorKind.SYMBOLIC

    def test_kind_key_accepted(self) -> None:
        assert ColorInput.parse({"kind": "hex", "value": "#101010"}).is_hex

    def test_existing_instance_passes_through(self) -> None:
        color = ColorInput.hex("#ABCDEF")
        assert ColorInput.parse(color) is color

    def test_value_kept_verbatim(self) -> None:
        assert ColorInput.parse({"type": "hex", "value": "#aBcDeF"}).value == "#aBcDeF"

    def test_invalid_type(self) -> None:
        with pytest.raises(InvalidInputError, match="Invalid color type: rgb"):
            ColorInput.parse({"type": "rgb", "value": "#FFFFFF"})

    def test_missing_type(self) -> None:
        with pytest.raises(InvalidInputError, match="missing its type"):
            ColorInput.parse({"value": "CR"})

    @pytest.mark.parametrize("raw", [{"type": "hex", "value": ""}, {"type": "hex"}, ""])
    def test_missing_value(self, raw: object) -> None:
        with pytest.raises(InvalidInputError, match="valid value"):
            ColorInput.parse(raw)

    def test_unsupported_entry(self) -> None:
        with pytest.raises(InvalidInputError):
            ColorInput.parse(42)

    def test_invalid_input_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            ColorInput.parse({"type": "cmyk", "value": "x"})

    @pytest.mark.parametrize("value", ["101010", "#XYZXYZ", "#FFF", "#1010100"])
    def test_hex_tag_requires_rrggbb(self, value: str) -> None:
        with pytest.raises(InvalidInputError, match="Invalid hex color"):
            ColorInput.parse({"type": "hex", "value": value})

    def test_bare_malformed_hex_string(self) -> None:
        with pytest.raises(InvalidInputError, match="Invalid hex color"):
            ColorInput.parse("#12345")

    @pytest.mark.parametrize("raw", [" ", {"type": "symbolic", "value": "  "}])
    def test_blank_value(self, raw: object) -> None:
        with pytest.raises(InvalidInputError, match="valid value"):
            ColorInput.parse(raw)

    def test_surrounding_whitespace_stripped(self) -> None:
        assert ColorInput.parse(" N9 ") == ColorInput.symbolic("N9")
        assert ColorInput.parse({"type": "hex", "value": " #ABCDEF"}).value == "#ABCDEF"


class TestColorInputModel:
    def test_frozen(self) -> None:
        color = ColorInput.symbolic("CR")
        with pytest.raises(ValidationError):
            color.value = "N9"  # type: ignore[misc]

    def test_hex_constructor_rejects_missing_hash(self) -> None:
        with pytest.raises(ValidationError, match="Invalid hex color"):
            ColorInput.hex("101010")

    def test_from_raw_only_tags_wellformed_hex(self) -> None:
        assert ColorInput.from_raw("#101010").is_hex
        assert ColorInput.from_raw("#1010").kind is ColorKind.SYMBOLIC
        assert ColorInput.from_raw("CR").kind is ColorKind.SYMBOLIC

    def test_equality_by_kind_and_value(self) -> None:
        assert ColorInput.symbolic("CR") == ColorInput.parse({"type": "gmk", "value": "CR"})
        assert ColorInput.symbolic("#171718") != ColorInput.hex("#171718")

    def test_to_wire(self) -> None:
        assert ColorInput.hex("#FF0000").to_wire() == {"type": "hex", "value": "#FF0000"}

    def test_str(self) -> None:
        assert str(ColorInput.symbolic("WS1")) == "WS1"
