"""Tests for escape-sequence composition."""

import pytest

from print_table.ansi import (
    RESET_SEQUENCE,
    remove_ansi_codes,
    sequence_builder,
    sequence_code_builder,
    sequence_color_code,
    sequence_mode_code,
)
from print_table.constants import (
    BOLD_MODE,
    FAINT_MODE,
    INVERSE_MODE,
    ITALICIZE_MODE,
    SLOW_BLINK_MODE,
    STRIKE_THROUGH_MODE,
    UNDERLINE_MODE,
    BgColor,
    BrightBgColor,
    ForegroundColor,
)
from print_table.models import Predicate, Static, Style


class TestSequenceBuilder:
    """Tests for sequence_builder."""

    def test_single_code(self) -> None:
        assert sequence_builder("31") == "\x1b[31m"

    def test_multiple_codes(self) -> None:
        assert sequence_builder("1", "31", "42") == "\x1b[1;31;42m"

    def test_no_codes(self) -> None:
        assert sequence_builder() == ""

    def test_reset_sequence(self) -> None:
        assert RESET_SEQUENCE == "\x1b[0m"


class TestSequenceModeCode:
    """Tests for sequence_mode_code."""

    def test_unset(self) -> None:
        assert sequence_mode_code(None, "value", "1") == ""

    def test_static_false(self) -> None:
        assert sequence_mode_code(Static(False), "value", "1") == ""

    def test_static_true(self) -> None:
        assert sequence_mode_code(Static(True), "value", "1") == "\x1b[1m"

    def test_predicate_false(self) -> None:
        select = Predicate(lambda value: len(value) > 5)
        assert sequence_mode_code(select, "12345", "1") == ""

    def test_predicate_true(self) -> None:
        select = Predicate(lambda value: len(value) < 10)
        assert sequence_mode_code(select, "12345", "1") == "\x1b[1m"


class TestSequenceColorCode:
    """Tests for sequence_color_code."""

    def test_unset(self) -> None:
        assert sequence_color_code(None, "value") == ""

    def test_static_color(self) -> None:
        assert sequence_color_code(Static(BgColor.RED), "value") == "\x1b[41m"

    def test_bright_background_codes(self) -> None:
        assert sequence_color_code(Static(BrightBgColor.BRIGHT_WHITE), "v") == "\x1b[107m"

    def test_predicate_color(self) -> None:
        select = Predicate(lambda v: BgColor.GREEN if len(v) > 5 else BgColor.BLUE)
        assert sequence_color_code(select, "123456") == "\x1b[42m"
        assert sequence_color_code(select, "123") == "\x1b[44m"

    def test_predicate_returning_none_emits_nothing(self) -> None:
        assert sequence_color_code(Predicate(lambda v: None), "x") == ""


class TestSequenceCodeBuilder:
    """Tests for sequence_code_builder."""

    def test_empty_style(self) -> None:
        assert sequence_code_builder("value", Style()) == ""

    def test_modes_and_colors_in_fixed_order(self) -> None:
        style = Style(
            color=Static(ForegroundColor.RED),
            bg_color=Static(BgColor.YELLOW),
            underline=Static(True),
            italic=Static(True),
            bold=Static(True),
        )
        result = sequence_code_builder("value", style)
        assert result == "\x1b[1m\x1b[3m\x1b[4m\x1b[31m\x1b[43m"

    def test_other_modes(self) -> None:
        style = Style(
            faint=Static(True),
            slow_blink=Static(True),
            inverse=Static(True),
            strike_through=Static(True),
            color=Static(ForegroundColor.CYAN),
            bg_color=Static(BgColor.MAGENTA),
        )
        expected = "".join(
            sequence_builder(code)
            for code in (FAINT_MODE, SLOW_BLINK_MODE, INVERSE_MODE, STRIKE_THROUGH_MODE, "36", "45")
        )
        assert sequence_code_builder("value", style) == expected

    def test_predicates_see_raw_value(self) -> None:
        style = Style(
            italic=Static(True),
            underline=Predicate(lambda v: v.startswith("1")),
            bg_color=Predicate(lambda v: BgColor.GREEN if len(v) > 5 else BgColor.BLUE),
        )
        expected = (
            sequence_builder(ITALICIZE_MODE)
            + sequence_builder(UNDERLINE_MODE)
            + sequence_builder(BgColor.GREEN.value)
        )
        assert sequence_code_builder("123456", style) == expected

    def test_raising_predicate_propagates(self) -> None:
        def boom(value: str) -> bool:
            raise RuntimeError("bad predicate")

        with pytest.raises(RuntimeError, match="bad predicate"):
            sequence_code_builder("value", Style(bold=Predicate(boom)))

    def test_bold_first(self) -> None:
        style = Style(bold=Static(True), hidden=Static(True))
        assert sequence_code_builder("v", style).startswith(sequence_builder(BOLD_MODE))


class TestRemoveAnsiCodes:
    """Tests for remove_ansi_codes."""

    def test_removes_codes(self) -> None:
        text = "\x1b[31mThis is \x1b[1mbold\x1b[0m text."
        assert remove_ansi_codes(text) == "This is bold text."

    def test_empty_string(self) -> None:
        assert remove_ansi_codes("") == ""

    def test_plain_string_unchanged(self) -> None:
        assert remove_ansi_codes("This is a simple text.") == "This is a simple text."
