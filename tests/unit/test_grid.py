"""Tests for grid lines."""

from print_table.grid import bottom_line, build_line, separator_line, top_line
from print_table.models import ColumnSpec, Header
from print_table.themes import DOUBLE_LINE_THEME, ROUNDED_BOX_THEME


def _columns() -> list[ColumnSpec]:
    return [
        ColumnSpec(key="name", header=Header(name="Name"), width=20),
        ColumnSpec(key="age", header=Header(name="Age"), width=10),
    ]


class TestBuildLine:
    """Tests for build_line."""

    def test_segments_are_width_plus_two(self) -> None:
        assert build_line(_columns(), "<", "+", ">", "-") == "<" + "-" * 22 + "+" + "-" * 12 + ">"

    def test_header_length_fallback(self) -> None:
        columns = [ColumnSpec(key="d", header=Header(name="Description"))]
        assert build_line(columns, "[", "|", "]", "=") == "[" + "=" * 13 + "]"

    def test_no_columns(self) -> None:
        assert build_line([], "<", "+", ">", "-") == "<>"


class TestThemeLines:
    """Tests for the top, bottom and separator lines."""

    def test_rounded_lines(self) -> None:
        chars = ROUNDED_BOX_THEME.table
        assert top_line(_columns(), chars) == "╭──────────────────────┬────────────╮"
        assert separator_line(_columns(), chars) == "├──────────────────────┼────────────┤"
        assert bottom_line(_columns(), chars) == "╰──────────────────────┴────────────╯"

    def test_double_line(self) -> None:
        chars = DOUBLE_LINE_THEME.table
        columns = [ColumnSpec(key="a", header=Header(name="A"), width=1)]
        assert top_line(columns, chars) == "╔═══╗"
        assert separator_line(columns, chars) == "╠═══╣"
        assert bottom_line(columns, chars) == "╚═══╝"
