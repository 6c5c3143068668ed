"""Theme presets and the theme registry."""

from __future__ import annotations

from .constants import Alignment
from .exceptions import UnknownThemeError
from .models import ColumnDefaults, HeaderDefaults, Static, Style, TableCharacters, TableTheme

_CLASSIC_COLUMN = ColumnDefaults(
    width=20,
    align=Alignment.LEFT_MIDDLE,
    truncate=150,
    header=HeaderDefaults(
        style=Style(bold=Static(True), underline=Static(True)),
        align=Alignment.LEFT_MIDDLE,
    ),
)


def _chars(glyphs: str, horizontal: str, vertical: str) -> TableCharacters:
    """Build TableCharacters from the nine corners, in reading order.

    ``glyphs`` lists top-left, top-inner, top-right, side-left, center-inner,
    side-right, bottom-left, bottom-inner, bottom-right.
    """
    tl, ti, tr, sl, ci, sr, bl, bi, br = glyphs
    return TableCharacters(
        top_left_corner=tl,
        top_right_corner=tr,
        top_inner_corner=ti,
        bottom_left_corner=bl,
        bottom_right_corner=br,
        bottom_inner_corner=bi,
        side_left_corner=sl,
        side_right_corner=sr,
        center_inner_corner=ci,
        horizontal_line=horizontal,
        vertical_line=vertical,
        padding_char=" ",
    )


CLASSIC_BOX_THEME = TableTheme(
    name="classic",
    table=_chars("┌┬┐├┼┤└┴┘", "─", "│"),
    column=_CLASSIC_COLUMN,
)
"""Square corners and light lines (default theme)."""

ROUNDED_BOX_THEME = TableTheme(
    name="rounded",
    table=_chars("╭┬╮├┼┤╰┴╯", "─", "│"),
    column=_CLASSIC_COLUMN,
)

DOUBLE_LINE_THEME = TableTheme(
    name="double-line",
    table=_chars("╔╦╗╠╬╣╚╩╝", "═", "║"),
    column=ColumnDefaults(
        header=HeaderDefaults(style=Style(italic=Static(True), underline=Static(False))),
    ),
)

DOUBLE_MIX_LINE_THEME = TableTheme(
    name="double-mix-line",
    table=_chars("╓╥╖╟╫╢╙╨╜", "─", "║"),
    column=_CLASSIC_COLUMN,
)

STAR_BORDERS_THEME = TableTheme(
    name="star",
    table=_chars("*********", "*", "*"),
    column=_CLASSIC_COLUMN,
)

ROUND_EDGES_THEME = TableTheme(
    name="round-edges",
    table=_chars("╭╮╮│││╰╰╯", "─", "│"),
    column=_CLASSIC_COLUMN,
)

CURVED_LINES_THEME = TableTheme(
    name="curved-lines",
    table=_chars("╭╮╮╰╯╯╰╰╯", "─", "│"),
    column=_CLASSIC_COLUMN,
)

BLOCK_BORDERS_THEME = TableTheme(
    name="block",
    table=_chars("█████████", "█", "█"),
    column=ColumnDefaults(
        style=Style(underline=Static(False), style_full_cell=Static(True)),
        header=HeaderDefaults(
            style=Style(underline=Static(False), style_full_cell=Static(True)),
        ),
    ),
)

DEFAULT_THEME = CLASSIC_BOX_THEME

THEMES: dict[str, TableTheme] = {
    theme.name: theme
    for theme in (
        CLASSIC_BOX_THEME,
        ROUNDED_BOX_THEME,
        DOUBLE_LINE_THEME,
        DOUBLE_MIX_LINE_THEME,
        STAR_BORDERS_THEME,
        ROUND_EDGES_THEME,
        CURVED_LINES_THEME,
        BLOCK_BORDERS_THEME,
    )
}


def get_theme(name: str) -> TableTheme:
    """
    Look up a preset by name.

    Raises:
        UnknownThemeError: If no preset has that name
    """
    key = name.strip().lower().replace("_", "-")
    try:
        return THEMES[key]
    except KeyError:
        raise UnknownThemeError(name, sorted(THEMES)) from None
