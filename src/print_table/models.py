"""Core models for print-table."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, fields
from typing import Any

from .constants import Alignment
from .exceptions import InvalidColumnError, InvalidThemeError

TruncatePolicy = bool | int | Callable[[str], bool | int] | None
"""How many characters a cell may show before ``...`` is appended.

- ``None`` / ``False``: no limit, the cell grows to fit the text
- ``True``: limit to the column width
- ``int``: explicit limit
- callable: evaluated on the raw value; an int is used as the limit,
  a bool falls back to the column width
"""


@dataclass(frozen=True)
class Static:
    """A style value that is the same for every cell."""

    value: Any

    def resolve(self, text: str) -> Any:
        return self.value


@dataclass(frozen=True)
class Predicate:
    """A style value computed from the cell's raw text."""

    func: Callable[[str], Any]

    def resolve(self, text: str) -> Any:
        return self.func(text)


StyleValue = Static | Predicate


@dataclass(frozen=True)
class Style:
    """
    Text styling for a cell.

    Every field is optional; ``None`` means "not configured here" so that
    a column's style can be layered over a theme's defaults with
    :meth:`merged`. Binary attributes resolve to a bool, ``color`` and
    ``bg_color`` resolve to an escape code (usually a color enum member).

    Attributes:
        style_full_cell: When true the escape codes wrap the padded cell
            instead of only its text
    """

    bold: StyleValue | None = None
    faint: StyleValue | None = None
    italic: StyleValue | None = None
    underline: StyleValue | None = None
    slow_blink: StyleValue | None = None
    rapid_blink: StyleValue | None = None
    inverse: StyleValue | None = None
    hidden: StyleValue | None = None
    strike_through: StyleValue | None = None
    color: StyleValue | None = None
    bg_color: StyleValue | None = None
    style_full_cell: StyleValue | None = None

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None and not isinstance(value, (Static, Predicate)):
                raise InvalidColumnError(
                    f.name, value, "style values must be Static or Predicate"
                )

    def merged(self, override: Style) -> Style:
        """Return a copy where every field set on ``override`` wins."""
        values = {
            f.name: getattr(override, f.name)
            if getattr(override, f.name) is not None
            else getattr(self, f.name)
            for f in fields(self)
        }
        return Style(**values)


@dataclass(frozen=True)
class Header:
    """Resolved column header: label plus its own style and alignment."""

    name: str
    style: Style = field(default_factory=Style)
    align: Alignment = Alignment.LEFT_TOP
    truncate: TruncatePolicy = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise InvalidColumnError("header", self.name, "header name must be a string")


@dataclass(frozen=True)
class ColumnSpec:
    """
    Fully resolved column definition consumed by the renderer.

    Attributes:
        key: Field of each row shown in this column
        header: Header label and header styling
        width: Display width in characters; ``None`` uses the header length
        style: Styling applied to data cells
        align: Horizontal and vertical alignment of data cells
        truncate: Truncation policy for data cells
    """

    key: str
    header: Header
    width: int | None = None
    style: Style = field(default_factory=Style)
    align: Alignment = Alignment.LEFT_TOP
    truncate: TruncatePolicy = None

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key:
            raise InvalidColumnError("key", self.key, "key must be a non-empty string")
        if self.width is not None:
            if isinstance(self.width, bool) or not isinstance(self.width, int):
                raise InvalidColumnError("width", self.width, "width must be an integer")
            if self.width <= 0:
                raise InvalidColumnError("width", self.width, "width must be positive")
        elif not self.header.name:
            raise InvalidColumnError(
                "width", self.width, f"column '{self.key}' needs a width or a header name"
            )
        if not isinstance(self.align, Alignment):
            raise InvalidColumnError("align", self.align, "align must be an Alignment")


@dataclass(frozen=True)
class TableCharacters:
    """Border glyphs of a table and the character used for padding."""

    top_left_corner: str
    top_right_corner: str
    top_inner_corner: str
    bottom_left_corner: str
    bottom_right_corner: str
    bottom_inner_corner: str
    side_left_corner: str
    side_right_corner: str
    center_inner_corner: str
    horizontal_line: str
    vertical_line: str
    padding_char: str = " "

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str) or not value:
                raise InvalidThemeError(f"{f.name} must be a non-empty string")
        if len(self.padding_char) != 1:
            raise InvalidThemeError("padding_char must be a single character")


@dataclass(frozen=True)
class HeaderDefaults:
    """Header styling a theme applies when a column does not override it."""

    style: Style = field(default_factory=Style)
    align: Alignment | None = None


@dataclass(frozen=True)
class ColumnDefaults:
    """Column settings a theme applies when a column does not override them."""

    width: int | None = None
    align: Alignment | None = None
    truncate: TruncatePolicy = None
    style: Style = field(default_factory=Style)
    header: HeaderDefaults = field(default_factory=HeaderDefaults)


@dataclass(frozen=True)
class TableTheme:
    """
    Named preset of border glyphs and default column styles.

    Attributes:
        table: Border glyphs and padding character
        column: Defaults merged under every column at construction
        name: Registry name (informational)
    """

    table: TableCharacters
    column: ColumnDefaults = field(default_factory=ColumnDefaults)
    name: str = "custom"

    def __post_init__(self) -> None:
        if not isinstance(self.table, TableCharacters):
            raise InvalidThemeError("table must be a TableCharacters instance")
        if not isinstance(self.column, ColumnDefaults):
            raise InvalidThemeError("column must be a ColumnDefaults instance")
