"""
Console table renderer.

Example:
    from print_table import ConsoleTable, ROUNDED_BOX_THEME

    table = ConsoleTable(
        columns=[
            {"key": "name", "header": "Name", "width": 20},
            {"key": "age", "header": "Age", "width": 10, "align": "right"},
        ],
        data=[{"name": "John Doe", "age": 30}],
        theme=ROUNDED_BOX_THEME,
    )
    table.print_table()
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Mapping
from typing import Any, TextIO

from .grid import bottom_line, separator_line, top_line
from .models import ColumnSpec, TableTheme
from .options import normalize_row, normalize_rows, resolve_columns
from .rows import assemble_rows
from .text import get_truncate_value
from .themes import DEFAULT_THEME

logger = logging.getLogger(__name__)

ColumnOptions = Mapping[str, Any] | ColumnSpec


class ConsoleTable:
    """
    Render rows of data as a bordered, styled table.

    Columns are resolved against the theme once, at construction (or in
    :meth:`set_columns`). Every call to :meth:`get_table_strings` renders
    from the current state; nothing is cached between calls.

    Args:
        columns: Column options (mappings) or resolved ``ColumnSpec`` objects
        data: Rows as mappings of column key to value; copied on the way in
        theme: Theme preset; defaults to the classic box theme
    """

    def __init__(
        self,
        columns: Iterable[ColumnOptions],
        data: Iterable[Mapping[str, Any]] = (),
        theme: TableTheme | None = None,
    ) -> None:
        self._theme = theme if theme is not None else DEFAULT_THEME
        self._columns = resolve_columns(columns, self._theme)
        self._data = normalize_rows(data)

    @property
    def columns(self) -> list[ColumnSpec]:
        return list(self._columns)

    @property
    def data(self) -> list[dict[str, str]]:
        return [dict(row) for row in self._data]

    @property
    def theme(self) -> TableTheme:
        return self._theme

    def set_columns(self, columns: Iterable[ColumnOptions]) -> None:
        """Replace the columns, resolving them against the current theme."""
        self._columns = resolve_columns(columns, self._theme)

    def set_data(self, data: Iterable[Mapping[str, Any]]) -> None:
        self._data = normalize_rows(data)

    def set_theme(self, theme: TableTheme) -> None:
        """
        Replace the theme.

        Only the border glyphs change for columns that are already set;
        column defaults from the new theme apply to later ``set_columns`` calls.
        """
        self._theme = theme

    def add_row_data(self, row: Mapping[str, Any]) -> None:
        """Append a row at the end of the table."""
        self._data.append(normalize_row(row))

    def get_truncate_value(self, value: str, column: ColumnSpec) -> int:
        return get_truncate_value(value, column)

    def _header_columns(self) -> list[ColumnSpec]:
        # Keyed by position so columns sharing a data key keep their own labels
        return [
            ColumnSpec(
                key=str(index),
                header=column.header,
                width=column.width,
                style=column.header.style,
                align=column.header.align,
                truncate=column.header.truncate,
            )
            for index, column in enumerate(self._columns)
        ]

    def get_header_lines(self) -> list[str]:
        header_row = {
            str(index): column.header.name for index, column in enumerate(self._columns)
        }
        return assemble_rows(
            [header_row],
            self._header_columns(),
            self._theme.table,
            self.get_separator_line(),
        )

    def get_data_lines(self) -> list[str]:
        return assemble_rows(
            self._data,
            self._columns,
            self._theme.table,
            self.get_separator_line(),
        )

    def get_top_line(self) -> str:
        return top_line(self._columns, self._theme.table)

    def get_bottom_line(self) -> str:
        return bottom_line(self._columns, self._theme.table)

    def get_separator_line(self) -> str:
        return separator_line(self._columns, self._theme.table)

    def get_table_strings(self) -> list[str]:
        """
        Render the whole table.

        Returns:
            Top border, header lines, header separator, data lines (with
            separators between rows) and bottom border, without newlines
        """
        lines: list[str] = []
        lines.append(self.get_top_line())
        lines.extend(self.get_header_lines())
        lines.append(self.get_separator_line())
        lines.extend(self.get_data_lines())
        lines.append(self.get_bottom_line())

        logger.debug(
            "Rendered table: %d columns, %d rows, %d lines (theme=%s)",
            len(self._columns),
            len(self._data),
            len(lines),
            self._theme.name,
        )
        return lines

    def print_table(self, file: TextIO | None = None) -> None:
        """Write the table to ``file`` (stdout by default), one line at a time."""
        out = file if file is not None else sys.stdout
        for line in self.get_table_strings():
            print(line, file=out)
