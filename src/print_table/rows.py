"""
Row assembly.

Turns one logical row (the header or a data row) into printable lines:
every cell is shaped into fragments, padded vertically to the tallest
cell of the row, styled and aligned horizontally, and the per-column
line lists are then transposed and joined with the vertical border.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .alignment import align_horizontal_text, get_padding, pad_array_with_align
from .ansi import RESET_SEQUENCE, sequence_code_builder
from .models import ColumnSpec, TableCharacters
from .text import column_width, shape

Row = Mapping[str, str]


def cell_value(row: Row, key: str) -> str:
    """Raw value of ``key`` in ``row``; missing keys read as an empty string."""
    value = row.get(key)
    return "" if value is None else value


def combine_arrays(data: Sequence[Sequence[str]], separator: str) -> list[str]:
    """
    Transpose column-major line lists and join each line with ``separator``.

    Columns of unequal length are cut to the shortest one; rows built by
    :func:`apply_styles_to_row` are always padded to equal length first.
    """
    return [separator.join(line) for line in zip(*data)]


def get_cell_fragments(column: ColumnSpec, row: Row) -> list[str]:
    return shape(cell_value(row, column.key), column)


def style_fragment(
    fragment: str,
    raw_value: str,
    column: ColumnSpec,
    padding_char: str,
) -> str:
    """Pad, style and align a single fragment of a cell."""
    padding = get_padding(fragment, column_width(column), padding_char)
    codes = sequence_code_builder(raw_value, column.style)
    full_cell = column.style.style_full_cell
    if full_cell is not None and full_cell.resolve(raw_value):
        return codes + align_horizontal_text(fragment, padding, column.align) + RESET_SEQUENCE
    return align_horizontal_text(codes + fragment + RESET_SEQUENCE, padding, column.align)


def apply_styles_to_row(
    row: Row,
    cells: Sequence[Sequence[str]],
    columns: Sequence[ColumnSpec],
    padding_char: str,
) -> list[list[str]]:
    """
    Pad every cell to the row's line count, then style each line.

    Args:
        row: Raw row values (style predicates see the full value)
        cells: Fragments per column, in column order
        columns: Column definitions, in the same order as ``cells``
        padding_char: Character used to fill cells to their width

    Returns:
        Styled lines per column, all of the same length
    """
    max_lines = max((len(fragments) for fragments in cells), default=0)
    styled: list[list[str]] = []
    for fragments, column in zip(cells, columns):
        raw_value = cell_value(row, column.key)
        padded = pad_array_with_align(list(fragments), max_lines, column.align)
        styled.append(
            [style_fragment(fragment, raw_value, column, padding_char) for fragment in padded]
        )
    return styled


def assemble_row(
    row: Row,
    columns: Sequence[ColumnSpec],
    chars: TableCharacters,
) -> list[str]:
    """Printable lines for one row, framed by the vertical border."""
    cells = [get_cell_fragments(column, row) for column in columns]
    styled = apply_styles_to_row(row, cells, columns, chars.padding_char)

    pad = chars.padding_char
    vertical = chars.vertical_line
    joined = combine_arrays(styled, RESET_SEQUENCE + pad + vertical + pad)
    return [vertical + pad + line + pad + vertical for line in joined]


def assemble_rows(
    rows: Sequence[Row],
    columns: Sequence[ColumnSpec],
    chars: TableCharacters,
    separator: str,
) -> list[str]:
    """Lines for several rows with ``separator`` between consecutive rows."""
    lines: list[str] = []
    for index, row in enumerate(rows):
        lines.extend(assemble_row(row, columns, chars))
        if index < len(rows) - 1:
            lines.append(separator)
    return lines
