"""Border and separator lines of a table."""

from __future__ import annotations

from collections.abc import Sequence

from .models import ColumnSpec, TableCharacters
from .text import column_width


def build_line(
    columns: Sequence[ColumnSpec],
    left: str,
    inner: str,
    right: str,
    fill: str,
) -> str:
    """
    Build a full-width grid line.

    Each column contributes ``fill`` repeated ``width + 2`` times (one
    padding character on each side of the cell), joined with ``inner``
    and wrapped with ``left`` / ``right``.
    """
    segments = inner.join(fill * (column_width(column) + 2) for column in columns)
    return left + segments + right


def top_line(columns: Sequence[ColumnSpec], chars: TableCharacters) -> str:
    return build_line(
        columns,
        chars.top_left_corner,
        chars.top_inner_corner,
        chars.top_right_corner,
        chars.horizontal_line,
    )


def bottom_line(columns: Sequence[ColumnSpec], chars: TableCharacters) -> str:
    return build_line(
        columns,
        chars.bottom_left_corner,
        chars.bottom_inner_corner,
        chars.bottom_right_corner,
        chars.horizontal_line,
    )


def separator_line(columns: Sequence[ColumnSpec], chars: TableCharacters) -> str:
    """Line between the header and the data, and between data rows."""
    return build_line(
        columns,
        chars.side_left_corner,
        chars.center_inner_corner,
        chars.side_right_corner,
        chars.horizontal_line,
    )
