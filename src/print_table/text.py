"""Truncation and hard wrapping of cell text."""

from __future__ import annotations

from .constants import ELLIPSIS
from .models import ColumnSpec


def column_width(column: ColumnSpec) -> int:
    """Effective display width: explicit width, else the header length."""
    return column.width or len(column.header.name)


def get_truncate_value(value: str, column: ColumnSpec) -> int:
    """
    Maximum number of characters shown for ``value`` before the ellipsis.

    Args:
        value: Raw cell value
        column: Column the value belongs to

    Returns:
        The truncation limit; ``len(value)`` when truncation is disabled
    """
    width = column_width(column)
    truncate = column.truncate

    if callable(truncate):
        result = truncate(value)
        # Anything but a number (bool, None, text) means the column width
        if isinstance(result, bool) or not isinstance(result, (int, float)):
            return width
        return int(result)
    if truncate is True:
        return width
    if isinstance(truncate, int) and not isinstance(truncate, bool):
        return truncate
    return len(value)


def truncate_text(text: str, max_length: int) -> str:
    """
    Cut ``text`` to ``max_length`` characters and append ``...``.

    The marker is appended even when the limit is below its own length,
    so ``truncate_text("Short", 2) == "Sh..."`` and a limit of 0 or less
    yields just ``"..."``.
    """
    if len(text) <= max_length:
        return text
    return text[: max(max_length, 0)] + ELLIPSIS


def wrap_text(text: str, width: int) -> list[str]:
    """Split ``text`` into ``width``-sized slices; always at least one."""
    if width <= 0:
        raise ValueError("width must be positive")
    fragments = [text[i : i + width] for i in range(0, len(text), width)]
    return fragments or [""]


def shape(value: str, column: ColumnSpec) -> list[str]:
    """Truncate ``value`` per the column policy and wrap it to the column width."""
    truncated = truncate_text(value, get_truncate_value(value, column))
    return wrap_text(truncated, column_width(column))
