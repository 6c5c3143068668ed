"""Horizontal and vertical placement of cell fragments."""

from __future__ import annotations

from .constants import Alignment


def _mode(align: Alignment | str | None, default: Alignment) -> str:
    if align is None:
        return default.value
    if isinstance(align, Alignment):
        return align.value
    return str(align)


def get_padding(value: str, width: int, char: str) -> str:
    """Padding that fills ``value`` up to ``width``; empty if it is already wider."""
    if len(value) > width:
        return ""
    return char * (width - len(value))


def align_horizontal_text(
    value: str,
    padding: str,
    align: Alignment | str | None = Alignment.LEFT,
) -> str:
    """
    Place ``value`` inside ``padding``.

    ``right*`` puts the padding first, ``center*`` splits it with the
    smaller half on the left, anything else puts the padding last.
    """
    mode = _mode(align, Alignment.LEFT)
    if mode.startswith("right"):
        return padding + value
    if mode.startswith("center"):
        center = len(padding) // 2
        return padding[:center] + value + padding[center:]
    return value + padding


def pad_array_with_align(
    cell_fragments: list[str],
    length: int,
    align: Alignment | str | None = Alignment.TOP,
) -> list[str]:
    """
    Pad a cell's fragments with blank lines to ``length`` entries.

    ``*bottom`` inserts the blanks before the fragments, ``*middle`` splits
    them with the smaller half on top, anything else appends them.
    """
    missing = max(length - len(cell_fragments), 0)
    mode = _mode(align, Alignment.TOP)
    if mode.endswith("bottom"):
        return [""] * missing + list(cell_fragments)
    if mode.endswith("middle"):
        top = missing // 2
        return [""] * top + list(cell_fragments) + [""] * (missing - top)
    return list(cell_fragments) + [""] * missing
