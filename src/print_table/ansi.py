"""
Escape-sequence composition.

Builds ANSI SGR sequences (``ESC [ code(;code)* m``) for a cell value
from its :class:`~print_table.models.Style`. Each configured attribute
contributes its own sequence; the emission order is fixed so that saved
output can be compared byte for byte.
"""

from __future__ import annotations

import re

from .constants import (
    BOLD_MODE,
    CSI_CODE,
    END_CODE,
    ESC_CODE,
    FAINT_MODE,
    HIDDEN_MODE,
    INVERSE_MODE,
    ITALICIZE_MODE,
    RAPID_BLINK_MODE,
    RESET_ALL_MODES,
    SLOW_BLINK_MODE,
    STRIKE_THROUGH_MODE,
    UNDERLINE_MODE,
)
from .models import Style, StyleValue

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*[JKmsu]")

# (Style attribute, SGR mode) in emission order
MODE_ATTRIBUTES: tuple[tuple[str, str], ...] = (
    ("bold", BOLD_MODE),
    ("faint", FAINT_MODE),
    ("italic", ITALICIZE_MODE),
    ("underline", UNDERLINE_MODE),
    ("slow_blink", SLOW_BLINK_MODE),
    ("rapid_blink", RAPID_BLINK_MODE),
    ("inverse", INVERSE_MODE),
    ("hidden", HIDDEN_MODE),
    ("strike_through", STRIKE_THROUGH_MODE),
)


def sequence_builder(*codes: str) -> str:
    """
    Join codes into a single escape sequence.

    Args:
        *codes: SGR codes such as ``"1"`` or ``"31"``

    Returns:
        ``ESC[c1;c2...m``, or an empty string when no code is given
    """
    if not codes:
        return ""
    return f"{ESC_CODE}{CSI_CODE}{';'.join(str(code) for code in codes)}{END_CODE}"


RESET_SEQUENCE = sequence_builder(RESET_ALL_MODES)


def _code(value: object) -> str:
    # Color enums are str subclasses; use the raw code, not the member repr
    return str(getattr(value, "value", value))


def sequence_mode_code(select: StyleValue | None, value: str, mode: str) -> str:
    """Sequence for a binary mode when ``select`` resolves truthy on ``value``."""
    if select is None:
        return ""
    return sequence_builder(mode) if select.resolve(value) else ""


def sequence_color_code(select: StyleValue | None, value: str) -> str:
    """Sequence for the color ``select`` resolves to on ``value``."""
    if select is None:
        return ""
    color = select.resolve(value)
    if color is None or color == "":
        return ""
    return sequence_builder(_code(color))


def sequence_code_builder(value: str, style: Style) -> str:
    """
    Compose the escape prefix for a cell.

    Predicates are evaluated on ``value`` (the cell's full raw text).
    Exceptions raised by a predicate propagate to the caller.

    Args:
        value: Raw cell value
        style: Resolved cell style

    Returns:
        Concatenated sequences: modes first, then color and background color
    """
    codes = [
        sequence_mode_code(getattr(style, attribute), value, mode)
        for attribute, mode in MODE_ATTRIBUTES
    ]
    codes.append(sequence_color_code(style.color, value))
    codes.append(sequence_color_code(style.bg_color, value))
    return "".join(codes)


def remove_ansi_codes(text: str) -> str:
    """Remove escape sequences from ``text``."""
    return _ANSI_RE.sub("", text)
