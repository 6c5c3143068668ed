"""
Column option resolution.

Raw column options are plain mappings such as::

    {"key": "age", "header": "Age", "width": 10, "bold": lambda v: int(v) > 60}

They are resolved once, when a table is constructed, into immutable
:class:`~print_table.models.ColumnSpec` objects. Every setting follows the
same layering::

    column option  ??  theme default  ??  built-in default

so a column only has to spell out what differs from its theme.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .constants import Alignment, BgColor, BrightBgColor, BrightForegroundColor, ForegroundColor
from .exceptions import (
    ConfigurationError,
    InvalidAlignmentError,
    InvalidColorError,
    InvalidColumnError,
)
from .models import ColumnSpec, Header, Predicate, Static, Style, StyleValue, TableTheme

DEFAULT_ALIGN = Alignment.LEFT_TOP

# Style field -> resolved against the background palettes
COLOR_ATTRIBUTES = {"color": False, "bg_color": True}

# Accepted option names -> Style field
STYLE_OPTIONS: dict[str, str] = {
    "bold": "bold",
    "faint": "faint",
    "italic": "italic",
    "italicize": "italic",
    "underline": "underline",
    "slow_blink": "slow_blink",
    "slowBlink": "slow_blink",
    "rapid_blink": "rapid_blink",
    "rapidBlink": "rapid_blink",
    "inverse": "inverse",
    "hidden": "hidden",
    "strike_through": "strike_through",
    "strikeThrough": "strike_through",
    "color": "color",
    "bg_color": "bg_color",
    "bgColor": "bg_color",
    "style_full_cell": "style_full_cell",
    "styleFullCell": "style_full_cell",
}

COLUMN_OPTIONS = frozenset({"key", "header", "width", "align", "truncate"}) | set(STYLE_OPTIONS)
HEADER_OPTIONS = frozenset({"name", "align", "truncate"}) | set(STYLE_OPTIONS)


def to_style_value(raw: Any) -> StyleValue | None:
    """Wrap a raw option: callables become predicates, anything else is static."""
    if raw is None or isinstance(raw, (Static, Predicate)):
        return raw
    if callable(raw):
        return Predicate(raw)
    return Static(raw)


def parse_color(name: Any, background: bool = False) -> str:
    """
    Convert a color name or SGR code to the code string.

    Args:
        name: ``"red"``, ``"bright_red"``, ``"BRIGHT-RED"``, a color enum
            member, or a numeric code
        background: Resolve against the background palettes

    Raises:
        InvalidColorError: If the name is unknown or the code out of range
    """
    if isinstance(name, (ForegroundColor, BrightForegroundColor, BgColor, BrightBgColor)):
        return name.value
    if isinstance(name, bool):
        raise InvalidColorError(name, background)

    text = str(name).strip()
    if text.isdigit():
        code = int(text)
        valid = (40 <= code <= 47 or 100 <= code <= 107) if background else (
            30 <= code <= 37 or 90 <= code <= 97
        )
        if not valid:
            raise InvalidColorError(name, background)
        return str(code)

    member = text.upper().replace("-", "_").replace(" ", "_")
    palettes = (BgColor, BrightBgColor) if background else (ForegroundColor, BrightForegroundColor)
    for palette in palettes:
        if member in palette.__members__:
            return palette[member].value
    raise InvalidColorError(name, background)


def style_from_options(options: Mapping[str, Any]) -> Style:
    """
    Build a Style from the style keys present in ``options``.

    Static colors are checked here; color predicates are trusted to
    return codes.

    Raises:
        InvalidColorError: If a static color cannot be resolved
    """
    values: dict[str, StyleValue | None] = {}
    for option, attribute in STYLE_OPTIONS.items():
        if option in options:
            value = to_style_value(options[option])
            if attribute in COLOR_ATTRIBUTES and isinstance(value, Static):
                value = Static(parse_color(value.value, COLOR_ATTRIBUTES[attribute]))
            values[attribute] = value
    return Style(**values)


def parse_alignment(raw: Any) -> Alignment | None:
    """
    Convert an alignment option to :class:`Alignment`.

    Raises:
        InvalidAlignmentError: If the value is not a known mode
    """
    if raw is None or isinstance(raw, Alignment):
        return raw
    try:
        return Alignment(str(raw).strip().lower().replace("_", "-"))
    except ValueError:
        raise InvalidAlignmentError(raw) from None


def _check_keys(options: Mapping[str, Any], allowed: Iterable[str], what: str) -> None:
    unknown = sorted(set(options) - set(allowed))
    if unknown:
        raise InvalidColumnError(what, unknown[0], f"unknown {what} option")


def resolve_header(raw: str | Mapping[str, Any] | Header, theme: TableTheme) -> Header:
    """Resolve the ``header`` option of a column (string shorthand or mapping)."""
    if isinstance(raw, Header):
        return raw
    defaults = theme.column.header
    if isinstance(raw, str):
        return Header(name=raw, style=defaults.style, align=defaults.align or DEFAULT_ALIGN)
    if not isinstance(raw, Mapping):
        raise InvalidColumnError("header", raw, "header must be a string or a mapping")

    _check_keys(raw, HEADER_OPTIONS, "header")
    if "name" not in raw:
        raise InvalidColumnError("header", raw, "header mapping needs a 'name'")
    return Header(
        name=raw["name"],
        style=defaults.style.merged(style_from_options(raw)),
        align=parse_alignment(raw.get("align")) or defaults.align or DEFAULT_ALIGN,
        truncate=raw.get("truncate"),
    )


def resolve_column(options: Mapping[str, Any] | ColumnSpec, theme: TableTheme) -> ColumnSpec:
    """
    Resolve one column against ``theme``.

    Already resolved :class:`ColumnSpec` objects are returned unchanged.

    Raises:
        InvalidColumnError: On unknown options or an unusable key/width
        InvalidAlignmentError: On an unknown alignment mode
    """
    if isinstance(options, ColumnSpec):
        return options
    if not isinstance(options, Mapping):
        raise InvalidColumnError("column", options, "column options must be a mapping")

    _check_keys(options, COLUMN_OPTIONS, "column")
    if "key" not in options:
        raise InvalidColumnError("key", None, "column options need a 'key'")

    defaults = theme.column
    width = options.get("width")
    truncate = options["truncate"] if "truncate" in options else defaults.truncate
    return ColumnSpec(
        key=options["key"],
        header=resolve_header(options.get("header", options["key"]), theme),
        width=width if width is not None else defaults.width,
        style=defaults.style.merged(style_from_options(options)),
        align=parse_alignment(options.get("align")) or defaults.align or DEFAULT_ALIGN,
        truncate=truncate,
    )


def resolve_columns(
    columns: Iterable[Mapping[str, Any] | ColumnSpec], theme: TableTheme
) -> list[ColumnSpec]:
    return [resolve_column(column, theme) for column in columns]


def normalize_row(row: Mapping[str, Any]) -> dict[str, str]:
    """Copy a row, coercing values to text (``None`` becomes ``""``)."""
    if not isinstance(row, Mapping):
        raise ConfigurationError(f"Row must be a mapping, got {type(row).__name__}")
    return {str(key): "" if value is None else str(value) for key, value in row.items()}


def normalize_rows(data: Iterable[Mapping[str, Any]]) -> list[dict[str, str]]:
    return [normalize_row(row) for row in data]
