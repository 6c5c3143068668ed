"""
print-table: styled, box-drawn tables for the terminal.

This library renders rows of data as bordered tables with:
- Fixed-width columns with hard wrapping and ``...`` truncation
- Horizontal and vertical alignment per column
- ANSI styling per column, static or computed from each cell's value
- Border themes (classic, rounded, double line, block, ...)

Example:
    from print_table import ConsoleTable, ForegroundColor, ROUNDED_BOX_THEME

    table = ConsoleTable(
        columns=[
            {"key": "name", "header": "Name", "width": 20},
            {
                "key": "status",
                "header": "Status",
                "color": lambda v: ForegroundColor.GREEN if v == "ok" else ForegroundColor.RED,
            },
        ],
        data=[{"name": "api", "status": "ok"}],
        theme=ROUNDED_BOX_THEME,
    )
    table.print_table()
"""

import importlib.metadata

from .ansi import remove_ansi_codes
from .constants import (
    BOLD_MODE,
    FAINT_MODE,
    HIDDEN_MODE,
    INVERSE_MODE,
    ITALICIZE_MODE,
    RAPID_BLINK_MODE,
    SLOW_BLINK_MODE,
    STRIKE_THROUGH_MODE,
    UNDERLINE_MODE,
    Alignment,
    BgColor,
    BrightBgColor,
    BrightForegroundColor,
    ForegroundColor,
)
from .exceptions import (
    ConfigurationError,
    InvalidAlignmentError,
    InvalidColorError,
    InvalidColumnError,
    InvalidThemeError,
    PrintTableError,
    TableDefinitionError,
    UnknownThemeError,
)
from .models import (
    ColumnDefaults,
    ColumnSpec,
    Header,
    HeaderDefaults,
    Predicate,
    Static,
    Style,
    TableCharacters,
    TableTheme,
)
from .table import ConsoleTable
from .themes import (
    BLOCK_BORDERS_THEME,
    CLASSIC_BOX_THEME,
    CURVED_LINES_THEME,
    DOUBLE_LINE_THEME,
    DOUBLE_MIX_LINE_THEME,
    ROUND_EDGES_THEME,
    ROUNDED_BOX_THEME,
    STAR_BORDERS_THEME,
    THEMES,
    get_theme,
)

try:
    __version__ = importlib.metadata.version("print-table")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Main class
    "ConsoleTable",
    # Models
    "ColumnSpec",
    "Header",
    "Style",
    "Static",
    "Predicate",
    "TableCharacters",
    "TableTheme",
    "ColumnDefaults",
    "HeaderDefaults",
    # Themes
    "CLASSIC_BOX_THEME",
    "ROUNDED_BOX_THEME",
    "DOUBLE_LINE_THEME",
    "DOUBLE_MIX_LINE_THEME",
    "STAR_BORDERS_THEME",
    "ROUND_EDGES_THEME",
    "CURVED_LINES_THEME",
    "BLOCK_BORDERS_THEME",
    "THEMES",
    "get_theme",
    # Enums
    "Alignment",
    "ForegroundColor",
    "BrightForegroundColor",
    "BgColor",
    "BrightBgColor",
    # Modes
    "BOLD_MODE",
    "FAINT_MODE",
    "ITALICIZE_MODE",
    "UNDERLINE_MODE",
    "SLOW_BLINK_MODE",
    "RAPID_BLINK_MODE",
    "INVERSE_MODE",
    "HIDDEN_MODE",
    "STRIKE_THROUGH_MODE",
    # Utilities
    "remove_ansi_codes",
    # Exceptions - Base
    "PrintTableError",
    # Exceptions - Categories
    "ConfigurationError",
    # Exceptions - Configuration
    "InvalidColumnError",
    "InvalidThemeError",
    "UnknownThemeError",
    "InvalidAlignmentError",
    "InvalidColorError",
    # Exceptions - Definition files
    "TableDefinitionError",
]
