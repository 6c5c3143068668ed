"""Exceptions for print-table."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class PrintTableError(Exception):
    """
    Base exception for all print-table errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class ConfigurationError(PrintTableError):
    """
    Base exception for invalid table configuration.

    Raised while columns, themes or styles are being resolved, before
    any line is rendered.
    """

    pass


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class InvalidColumnError(ConfigurationError):
    """
    Raised when a column definition cannot be rendered.

    Attributes:
        field: Name of the offending column attribute
        value: The rejected value
        reason: Human-readable explanation
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid column {field}={value!r}: {reason}")


class InvalidThemeError(ConfigurationError):
    """Raised when a theme is missing glyphs or has the wrong shape."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid theme: {reason}")


class UnknownThemeError(ConfigurationError):
    """Raised when a theme preset name is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(f"Unknown theme '{name}'. Available themes: {', '.join(available)}")


class InvalidAlignmentError(ConfigurationError):
    """Raised when an alignment mode is not recognized."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid alignment: {value!r}")


class InvalidColorError(ConfigurationError):
    """Raised when a color name or code cannot be resolved."""

    def __init__(self, value: Any, background: bool = False) -> None:
        self.value = value
        self.background = background
        kind = "background color" if background else "color"
        super().__init__(f"Invalid {kind}: {value!r}")


# ---------------------------------------------------------------------------
# Definition File Exceptions
# ---------------------------------------------------------------------------


class TableDefinitionError(PrintTableError):
    """
    Raised when a table definition file cannot be loaded.

    Attributes:
        path: The file that was being read
        reason: What was wrong with it
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load table definition '{path}': {reason}")
