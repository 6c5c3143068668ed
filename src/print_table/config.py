"""
Table definition files and environment configuration.

A table definition is a YAML document::

    theme: rounded
    columns:
      - key: name
        header: {name: Name, color: bright_cyan}
        width: 20
      - key: status
        header: Status
        color: green
        align: center-middle
    rows:
      - {name: api, status: up}

Colors are given by name (``red``, ``bright_blue``) or by raw SGR code.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

import yaml

from .exceptions import TableDefinitionError
from .table import ConsoleTable
from .themes import DEFAULT_THEME, get_theme

logger = logging.getLogger(__name__)

THEME_ENV_VAR = "PRINT_TABLE_THEME"
"""Environment variable naming the default theme preset for the CLI."""


def resolve_theme_name(name: str | None = None) -> str:
    """Theme name precedence: explicit name, ``PRINT_TABLE_THEME``, ``classic``."""
    return name or os.environ.get(THEME_ENV_VAR) or DEFAULT_THEME.name


def table_from_definition(
    definition: Mapping[str, Any],
    theme_name: str | None = None,
    source: str = "<definition>",
) -> ConsoleTable:
    """
    Build a table from a parsed definition mapping.

    Args:
        definition: Mapping with ``columns`` and optional ``rows``/``theme``
        theme_name: Overrides the definition's ``theme``
        source: Name used in error messages

    Raises:
        TableDefinitionError: If ``columns``/``rows`` have the wrong shape
        ConfigurationError: If a column, color or theme is invalid
    """
    columns = definition.get("columns")
    if not isinstance(columns, list) or not columns:
        raise TableDefinitionError(source, "'columns' must be a non-empty list")
    rows = definition.get("rows") or []
    if not isinstance(rows, list):
        raise TableDefinitionError(source, "'rows' must be a list")
    for column in columns:
        if not isinstance(column, Mapping):
            raise TableDefinitionError(source, "every column must be a mapping")
    declared_theme = definition.get("theme")
    if declared_theme is not None and not isinstance(declared_theme, str):
        raise TableDefinitionError(source, "'theme' must be a string")

    theme = get_theme(resolve_theme_name(theme_name or declared_theme))
    logger.debug(
        "Loaded definition %s: %d columns, %d rows, theme=%s",
        source,
        len(columns),
        len(rows),
        theme.name,
    )
    return ConsoleTable(
        columns=columns,
        data=rows,
        theme=theme,
    )


def load_table_definition(path: str, theme_name: str | None = None) -> ConsoleTable:
    """
    Load a YAML table definition from ``path``.

    Raises:
        TableDefinitionError: If the file cannot be read or parsed
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise TableDefinitionError(path, e.strerror or str(e)) from e
    except yaml.YAMLError as e:
        raise TableDefinitionError(path, f"invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise TableDefinitionError(path, "YAML file must contain a mapping")
    return table_from_definition(data, theme_name=theme_name, source=path)
