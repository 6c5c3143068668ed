"""Pytest fixtures for print-table tests."""

import pytest

from print_table import ROUNDED_BOX_THEME, ConsoleTable


@pytest.fixture
def columns() -> list[dict]:
    """Two fixed-width columns."""
    return [
        {"key": "name", "header": "Name", "width": 20},
        {"key": "age", "header": "Age", "width": 10},
    ]


@pytest.fixture
def data() -> list[dict]:
    """Two rows matching the ``columns`` fixture."""
    return [
        {"name": "John Doe", "age": "30"},
        {"name": "Jane Doe", "age": "25"},
    ]


@pytest.fixture
def rounded_table(columns, data) -> ConsoleTable:
    """Table rendered with the rounded box theme."""
    return ConsoleTable(columns=columns, data=data, theme=ROUNDED_BOX_THEME)
