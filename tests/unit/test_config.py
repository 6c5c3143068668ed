"""Tests for table definition files and environment configuration."""

from pathlib import Path

import pytest

from print_table.config import (
    THEME_ENV_VAR,
    load_table_definition,
    resolve_theme_name,
    table_from_definition,
)
from print_table.exceptions import TableDefinitionError, UnknownThemeError
from print_table.models import Static
from print_table.themes import ROUNDED_BOX_THEME, STAR_BORDERS_THEME

DEFINITION = """\
theme: rounded
columns:
  - key: name
    header: {name: Name, color: bright_cyan}
    width: 8
  - key: status
    header: Status
    color: green
    bg_color: black
    align: center-middle
rows:
  - {name: api, status: up}
  - {name: worker, status: 3}
"""


@pytest.fixture
def definition_file(tmp_path: Path) -> Path:
    path = tmp_path / "table.yaml"
    path.write_text(DEFINITION, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _clear_theme_env(monkeypatch) -> None:
    monkeypatch.delenv(THEME_ENV_VAR, raising=False)


class TestResolveThemeName:
    """Tests for resolve_theme_name."""

    def test_explicit_wins(self, monkeypatch) -> None:
        monkeypatch.setenv(THEME_ENV_VAR, "star")
        assert resolve_theme_name("block") == "block"

    def test_environment(self, monkeypatch) -> None:
        monkeypatch.setenv(THEME_ENV_VAR, "star")
        assert resolve_theme_name() == "star"

    def test_default(self) -> None:
        assert resolve_theme_name() == "classic"


class TestLoadTableDefinition:
    """Tests for load_table_definition."""

    def test_loads_table(self, definition_file: Path) -> None:
        table = load_table_definition(str(definition_file))
        assert table.theme is ROUNDED_BOX_THEME
        name, status = table.columns
        assert name.header.style.color == Static("96")
        assert status.style.color == Static("32")
        assert status.style.bg_color == Static("40")
        assert table.data[1] == {"name": "worker", "status": "3"}

    def test_renders(self, definition_file: Path) -> None:
        lines = load_table_definition(str(definition_file)).get_table_strings()
        # Status has no width and takes the theme's 20
        assert lines[0] == "╭" + "─" * 10 + "┬" + "─" * 22 + "╮"
        assert len(lines) == 7

    def test_theme_override(self, definition_file: Path) -> None:
        table = load_table_definition(str(definition_file), theme_name="star")
        assert table.theme is STAR_BORDERS_THEME

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(TableDefinitionError):
            load_table_definition(str(tmp_path / "missing.yaml"))

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("columns: [unclosed", encoding="utf-8")
        with pytest.raises(TableDefinitionError, match="invalid YAML"):
            load_table_definition(str(path))

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(TableDefinitionError, match="mapping"):
            load_table_definition(str(path))


class TestTableFromDefinition:
    """Tests for table_from_definition."""

    def test_requires_columns(self) -> None:
        with pytest.raises(TableDefinitionError, match="columns"):
            table_from_definition({"rows": []})

    def test_rows_must_be_list(self) -> None:
        with pytest.raises(TableDefinitionError, match="rows"):
            table_from_definition({"columns": [{"key": "a"}], "rows": {"a": 1}})

    def test_columns_must_be_mappings(self) -> None:
        with pytest.raises(TableDefinitionError, match="mapping"):
            table_from_definition({"columns": ["a"]})

    @pytest.mark.parametrize("theme", [1, ["rounded"], True])
    def test_theme_must_be_string(self, theme) -> None:
        with pytest.raises(TableDefinitionError, match="'theme' must be a string"):
            table_from_definition({"columns": [{"key": "a"}], "theme": theme})

    def test_unknown_theme(self) -> None:
        with pytest.raises(UnknownThemeError):
            table_from_definition({"columns": [{"key": "a"}], "theme": "neon"})

    def test_environment_theme(self, monkeypatch) -> None:
        monkeypatch.setenv(THEME_ENV_VAR, "star")
        table = table_from_definition({"columns": [{"key": "a"}]})
        assert table.theme is STAR_BORDERS_THEME
