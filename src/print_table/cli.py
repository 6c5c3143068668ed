"""Command-line interface for print-table."""

import logging
import sys

import click

from .ansi import remove_ansi_codes
from .config import THEME_ENV_VAR, load_table_definition
from .constants import Alignment, BrightForegroundColor, ForegroundColor
from .exceptions import PrintTableError
from .table import ConsoleTable
from .themes import THEMES

logger = logging.getLogger(__name__)

SAMPLE_COLUMNS = [
    {"key": "service", "header": "Service", "width": 12},
    {
        "key": "status",
        "header": "Status",
        "width": 8,
        "align": Alignment.CENTER_MIDDLE,
        "color": lambda v: ForegroundColor.GREEN if v == "up" else ForegroundColor.RED,
    },
    {
        "key": "note",
        "header": "Note",
        "width": 16,
        "color": BrightForegroundColor.BRIGHT_BLACK,
    },
]

SAMPLE_ROWS = [
    {"service": "api", "status": "up", "note": "p99 41ms"},
    {"service": "worker", "status": "down", "note": "restarting after deploy"},
]


def _echo_lines(lines: list[str], color: bool) -> None:
    for line in lines:
        click.echo(line if color else remove_ansi_codes(line), color=color)


@click.group()
@click.version_option()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging on stderr.")
def cli(verbose: bool) -> None:
    """Render styled box-drawn tables in the terminal."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
        )


@cli.command()
@click.option(
    "--file",
    "-f",
    "file_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="YAML table definition.",
)
@click.option(
    "--theme",
    "-t",
    help=f"Theme preset (default: definition's theme, ${THEME_ENV_VAR}, or classic).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Keep or strip escape sequences in the output.",
)
def render(file_path: str, theme: str | None, color: bool) -> None:
    """Render a table from a YAML definition file."""
    try:
        table = load_table_definition(file_path, theme_name=theme)
        lines = table.get_table_strings()
    except PrintTableError as e:
        logger.debug("Render failed for %s", file_path, exc_info=True)
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    _echo_lines(lines, color)


@cli.command()
@click.option("--preview", is_flag=True, help="Render a sample table in every theme.")
@click.option(
    "--color/--no-color",
    default=True,
    help="Keep or strip escape sequences in previews.",
)
def themes(preview: bool, color: bool) -> None:
    """List the available theme presets."""
    for name, theme in THEMES.items():
        click.echo(name)
        if preview:
            table = ConsoleTable(SAMPLE_COLUMNS, SAMPLE_ROWS, theme=theme)
            _echo_lines(table.get_table_strings(), color)
            click.echo()


@cli.command()
def strip() -> None:
    """Copy stdin to stdout with escape sequences removed."""
    for line in click.get_text_stream("stdin"):
        click.echo(remove_ansi_codes(line), nl=False)


if __name__ == "__main__":
    cli()
