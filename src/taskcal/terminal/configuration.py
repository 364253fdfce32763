# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from taskcal import configuration
from taskcal.model.cursor import CalendarMode
from taskcal.repository.configuration import CONFIGURATION_REPO
from taskcal.terminal.custom_typer import AlphabeticalAliasedGroup
from taskcal.terminal.parse import parse_mode

app = typer.Typer(cls=AlphabeticalAliasedGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header", "✓ Enabled" if config["show_header"] else "✗ Disabled"
    )
    table.add_row("data_path", config["data_path"] or str(configuration.DATA_PATH))
    table.add_row("default_mode", config["default_mode"])
    table.add_row("cell_width", str(config["cell_width"]))
    table.add_row("day_width", str(config["day_width"]))
    table.add_row("max_tasks_per_cell", str(config["max_tasks_per_cell"]))
    table.add_row("first_hour", str(config["first_hour"]))
    table.add_row("last_hour", str(config["last_hour"]))
    table.add_row("log_level", config.get("log_level", "WARNING"))

    console.print(table)
    console.print(f"\nConfig file: {configuration.APP_CONFIG_PATH}")


@app.command("set, s")
def set_config(
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header", help="Show the header"),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory holding tasks.yaml and cursor.yaml"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Use the default data directory"),
    ] = False,
    default_mode: Annotated[
        Optional[CalendarMode],
        typer.Option(
            "--default-mode", parser=parse_mode, help="Layout used on first start"
        ),
    ] = None,
    cell_width: Annotated[
        Optional[int],
        typer.Option("--cell-width", help="Width of each month cell in characters"),
    ] = None,
    day_width: Annotated[
        Optional[int],
        typer.Option("--day-width", help="Width of each week day column in characters"),
    ] = None,
    max_tasks_per_cell: Annotated[
        Optional[int],
        typer.Option("--max-tasks-per-cell", help="Tasks shown per month cell"),
    ] = None,
    first_hour: Annotated[
        Optional[int],
        typer.Option("--first-hour", help="First hourly slot of the week view"),
    ] = None,
    last_hour: Annotated[
        Optional[int],
        typer.Option("--last-hour", help="Last hourly slot of the week view"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Console log level, e.g. WARNING or DEBUG"),
    ] = None,
) -> None:
    """Update configuration settings."""
    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        data_path=data_path,
        remove_data_path=remove_data_path,
        default_mode=default_mode.value if default_mode is not None else None,
        cell_width=cell_width,
        day_width=day_width,
        max_tasks_per_cell=max_tasks_per_cell,
        first_hour=first_hour,
        last_hour=last_hour,
        log_level=log_level,
    )
