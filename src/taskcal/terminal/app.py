# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console

from taskcal.errors import TaskcalError
from taskcal.repository.task import TASK_REPO
from taskcal.terminal import calendar, configuration, task
from taskcal.terminal.custom_typer import OrderedAliasedGroup
from taskcal.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedGroup,
    help="taskcal - Month and week calendars for your tasks",
    no_args_is_help=True,
)
app.add_typer(calendar.app, name="cal, c")
app.add_typer(task.app, name="task, t")
app.add_typer(configuration.app, name="config, cf")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output",
        ),
    ] = False,
    tasks_file: Annotated[
        Optional[Path],
        typer.Option(
            "--tasks-file",
            "-f",
            help="Read tasks from this YAML file instead of the data directory",
        ),
    ] = None,
) -> None:
    """
    taskcal - Month and week calendars for your tasks

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if tasks_file is not None:
        TASK_REPO.use_file(tasks_file)


def exit_with_error(error: TaskcalError) -> NoReturn:
    Console(stderr=True).print(f"[red]{error}[/red]")
    raise SystemExit(1)


def run() -> None:
    try:
        app()
    except TaskcalError as e:
        exit_with_error(e)
