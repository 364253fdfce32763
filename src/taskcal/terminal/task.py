# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from taskcal.model.drawer import DrawerMode
from taskcal.repository.task import TASK_REPO
from taskcal.terminal.custom_typer import AlphabeticalAliasedGroup
from taskcal.terminal.drawer import TerminalTaskDrawer
from taskcal.terminal.parse import parse_date, parse_task_id
from taskcal.view.task import tasks_view

app = typer.Typer(cls=AlphabeticalAliasedGroup, no_args_is_help=True)


@app.command("list, ls")
def list_tasks(
    due: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--due",
            "-d",
            parser=parse_date,
            help="Only tasks due on this day; valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset",
        ),
    ] = None,
    status: Annotated[
        Optional[str],
        typer.Option("--status", "-s", help="Only tasks with this status"),
    ] = None,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable colors"),
    ] = False,
) -> None:
    """List tasks from the task source."""
    tasks = TASK_REPO.get_all_tasks()
    if due is not None:
        tasks = [task for task in tasks if task["due_date"] == due]
    if status is not None:
        tasks = [task for task in tasks if task["status"] == status]

    tasks_view(tasks, use_color=not no_color)


@app.command("view, v")
def view(
    id: Annotated[str, typer.Argument(help="id of the task to view")],
) -> None:
    """Display a single task."""
    TerminalTaskDrawer(TASK_REPO).open(DrawerMode.VIEW, parse_task_id(id))


@app.command("edit, e")
def edit(
    id: Annotated[str, typer.Argument(help="id of the task to edit")],
) -> None:
    """Open the task source in $EDITOR to edit a task."""
    task_id = parse_task_id(id)
    if TASK_REPO.get_task(task_id) is None:
        raise typer.BadParameter(f"No task with id {id}")
    TerminalTaskDrawer(TASK_REPO).open(DrawerMode.EDIT, task_id)
