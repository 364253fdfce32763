# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import pendulum
import typer

from taskcal.calendar import cursor
from taskcal.calendar.engine import CalendarCache
from taskcal.model.calendar import MonthView, WeekView
from taskcal.model.cursor import CalendarMode, CursorState
from taskcal.model.drawer import DrawerMode
from taskcal.model.task import Task, TaskId
from taskcal.repository.configuration import CONFIGURATION_REPO
from taskcal.repository.cursor import CURSOR_REPO
from taskcal.repository.task import TASK_REPO
from taskcal.terminal.custom_typer import AlphabeticalAliasedGroup
from taskcal.terminal.drawer import TerminalTaskDrawer
from taskcal.terminal.parse import parse_date, parse_mode, parse_task_id
from taskcal.time import today_local
from taskcal.view.calendar import calendar_month_view, calendar_week_view

app = typer.Typer(cls=AlphabeticalAliasedGroup, no_args_is_help=True)

CALENDAR_CACHE = CalendarCache()


def _load_cursor() -> CursorState:
    config = CONFIGURATION_REPO.get_config()
    return CURSOR_REPO.get_cursor(today_local(), CalendarMode(config["default_mode"]))


def _find_task(tasks: list[Task], task_id: Optional[TaskId]) -> Optional[Task]:
    if task_id is None:
        return None
    for task in tasks:
        if str(task["id"]) == str(task_id):
            return task
    return None


def _render(state: CursorState) -> None:
    config = CONFIGURATION_REPO.get_config()
    tasks = TASK_REPO.get_all_tasks()

    view = CALENDAR_CACHE.get_view(
        state, tasks, today_local(), config["first_hour"], config["last_hour"]
    )
    # A selection whose task has left the task source just shows no panel
    selected_task = _find_task(tasks, state["selected_task_id"])

    if state["mode"] == CalendarMode.MONTH:
        calendar_month_view(
            cast(MonthView, view),
            config["cell_width"],
            config["max_tasks_per_cell"],
            selected_task,
        )
    else:
        calendar_week_view(cast(WeekView, view), config["day_width"], selected_task)


def _save_and_render(state: CursorState) -> None:
    CURSOR_REPO.save_cursor(state)
    _render(state)


@app.command("show, s")
def show(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--date",
            "-d",
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
    mode: Annotated[
        Optional[CalendarMode],
        typer.Option(
            "--mode",
            "-m",
            parser=parse_mode,
            help="Calendar layout: month or week",
        ),
    ] = None,
) -> None:
    """Display the calendar at the current position."""
    state = _load_cursor()
    if mode is not None:
        state = cursor.set_mode(state, mode)
    if date is not None:
        state = {
            "mode": state["mode"],
            "reference_date": date,
            "selected_task_id": state["selected_task_id"],
        }
    _save_and_render(state)


@app.command("next, n")
def next_period() -> None:
    """Move forward one month, or one week in week mode."""
    _save_and_render(cursor.go_to_next_period(_load_cursor()))


@app.command("prev, p")
def previous_period() -> None:
    """Move back one month, or one week in week mode."""
    _save_and_render(cursor.go_to_previous_period(_load_cursor()))


@app.command("today, t")
def today() -> None:
    """Jump to the period containing today."""
    _save_and_render(cursor.go_to_today(_load_cursor(), today_local()))


@app.command("mode, m")
def mode(
    mode: Annotated[
        CalendarMode,
        typer.Argument(parser=parse_mode, help="Calendar layout: month or week"),
    ],
) -> None:
    """Switch between the month grid and the week/hour grid."""
    _save_and_render(cursor.set_mode(_load_cursor(), mode))


@app.command("select, sel")
def select(
    id: Annotated[str, typer.Argument(help="id of the task to show details for")],
) -> None:
    """Open the detail panel for a task."""
    task_id = parse_task_id(id)
    if TASK_REPO.get_task(task_id) is None:
        raise typer.BadParameter(f"No task with id {id}")
    _save_and_render(cursor.select_task(_load_cursor(), task_id))


@app.command("close, x")
def close() -> None:
    """Close the detail panel."""
    _save_and_render(cursor.close_detail(_load_cursor()))


@app.command("outside, o")
def outside() -> None:
    """Dismiss the detail panel as if clicking outside of it."""
    _save_and_render(cursor.click_outside_detail(_load_cursor()))


@app.command("open, op")
def open_task(
    id: Annotated[
        Optional[str],
        typer.Argument(help="id of a task to open directly, keeping the selection"),
    ] = None,
) -> None:
    """Open the selected task (or the given task) in the task drawer."""
    drawer = TerminalTaskDrawer(TASK_REPO)
    if id is not None:
        drawer.open(DrawerMode.VIEW, parse_task_id(id))
        return

    state = _load_cursor()
    if state["selected_task_id"] is None:
        raise typer.BadParameter("No task is selected; use 'cal select ID' first")
    CURSOR_REPO.save_cursor(cursor.open_task_editor(state, drawer))


@app.command("add, a")
def add(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--date",
            "-d",
            parser=parse_date,
            help="Day to add the task on; valid inputs as for 'show --date'",
        ),
    ] = None,
) -> None:
    """Open the task drawer to add a task, optionally on a given day."""
    cursor.open_new_task(TerminalTaskDrawer(TASK_REPO), date)
