# SPDX-License-Identifier: MIT

"""Pure transitions over the calendar cursor state.

No function modifies its input. A transition that changes something returns
a new CursorState; one that has nothing to do (closing the detail panel when
nothing is selected) returns the state it was given.
"""

import logging
from typing import Optional

import pendulum

from taskcal.model.cursor import CalendarMode, CursorState
from taskcal.model.drawer import DrawerMode, TaskDrawer
from taskcal.model.task import TaskId

logger = logging.getLogger(__name__)

WEEK_STEP_DAYS = 7


def new_cursor(
    today: pendulum.Date, mode: CalendarMode = CalendarMode.MONTH
) -> CursorState:
    return {"mode": mode, "reference_date": today, "selected_task_id": None}


def _with_reference_date(
    state: CursorState, reference_date: pendulum.Date
) -> CursorState:
    logger.debug(
        "Cursor moved from %s to %s (%s)",
        state["reference_date"],
        reference_date,
        state["mode"].value,
    )
    return {
        "mode": state["mode"],
        "reference_date": reference_date,
        "selected_task_id": state["selected_task_id"],
    }


def _with_selection(
    state: CursorState, selected_task_id: Optional[TaskId]
) -> CursorState:
    return {
        "mode": state["mode"],
        "reference_date": state["reference_date"],
        "selected_task_id": selected_task_id,
    }


def go_to_next_period(state: CursorState) -> CursorState:
    """Advance one month (landing on the 1st) or exactly one week."""
    reference_date = state["reference_date"]
    if state["mode"] == CalendarMode.MONTH:
        return _with_reference_date(
            state, reference_date.start_of("month").add(months=1)
        )
    return _with_reference_date(state, reference_date.add(days=WEEK_STEP_DAYS))


def go_to_previous_period(state: CursorState) -> CursorState:
    """Retreat one month (landing on the 1st) or exactly one week."""
    reference_date = state["reference_date"]
    if state["mode"] == CalendarMode.MONTH:
        return _with_reference_date(
            state, reference_date.start_of("month").subtract(months=1)
        )
    return _with_reference_date(
        state, reference_date.subtract(days=WEEK_STEP_DAYS)
    )


def go_to_today(state: CursorState, today: pendulum.Date) -> CursorState:
    return _with_reference_date(state, today)


def set_mode(state: CursorState, mode: CalendarMode) -> CursorState:
    """Switch layout, keeping the reference date."""
    logger.debug("Cursor mode set to %s", mode.value)
    return {
        "mode": mode,
        "reference_date": state["reference_date"],
        "selected_task_id": state["selected_task_id"],
    }


def select_task(state: CursorState, task_id: TaskId) -> CursorState:
    """Show the detail panel for a task, replacing any current selection."""
    return _with_selection(state, task_id)


def close_detail(state: CursorState) -> CursorState:
    return _with_selection(state, None)


def click_outside_detail(state: CursorState) -> CursorState:
    # A click anywhere off the detail panel dismisses it
    if state["selected_task_id"] is None:
        return state
    return close_detail(state)


def open_task_editor(state: CursorState, drawer: TaskDrawer) -> CursorState:
    """
    Hand the selected task off to the task drawer and clear the selection.

    Does nothing when no task is selected.
    """
    task_id = state["selected_task_id"]
    if task_id is None:
        return state
    drawer.open(DrawerMode.VIEW, task_id)
    return close_detail(state)


def open_new_task(
    drawer: TaskDrawer, due_date: Optional[pendulum.Date] = None
) -> None:
    """Ask the task drawer for a new task, optionally on a given day."""
    drawer.open(DrawerMode.NEW, None, due_date)
