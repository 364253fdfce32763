# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional

import pendulum

from taskcal.calendar.assign import (
    assign_tasks_to_month,
    assign_tasks_to_week,
    build_hour_rows,
)
from taskcal.calendar.grid import build_month_grid, build_week_grid, time_slots
from taskcal.configuration import DEFAULT_FIRST_HOUR, DEFAULT_LAST_HOUR
from taskcal.model.calendar import CalendarView, MonthView, WeekView
from taskcal.model.cursor import CalendarMode, CursorState
from taskcal.model.task import Task

logger = logging.getLogger(__name__)


def compute_month_view(
    reference_date: pendulum.Date, tasks: list[Task], today: pendulum.Date
) -> MonthView:
    days = build_month_grid(reference_date, today)
    return {
        "mode": CalendarMode.MONTH,
        "reference_date": reference_date,
        "days": assign_tasks_to_month(days, tasks),
    }


def compute_week_view(
    reference_date: pendulum.Date,
    tasks: list[Task],
    today: pendulum.Date,
    first_hour: int = DEFAULT_FIRST_HOUR,
    last_hour: int = DEFAULT_LAST_HOUR,
) -> WeekView:
    days = assign_tasks_to_week(build_week_grid(reference_date, today), tasks)
    return {
        "mode": CalendarMode.WEEK,
        "reference_date": reference_date,
        "days": days,
        "hours": build_hour_rows(days, time_slots(first_hour, last_hour)),
    }


def compute_view(
    state: CursorState,
    tasks: list[Task],
    today: pendulum.Date,
    first_hour: int = DEFAULT_FIRST_HOUR,
    last_hour: int = DEFAULT_LAST_HOUR,
) -> CalendarView:
    """Build the render-ready grid for the cursor's mode and reference date."""
    if state["mode"] == CalendarMode.MONTH:
        return compute_month_view(state["reference_date"], tasks, today)
    return compute_week_view(
        state["reference_date"], tasks, today, first_hour, last_hour
    )


def _task_fingerprint(tasks: list[Task]) -> tuple[Any, ...]:
    return tuple(
        (
            id(task),
            task["id"],
            task["due_date"],
            task["start_time"],
            task["end_time"],
        )
        for task in tasks
    )


class CalendarCache:
    """
    Memoizes the last computed view.

    The key covers the mode, reference date, today, hour range and the
    placement fields of every task. The selected task is not part of the key,
    so opening or closing the detail panel reuses the cached grid.
    """

    def __init__(self) -> None:
        self._key: Optional[tuple[Any, ...]] = None
        self._view: Optional[CalendarView] = None
        self.hits = 0
        self.misses = 0

    def get_view(
        self,
        state: CursorState,
        tasks: list[Task],
        today: pendulum.Date,
        first_hour: int = DEFAULT_FIRST_HOUR,
        last_hour: int = DEFAULT_LAST_HOUR,
    ) -> CalendarView:
        key = (
            state["mode"],
            state["reference_date"],
            today,
            first_hour,
            last_hour,
            _task_fingerprint(tasks),
        )
        if self._view is not None and key == self._key:
            self.hits += 1
            return self._view

        self.misses += 1
        logger.debug(
            "Computing %s view for %s", state["mode"].value, state["reference_date"]
        )
        self._view = compute_view(state, tasks, today, first_hour, last_hour)
        self._key = key
        return self._view

    def clear(self) -> None:
        self._key = None
        self._view = None
