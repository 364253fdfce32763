# SPDX-License-Identifier: MIT

import datetime
import logging
from typing import Optional, TypeAlias

from taskcal.model.calendar import CalendarDay, HourRow, WeekViewDay
from taskcal.model.task import Task
from taskcal.time import hour_of

logger = logging.getLogger(__name__)

DateKey: TypeAlias = tuple[int, int, int]


def _date_key(date: datetime.date) -> DateKey:
    return (date.year, date.month, date.day)


def assign_tasks_to_month(
    days: list[CalendarDay], tasks: list[Task]
) -> list[CalendarDay]:
    """
    Place tasks on the month grid cell matching their due date.

    Tasks without a due date are never placed. Tasks whose due date is not
    covered by the grid are dropped. Within a cell, tasks keep their input
    order.

    Args:
        days: Cells produced by build_month_grid
        tasks: Tasks to place, in display order

    Returns:
        New cells carrying the assigned tasks; the input cells are not modified
    """
    assigned: list[CalendarDay] = [
        {
            "date": day["date"],
            "is_current_month": day["is_current_month"],
            "is_today": day["is_today"],
            "tasks": [],
        }
        for day in days
    ]
    _place_by_due_date(assigned, tasks)
    return assigned


def assign_tasks_to_week(
    days: list[WeekViewDay], tasks: list[Task]
) -> list[WeekViewDay]:
    """Bucket tasks onto the week's days by due date, keeping input order."""
    assigned: list[WeekViewDay] = [
        {"date": day["date"], "is_today": day["is_today"], "tasks": []}
        for day in days
    ]
    _place_by_due_date(assigned, tasks)
    return assigned


def _place_by_due_date(
    days: list[CalendarDay] | list[WeekViewDay], tasks: list[Task]
) -> None:
    index_by_date: dict[DateKey, int] = {
        _date_key(day["date"]): index for index, day in enumerate(days)
    }
    for task in tasks:
        due_date = task["due_date"]
        if due_date is None:
            continue
        index = index_by_date.get(_date_key(due_date))
        if index is None:
            logger.debug(
                "Task %s due %s is outside the displayed grid", task["id"], due_date
            )
            continue
        days[index]["tasks"].append(task)


def task_hour_range(task: Task) -> Optional[tuple[int, int]]:
    """
    Return the (start_hour, end_hour) a task spans in the week view.

    Returns None when either time is missing or malformed; such a task
    occupies no hourly slot.
    """
    if not task["start_time"] or not task["end_time"]:
        return None

    start_hour = hour_of(task["start_time"])
    end_hour = hour_of(task["end_time"])
    if start_hour is None or end_hour is None:
        logger.debug(
            "Task %s has malformed times %r - %r",
            task["id"],
            task["start_time"],
            task["end_time"],
        )
        return None
    return (start_hour, end_hour)


def task_occupies_hour(task: Task, hour: int) -> bool:
    # Both bounds are inclusive: a task ending at 11:00 still shows in the 11 slot
    hour_range = task_hour_range(task)
    if hour_range is None:
        return False
    start_hour, end_hour = hour_range
    return start_hour <= hour <= end_hour


def tasks_for_time_slot(day: WeekViewDay, hour: int) -> list[Task]:
    """Tasks of a week view day that occupy the given hour, in input order."""
    return [task for task in day["tasks"] if task_occupies_hour(task, hour)]


def build_hour_rows(days: list[WeekViewDay], hours: list[int]) -> list[HourRow]:
    """Cross the week's days with the hourly slots."""
    return [
        {"hour": hour, "slots": [tasks_for_time_slot(day, hour) for day in days]}
        for hour in hours
    ]
