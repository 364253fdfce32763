# SPDX-License-Identifier: MIT

from taskcal.configuration import DEFAULT_MAX_TASKS_PER_CELL
from taskcal.model.calendar import CalendarDay
from taskcal.model.task import Task


def visible_tasks(
    day: CalendarDay, max_tasks: int = DEFAULT_MAX_TASKS_PER_CELL
) -> list[Task]:
    """The tasks rendered directly in a month cell."""
    return day["tasks"][:max_tasks]


def overflow_count(day: CalendarDay, max_tasks: int = DEFAULT_MAX_TASKS_PER_CELL) -> int:
    """Number of tasks hidden behind the "+N more" indicator, 0 when none are."""
    return max(len(day["tasks"]) - max_tasks, 0)
