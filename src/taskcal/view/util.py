# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from taskcal.calendar.grid import week_start
from taskcal.model.task import Task, TaskStatus
from taskcal.time import parse_time_of_day


def format_month_year(date: pendulum.Date) -> str:
    return date.format("MMMM YYYY")


def format_week_range(date: pendulum.Date) -> str:
    """
    Describe the Sunday-first week containing date.

    Returns "Jun 15-21, 2025" when the week stays in one month, otherwise
    "Jun 29 - Jul 5, 2025". The year is that of the week's Saturday.
    """
    start = week_start(date)
    end = start.add(days=6)

    start_month = start.format("MMM")
    end_month = end.format("MMM")
    if start_month == end_month:
        return f"{start_month} {start.day}-{end.day}, {end.year}"
    return f"{start_month} {start.day} - {end_month} {end.day}, {end.year}"


def format_time(time_str: Optional[str]) -> str:
    """Render an 'HH:MM' string on a 12-hour clock, e.g. '13:30' -> '1:30 PM'."""
    if not time_str:
        return ""

    time_of_day = parse_time_of_day(time_str)
    if time_of_day is None:
        return time_str

    hour, minute = time_of_day
    am_pm = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12}:{minute:02d} {am_pm}"


def format_time_range(task: Task) -> Optional[str]:
    if not task["start_time"] or not task["end_time"]:
        return None
    return f"{format_time(task['start_time'])} - {format_time(task['end_time'])}"


def format_hour(hour: int) -> str:
    return f"{hour % 12 or 12} {'PM' if hour >= 12 else 'AM'}"


def format_status(status: str) -> str:
    match status:
        case TaskStatus.TODO:
            return "To Do"
        case TaskStatus.IN_PROGRESS:
            return "In Progress"
        case TaskStatus.COMPLETED:
            return "Completed"
    return status


def status_marker(status: str) -> str:
    """
    Get the state symbol for a task.

    Returns:
        "X" if completed, "/" if in progress, " " otherwise
    """
    if status == TaskStatus.COMPLETED:
        return "X"
    elif status == TaskStatus.IN_PROGRESS:
        return "/"
    return " "


def get_initials(name: Optional[str]) -> str:
    if not name:
        return ""

    names = name.split()
    if len(names) == 0:
        return ""
    if len(names) == 1:
        return names[0][0].upper()
    return (names[0][0] + names[-1][0]).upper()


def truncate(text: str, max_length: int) -> str:
    if max_length <= 3 or len(text) <= max_length:
        return text[: max(max_length, 0)]
    return text[: max_length - 3] + "..."
