# SPDX-License-Identifier: MIT

import math

import pendulum

from taskcal.configuration import DEFAULT_FIRST_HOUR, DEFAULT_LAST_HOUR
from taskcal.model.calendar import CalendarDay, WeekViewDay
from taskcal.time import sunday_first_weekday

DAYS_PER_WEEK = 7
MIN_MONTH_ROWS = 5
WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def build_month_grid(
    reference_date: pendulum.Date, today: pendulum.Date
) -> list[CalendarDay]:
    """
    Build the day cells for the month containing reference_date.

    The grid always holds whole Sunday-first weeks (35 or 42 cells); a
    February that fits in four rows is padded with a fifth. Days
    before the 1st and after the last day of the month come from the
    adjacent months and are flagged with is_current_month=False.

    Args:
        reference_date: Any date within the month to display
        today: The current date, used for the is_today flag

    Returns:
        Ordered list of calendar days, with empty task lists
    """
    month_start = reference_date.start_of("month")
    days_in_month = month_start.days_in_month

    leading_count = sunday_first_weekday(month_start)
    week_rows = max(
        math.ceil((leading_count + days_in_month) / DAYS_PER_WEEK), MIN_MONTH_ROWS
    )
    total_cells = week_rows * DAYS_PER_WEEK

    days: list[CalendarDay] = []
    current_date = month_start.subtract(days=leading_count)
    for _ in range(total_cells):
        is_current_month = (
            current_date.year == month_start.year
            and current_date.month == month_start.month
        )
        days.append(
            {
                "date": current_date,
                "is_current_month": is_current_month,
                "is_today": current_date == today,
                "tasks": [],
            }
        )
        current_date = current_date.add(days=1)

    return days


def week_start(reference_date: pendulum.Date) -> pendulum.Date:
    """Return the Sunday on or before reference_date."""
    return reference_date.subtract(days=sunday_first_weekday(reference_date))


def build_week_grid(
    reference_date: pendulum.Date, today: pendulum.Date
) -> list[WeekViewDay]:
    """Build the seven days, Sunday through Saturday, of the week containing reference_date."""
    start = week_start(reference_date)

    days: list[WeekViewDay] = []
    for day_offset in range(DAYS_PER_WEEK):
        current_date = start.add(days=day_offset)
        days.append(
            {
                "date": current_date,
                "is_today": current_date == today,
                "tasks": [],
            }
        )
    return days


def time_slots(
    first_hour: int = DEFAULT_FIRST_HOUR, last_hour: int = DEFAULT_LAST_HOUR
) -> list[int]:
    """Hourly slots of the week view, inclusive of both ends."""
    return list(range(first_hour, last_hour + 1))
