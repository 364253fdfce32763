# SPDX-License-Identifier: MIT

from typing import TypeAlias, TypedDict

import pendulum

from taskcal.model.cursor import CalendarMode
from taskcal.model.task import Task


class CalendarDay(TypedDict):
    date: pendulum.Date
    is_current_month: bool
    is_today: bool
    tasks: list[Task]


class WeekViewDay(TypedDict):
    date: pendulum.Date
    is_today: bool
    tasks: list[Task]


class HourRow(TypedDict):
    hour: int
    # One entry per WeekViewDay, Sunday first
    slots: list[list[Task]]


class MonthView(TypedDict):
    mode: CalendarMode
    reference_date: pendulum.Date
    days: list[CalendarDay]


class WeekView(TypedDict):
    mode: CalendarMode
    reference_date: pendulum.Date
    days: list[WeekViewDay]
    hours: list[HourRow]


CalendarView: TypeAlias = MonthView | WeekView
