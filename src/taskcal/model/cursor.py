# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional, TypedDict

import pendulum

from taskcal.model.task import TaskId


class CalendarMode(StrEnum):
    MONTH = "month"
    WEEK = "week"


class CursorState(TypedDict):
    mode: CalendarMode
    reference_date: pendulum.Date
    selected_task_id: Optional[TaskId]


class CursorPersistence(TypedDict):
    mode: str
    reference_date: str
    selected_task_id: Optional[TaskId]
