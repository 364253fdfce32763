# SPDX-License-Identifier: MIT

from typing import Optional, TypeAlias, TypedDict

import pendulum

TaskId: TypeAlias = int | str


class TaskStatus:
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


TASK_STATUSES = (TaskStatus.TODO, TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED)


class Task(TypedDict):
    id: TaskId
    title: str
    description: Optional[str]
    project: Optional[str]
    due_date: Optional[pendulum.Date]
    start_time: Optional[str]
    end_time: Optional[str]
    status: str
    assigned_to: Optional[str]
