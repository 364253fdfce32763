# SPDX-License-Identifier: MIT

from enum import Enum
from typing import Optional, Protocol

import pendulum

from taskcal.model.task import TaskId


class DrawerMode(Enum):
    VIEW = "view"
    EDIT = "edit"
    NEW = "new"


class TaskDrawer(Protocol):
    """The task detail/editor surface that owns viewing and editing a task."""

    def open(
        self,
        mode: DrawerMode,
        task_id: Optional[TaskId] = None,
        due_date: Optional[pendulum.Date] = None,
    ) -> None: ...
