# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from taskcal import configuration
from taskcal.errors import TaskSourceError
from taskcal.model.task import TASK_STATUSES, Task, TaskId, TaskStatus
from taskcal.time import date_from_value, time_of_day_from_value

logger = logging.getLogger(__name__)


def _str_optional(value: Any) -> Optional[str]:
    # YAML hands back ints, floats and dates for unquoted scalars
    if value is None:
        return None
    return str(value)


class TaskRepository:
    """Read-only task source backed by a YAML file."""

    def __init__(self, tasks_path: Optional[Path] = None) -> None:
        self._tasks_path = tasks_path
        self._tasks: Optional[list[Task]] = None

    @property
    def tasks_path(self) -> Path:
        if self._tasks_path is not None:
            return self._tasks_path
        return configuration.DATA_TASKS_PATH

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def use_file(self, tasks_path: Optional[Path]) -> None:
        self._tasks_path = tasks_path
        self._tasks = None

    def reload(self) -> None:
        self._tasks = None

    def __load_data(self) -> None:
        self._tasks = []
        if not self.tasks_path.is_file():
            logger.info("Task file %s does not exist", self.tasks_path)
            return

        try:
            raw_data = load(self.tasks_path.read_text(), Loader=Loader)
        except YAMLError as e:
            raise TaskSourceError(
                f"Could not read tasks from {self.tasks_path}: {e}"
            ) from e

        if raw_data is None:
            return
        if isinstance(raw_data, dict):
            raw_data = raw_data.get("tasks") or []
        if not isinstance(raw_data, list):
            raise TaskSourceError(
                f"Expected a list of tasks in {self.tasks_path}, "
                f"got {type(raw_data).__name__}"
            )

        for position, raw_task in enumerate(raw_data):
            if not isinstance(raw_task, dict):
                raise TaskSourceError(
                    f"Task #{position + 1} in {self.tasks_path} is not a mapping"
                )
            self._tasks.append(self.__convert_task_for_deserialization(raw_task))
        logger.debug("Loaded %d tasks from %s", len(self._tasks), self.tasks_path)

    def __convert_task_for_deserialization(self, task: dict[str, Any]) -> Task:
        if task.get("id") is None:
            raise TaskSourceError(f"Task without an id in {self.tasks_path}: {task}")

        try:
            due_date = date_from_value(task.get("due_date", task.get("due")))
        except ValueError as e:
            raise TaskSourceError(
                f"Task {task['id']} has an invalid due date: {e}"
            ) from e

        status = str(task.get("status") or TaskStatus.TODO)
        if status not in TASK_STATUSES:
            logger.warning("Task %s has unknown status '%s'", task["id"], status)

        return {
            "id": task["id"] if isinstance(task["id"], int) else str(task["id"]),
            "title": str(task.get("title") or ""),
            "description": _str_optional(task.get("description")),
            "project": _str_optional(task.get("project")),
            "due_date": due_date,
            "start_time": time_of_day_from_value(task.get("start_time")),
            "end_time": time_of_day_from_value(task.get("end_time")),
            "status": status,
            "assigned_to": _str_optional(task.get("assigned_to")),
        }

    def get_all_tasks(self) -> list[Task]:
        return deepcopy(self.tasks)

    def get_task(self, id: TaskId) -> Optional[Task]:
        for task in self.tasks:
            if task["id"] == id or str(task["id"]) == str(id):
                return deepcopy(task)
        return None


TASK_REPO = TaskRepository()
