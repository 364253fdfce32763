# SPDX-License-Identifier: MIT

import logging
import os
import subprocess
from typing import Optional

import pendulum
import typer
from rich.console import Console

from taskcal.model.drawer import DrawerMode
from taskcal.model.task import TaskId
from taskcal.repository.task import TaskRepository
from taskcal.time import date_to_str
from taskcal.view.task import single_task_view

logger = logging.getLogger(__name__)


class TerminalTaskDrawer:
    """
    Task drawer for the terminal.

    Viewing prints the task; editing and creating open the task source file
    in $EDITOR, since the task source owns all changes to tasks.
    """

    def __init__(
        self, repository: TaskRepository, console: Optional[Console] = None
    ) -> None:
        self._repository = repository
        self._console = console or Console()

    def open(
        self,
        mode: DrawerMode,
        task_id: Optional[TaskId] = None,
        due_date: Optional[pendulum.Date] = None,
    ) -> None:
        logger.debug("Opening task drawer in %s mode for %s", mode.value, task_id)
        match mode:
            case DrawerMode.VIEW:
                if task_id is None:
                    raise typer.BadParameter("A task id is required to view a task")
                task = self._repository.get_task(task_id)
                if task is None:
                    raise typer.BadParameter(f"No task with id {task_id}")
                single_task_view(task, self._console)
            case DrawerMode.EDIT | DrawerMode.NEW:
                if mode == DrawerMode.NEW and due_date is not None:
                    self._console.print(
                        f"Add a task with due_date: {date_to_str(due_date)}"
                    )
                elif task_id is not None:
                    self._console.print(f"Edit the task with id: {task_id}")
                self._edit_task_source()

    def _edit_task_source(self) -> None:
        tasks_path = self._repository.tasks_path
        if not tasks_path.is_file():
            tasks_path.parent.mkdir(parents=True, exist_ok=True)
            tasks_path.write_text("tasks: []\n")
        editor = os.environ.get("EDITOR", "nano")
        subprocess.run([editor, str(tasks_path)], check=True)
        self._repository.reload()
