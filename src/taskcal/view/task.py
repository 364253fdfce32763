# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from taskcal.color import status_color
from taskcal.model.task import Task
from taskcal.time import date_to_display_str_optional
from taskcal.view.header import header
from taskcal.view.util import format_status, format_time_range, status_marker


def tasks_view(
    tasks: list[Task],
    columns: list[str] = [
        "id",
        "state",
        "title",
        "due_date",
        "time",
        "status",
        "assigned_to",
    ],
    use_color: bool = True,
    console: Optional[Console] = None,
) -> None:
    header("tasks")

    tasks_table = Table(box=box.SIMPLE)
    for column in columns:
        tasks_table.add_column(column)

    for task in tasks:
        row = []
        for column in columns:
            column_value = ""
            if column == "state":
                column_value = status_marker(task["status"])
            elif column == "status":
                column_value = format_status(task["status"])
            elif column == "time":
                column_value = format_time_range(task) or ""
            elif column == "due_date":
                column_value = date_to_display_str_optional(task["due_date"]) or ""
            elif task.get(column) is not None:
                column_value = str(task.get(column))

            column_value = escape(column_value)
            if use_color:
                color = status_color(task["status"])
                column_value = f"[{color}]{column_value}[/{color}]"

            row.append(column_value)
        tasks_table.add_row(*row)

    console = console or Console()
    console.print(tasks_table)


def single_task_view(task: Task, console: Optional[Console] = None) -> None:
    header("task")

    task_table = Table(box=box.SIMPLE)
    task_table.add_column("property")
    task_table.add_column("value")

    task_table.add_row("id", Text(str(task["id"])))
    task_table.add_row("title", Text(task["title"]))
    task_table.add_row("description", Text(task["description"] or ""))
    task_table.add_row("project", Text(task["project"] or ""))
    task_table.add_row("status", Text(format_status(task["status"])))
    task_table.add_row("due", date_to_display_str_optional(task["due_date"]) or "")
    task_table.add_row("start", Text(task["start_time"] or ""))
    task_table.add_row("end", Text(task["end_time"] or ""))
    task_table.add_row("assigned_to", Text(task["assigned_to"] or ""))

    console = console or Console()
    console.print(task_table)
