# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from taskcal.calendar.grid import WEEKDAY_NAMES
from taskcal.calendar.overflow import overflow_count, visible_tasks
from taskcal.color import (
    OUT_OF_MONTH_STYLE,
    OVERFLOW_STYLE,
    TIME_COLUMN_STYLE,
    TODAY_STYLE,
    status_color,
)
from taskcal.configuration import DEFAULT_MAX_TASKS_PER_CELL
from taskcal.model.calendar import CalendarDay, MonthView, WeekView
from taskcal.model.task import Task
from taskcal.time import date_to_display_str_optional
from taskcal.view.header import header
from taskcal.view.util import (
    format_hour,
    format_month_year,
    format_status,
    format_time_range,
    format_week_range,
    get_initials,
    status_marker,
    truncate,
)


def calendar_month_view(
    view: MonthView,
    cell_width: int = 18,
    max_tasks: int = DEFAULT_MAX_TASKS_PER_CELL,
    selected_task: Optional[Task] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Display a monthly calendar grid showing tasks by their due dates.

    Args:
        view: The computed month view
        cell_width: Width of each day cell in characters
        max_tasks: Number of tasks shown per day before "+N more"
        selected_task: Task whose detail panel is open, if any
        console: Console to print to (defaults to a new Console)
    """
    title = format_month_year(view["reference_date"])
    header(title, "month")

    console = console or Console()
    console.print(f"\n[bold]{title}[/bold]\n")
    console.print(render_month_grid(view, cell_width, max_tasks))
    if selected_task is not None:
        console.print(render_task_detail(selected_task))
    console.print()


def calendar_week_view(
    view: WeekView,
    day_width: int = 16,
    selected_task: Optional[Task] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Display the week grid with one row per hourly slot.

    Args:
        view: The computed week view
        day_width: Width of each day column in characters
        selected_task: Task whose detail panel is open, if any
        console: Console to print to (defaults to a new Console)
    """
    title = format_week_range(view["reference_date"])
    header(title, "week")

    console = console or Console()
    console.print(f"\n[bold]{title}[/bold]\n")
    console.print(render_week_grid(view, day_width))
    if selected_task is not None:
        console.print(render_task_detail(selected_task))
    console.print()


def render_month_grid(
    view: MonthView,
    cell_width: int = 18,
    max_tasks: int = DEFAULT_MAX_TASKS_PER_CELL,
) -> Table:
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    for day_name in WEEKDAY_NAMES:
        table.add_column(day_name, style="bold", width=cell_width)

    week_cells: list[Text] = []
    for day in view["days"]:
        week_cells.append(_render_month_cell(day, cell_width, max_tasks))
        if len(week_cells) == 7:
            table.add_row(*week_cells)
            week_cells = []

    return table


def _render_month_cell(day: CalendarDay, cell_width: int, max_tasks: int) -> Text:
    cell_content = Text()
    day_num = day["date"].day

    if day["is_today"]:
        cell_content.append(f"{day_num:2d}", style=TODAY_STYLE)
        cell_content.append("\n")
    elif not day["is_current_month"]:
        cell_content.append(f"{day_num:2d}\n", style=OUT_OF_MONTH_STYLE)
    else:
        cell_content.append(f"{day_num:2d}\n", style="bold")

    for task in visible_tasks(day, max_tasks):
        color = status_color(task["status"])
        initials = get_initials(task["assigned_to"])

        # Account for state marker and space, and initials with their separator
        max_title_len = cell_width - 2 - (len(initials) + 1 if initials else 0)
        title = truncate(task["title"] or "[no title]", max_title_len)

        cell_content.append(f"{status_marker(task['status'])} ", style=color)
        cell_content.append(title, style=color)
        if initials:
            cell_content.append(f" {initials}", style="dim")
        cell_content.append("\n")

    remaining = overflow_count(day, max_tasks)
    if remaining > 0:
        cell_content.append(f"  +{remaining} more\n", style=OVERFLOW_STYLE)

    return cell_content


def render_week_grid(view: WeekView, day_width: int = 16) -> Table:
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    table.add_column("Time", style=TIME_COLUMN_STYLE, no_wrap=True)
    for index, day in enumerate(view["days"]):
        day_label = f"{WEEKDAY_NAMES[index]} {day['date'].day}"
        table.add_column(
            Text(day_label, style=TODAY_STYLE if day["is_today"] else "bold"),
            width=day_width,
        )

    for hour_row in view["hours"]:
        row: list[Text] = [Text(format_hour(hour_row["hour"]))]
        for slot_tasks in hour_row["slots"]:
            slot_content = Text()
            for task in slot_tasks:
                color = status_color(task["status"])
                slot_content.append(
                    f"{truncate(task['title'] or '[no title]', day_width)}\n",
                    style=color,
                )
                slot_content.append(f"{format_time_range(task) or ''}\n", style="dim")
            row.append(slot_content)
        table.add_row(*row)

    return table


def render_task_detail(task: Task) -> Panel:
    """Render the on-demand detail panel for the selected task."""
    detail_table = Table(box=None, show_header=False, padding=(0, 1))
    detail_table.add_column("property", style="bold")
    detail_table.add_column("value")

    detail_table.add_row("Project:", Text(task["project"] or "N/A"))
    if task["assigned_to"]:
        detail_table.add_row(
            "Assigned to:",
            Text(f"({get_initials(task['assigned_to'])}) {task['assigned_to']}"),
        )
    else:
        detail_table.add_row("Assigned to:", "Unassigned")
    detail_table.add_row(
        "Due Date:", date_to_display_str_optional(task["due_date"]) or "N/A"
    )
    time_range = format_time_range(task)
    if time_range is not None:
        detail_table.add_row("Time:", Text(time_range))
    detail_table.add_row(
        "Status:",
        Text(format_status(task["status"]), style=status_color(task["status"])),
    )
    if task["description"]:
        detail_table.add_row("Description:", Text(task["description"]))

    return Panel(
        detail_table,
        title=Text(task["title"] or "[no title]", style="bold"),
        subtitle="close: cal close | open task: cal open",
        expand=False,
    )
