# SPDX-License-Identifier: MIT

from taskcal.model.task import TaskStatus

STATUS_COLORS = {
    TaskStatus.TODO: "blue",
    TaskStatus.IN_PROGRESS: "yellow",
    TaskStatus.COMPLETED: "green",
}
UNKNOWN_STATUS_COLOR = "bright_black"

TODAY_STYLE = "bold black on bright_cyan"
OUT_OF_MONTH_STYLE = "dim"
OVERFLOW_STYLE = "dim"
TIME_COLUMN_STYLE = "bright_black"


def status_color(status: str) -> str:
    return STATUS_COLORS.get(status, UNKNOWN_STATUS_COLOR)
