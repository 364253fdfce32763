# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from taskcal.model.cursor import CalendarMode
from taskcal.model.task import TaskId
from taskcal.time import date_from_str, today_local


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    if date_param is None:
        return None

    date = str(date_param).strip()

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", date):
        try:
            return date_from_str(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date '{date}': {e}")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        return today_local().add(days=int(date))

    if date == "today" or date == "t":
        return today_local()
    if date == "yesterday" or date == "y":
        return today_local().subtract(days=1)
    if date == "tomorrow" or date == "o":
        return today_local().add(days=1)
    raise typer.BadParameter("Incorrect date format")


def parse_mode(mode_param: Optional[str]) -> Optional[CalendarMode]:
    if mode_param is None:
        return None

    mode = mode_param.strip().lower()
    if mode in ("month", "m"):
        return CalendarMode.MONTH
    if mode in ("week", "w"):
        return CalendarMode.WEEK
    raise typer.BadParameter(f"Mode must be 'month' or 'week', got '{mode_param}'")


def parse_task_id(id_param: str) -> TaskId:
    """Task ids are integers when they look like one, otherwise opaque strings."""
    id_str = id_param.strip()
    if not id_str:
        raise typer.BadParameter("Task id must not be empty")
    if re.match(r"^\d+$", id_str):
        return int(id_str)
    return id_str
