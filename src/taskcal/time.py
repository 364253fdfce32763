# SPDX-License-Identifier: MIT

import datetime
import logging
import re
from typing import Any, Optional

import pendulum

_TIME_OF_DAY_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")
MINUTES_PER_DAY = 24 * 60

logger = logging.getLogger(__name__)


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def sunday_first_weekday(date: pendulum.Date) -> int:
    """Weekday index with Sunday = 0 through Saturday = 6."""
    return date.isoweekday() % 7


def date_to_str(date: pendulum.Date) -> str:
    return date.to_date_string()


def date_to_str_optional(date: Optional[pendulum.Date]) -> Optional[str]:
    if date is None:
        return None
    return date_to_str(date)


def date_from_str(date_str: str) -> pendulum.Date:
    """
    Parse a 'YYYY-MM-DD' string, or an ISO datetime, into a local calendar date.

    Datetimes without an offset are read as local time; datetimes with an
    offset are converted to local time before the date is taken.
    """
    parsed = pendulum.parse(date_str.strip(), tz="local", exact=True)
    if isinstance(parsed, pendulum.DateTime):
        return parsed.in_tz("local").date()
    if isinstance(parsed, pendulum.Date):
        return parsed
    raise ValueError(f"Not a date: '{date_str}'")


def date_from_value(value: Any) -> Optional[pendulum.Date]:
    """Normalize a loaded YAML value (date, datetime, or string) to a local date."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime.datetime):
        if value.tzinfo is None:
            return pendulum.instance(value, tz="local").date()
        return pendulum.instance(value).in_tz("local").date()
    if isinstance(value, datetime.date):
        return pendulum.date(value.year, value.month, value.day)
    return date_from_str(str(value))


def time_of_day_from_value(value: Any) -> Optional[str]:
    """
    Normalize a loaded YAML time-of-day to a string.

    YAML 1.1 reads unquoted values like 9:30 as base-60 integers (570), so
    those are turned back into 'HH:MM'. Integers of a full day or more
    (an unquoted 10:00:00 loads as 36000) are not a time of day and give None.
    """
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        if not 0 <= value < MINUTES_PER_DAY:
            logger.debug("Ignoring time of day %d, not an H:MM value", value)
            return None
        return f"{value // 60:02d}:{value % 60:02d}"
    if isinstance(value, datetime.time):
        return f"{value.hour:02d}:{value.minute:02d}"
    return str(value).strip()


def parse_time_of_day(time_str: Optional[str]) -> Optional[tuple[int, int]]:
    """
    Parse an 'HH:MM' string into (hour, minute).

    Returns None for missing or malformed values instead of raising.
    """
    if time_str is None:
        return None
    time_match = _TIME_OF_DAY_PATTERN.match(time_str.strip())
    if not time_match:
        return None
    return (int(time_match.group(1)), int(time_match.group(2)))


def hour_of(time_str: Optional[str]) -> Optional[int]:
    time_of_day = parse_time_of_day(time_str)
    if time_of_day is None:
        return None
    return time_of_day[0]


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("MMM D, YYYY")


def date_to_display_str_optional(date: Optional[pendulum.Date]) -> Optional[str]:
    if date is None:
        return None
    return date_to_display_str(date)
