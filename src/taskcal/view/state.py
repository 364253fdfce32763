"""Per-invocation view settings shared by the calendar and task views."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Seeded from the show_header setting, turned off by --no-header
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)


def set_show_header(value: bool) -> None:
    """Set whether the taskcal banner is printed above month, week and task views.

    Args:
        value: True to print the banner, False to print only the view itself
    """
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()
