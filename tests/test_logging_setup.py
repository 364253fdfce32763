# SPDX-License-Identifier: MIT

import logging

import pytest

from taskcal.logging_setup import _ConsoleNoiseFilter, _resolve_level, setup_logging


def _record(name, level):
    return logging.LogRecord(name, level, __file__, 1, "message", None, None)


def test_console_filter_keeps_own_logs():
    noise_filter = _ConsoleNoiseFilter()

    assert noise_filter.filter(_record("taskcal", logging.INFO))
    assert noise_filter.filter(_record("taskcal.calendar.assign", logging.DEBUG))
    assert not noise_filter.filter(_record("taskcalendar", logging.INFO))
    assert not noise_filter.filter(_record("py.warnings", logging.WARNING))
    assert noise_filter.filter(_record("urllib3", logging.ERROR))


@pytest.mark.parametrize(
    "level, expected",
    [
        (logging.INFO, logging.INFO),
        ("debug", logging.DEBUG),
        ("ERROR", logging.ERROR),
        ("chatty", logging.WARNING),
    ],
)
def test_resolve_level(level, expected):
    assert _resolve_level(level) == expected


def test_setup_logging_writes_log_file(tmp_path, restore_root_logger):
    setup_logging(log_dir=tmp_path / "logs", console_level="ERROR")

    logging.getLogger("taskcal.test").debug("written to file only")
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert len(restore_root_logger.handlers) == 2
    assert "written to file only" in (tmp_path / "logs" / "taskcal.log").read_text()


def test_setup_logging_replaces_handlers(restore_root_logger):
    setup_logging()
    setup_logging()

    assert len(restore_root_logger.handlers) == 1
