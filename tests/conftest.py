# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Any, Callable, Optional

import pendulum
import pytest
from yaml import dump

from taskcal import configuration
from taskcal.logging_setup import LOG_FORMAT
from taskcal.model.drawer import DrawerMode
from taskcal.model.task import Task, TaskId, TaskStatus
from taskcal.repository.configuration import CONFIGURATION_REPO
from taskcal.repository.cursor import CURSOR_REPO
from taskcal.repository.task import TASK_REPO
from taskcal.view import state as view_state

TaskFactory = Callable[..., Task]


@pytest.fixture()
def today() -> pendulum.Date:
    """A fixed 'today': Wednesday, June 18 2025."""
    return pendulum.date(2025, 6, 18)


@pytest.fixture()
def make_task() -> TaskFactory:
    counter = {"next_id": 1}

    def _make_task(
        due_date: Optional[pendulum.Date] = None,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        status: str = TaskStatus.TODO,
        title: Optional[str] = None,
        id: Optional[TaskId] = None,
        assigned_to: Optional[str] = None,
    ) -> Task:
        task_id = id if id is not None else counter["next_id"]
        counter["next_id"] += 1
        return {
            "id": task_id,
            "title": title or f"Task {task_id}",
            "description": None,
            "project": None,
            "due_date": due_date,
            "start_time": start_time,
            "end_time": end_time,
            "status": status,
            "assigned_to": assigned_to,
        }

    return _make_task


class RecordingDrawer:
    """Task drawer that records calls instead of rendering."""

    def __init__(self) -> None:
        self.calls: list[tuple[DrawerMode, Optional[TaskId], Optional[pendulum.Date]]] = []

    def open(
        self,
        mode: DrawerMode,
        task_id: Optional[TaskId] = None,
        due_date: Optional[pendulum.Date] = None,
    ) -> None:
        self.calls.append((mode, task_id, due_date))


@pytest.fixture()
def drawer() -> RecordingDrawer:
    return RecordingDrawer()


@pytest.fixture()
def write_tasks(tmp_path: Path) -> Callable[[Any], Path]:
    def _write_tasks(data: Any, name: str = "tasks.yaml") -> Path:
        tasks_path = tmp_path / name
        if isinstance(data, str):
            tasks_path.write_text(data)
        else:
            tasks_path.write_text(dump(data))
        return tasks_path

    return _write_tasks


@pytest.fixture()
def app_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Point configuration and data paths at a temporary directory and reset
    the module-level repositories so each test starts clean.
    """
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    config_path.mkdir()
    data_path.mkdir()

    app_config_path = config_path / "config.yaml"
    app_config_path.write_text(dump(configuration.get_default_configuration()))

    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", app_config_path)
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_TASKS_PATH", data_path / "tasks.yaml")
    monkeypatch.setattr(configuration, "DATA_CURSOR_PATH", data_path / "cursor.yaml")

    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    monkeypatch.setattr(CURSOR_REPO, "_cursor", None)
    monkeypatch.setattr(CURSOR_REPO, "_loaded", False)
    monkeypatch.setattr(CURSOR_REPO, "is_dirty", False)
    monkeypatch.setattr(TASK_REPO, "_tasks_path", None)
    monkeypatch.setattr(TASK_REPO, "_tasks", None)

    view_state.set_show_header(True)
    return tmp_path


@pytest.fixture()
def restore_root_logger():
    """Remove the handlers installed by setup_logging once the test is done."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler.formatter is not None and handler.formatter._fmt == LOG_FORMAT:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    logging.captureWarnings(False)
