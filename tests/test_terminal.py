# SPDX-License-Identifier: MIT

import subprocess

import click
import pendulum
import pytest
import typer
from rich.console import Console

from taskcal.model.cursor import CalendarMode
from taskcal.model.drawer import DrawerMode
from taskcal.repository.task import TaskRepository
from taskcal.terminal import calendar, parse
from taskcal.terminal.drawer import TerminalTaskDrawer


@pytest.fixture()
def fixed_today(monkeypatch, today):
    monkeypatch.setattr(parse, "today_local", lambda: today)
    return today


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2025-07-04", pendulum.date(2025, 7, 4)),
        ("today", pendulum.date(2025, 6, 18)),
        ("t", pendulum.date(2025, 6, 18)),
        ("yesterday", pendulum.date(2025, 6, 17)),
        ("o", pendulum.date(2025, 6, 19)),
        ("3", pendulum.date(2025, 6, 21)),
        ("-18", pendulum.date(2025, 5, 31)),
        (None, None),
    ],
)
def test_parse_date(fixed_today, value, expected):
    assert parse.parse_date(value) == expected


@pytest.mark.parametrize("value", ["next week", "2025-13-45"])
def test_parse_date_rejects(fixed_today, value):
    with pytest.raises(typer.BadParameter):
        parse.parse_date(value)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("month", CalendarMode.MONTH),
        ("M", CalendarMode.MONTH),
        ("week", CalendarMode.WEEK),
        (" w ", CalendarMode.WEEK),
        (None, None),
    ],
)
def test_parse_mode(value, expected):
    assert parse.parse_mode(value) == expected


def test_parse_mode_rejects_day():
    with pytest.raises(typer.BadParameter):
        parse.parse_mode("day")


def test_parse_task_id():
    assert parse.parse_task_id("42") == 42
    assert parse.parse_task_id("design-review") == "design-review"
    with pytest.raises(typer.BadParameter):
        parse.parse_task_id("  ")


@pytest.fixture()
def recorded_console() -> Console:
    return Console(record=True, width=200)


def test_drawer_view_prints_task(write_tasks, recorded_console):
    repo = TaskRepository(write_tasks([{"id": 1, "title": "Write report"}]))

    TerminalTaskDrawer(repo, recorded_console).open(DrawerMode.VIEW, 1)

    assert "Write report" in recorded_console.export_text()


def test_drawer_view_requires_known_task(write_tasks, recorded_console):
    drawer = TerminalTaskDrawer(TaskRepository(write_tasks([])), recorded_console)

    with pytest.raises(typer.BadParameter):
        drawer.open(DrawerMode.VIEW)
    with pytest.raises(typer.BadParameter):
        drawer.open(DrawerMode.VIEW, 5)


def test_drawer_new_creates_source_and_reloads(
    tmp_path, monkeypatch, recorded_console
):
    tasks_path = tmp_path / "nested" / "tasks.yaml"
    repo = TaskRepository(tasks_path)
    assert repo.get_all_tasks() == []
    edited = []

    def fake_run(args, check):
        edited.append(args)
        tasks_path.write_text("tasks:\n  - id: 1\n    title: Added\n")

    monkeypatch.setenv("EDITOR", "vi")
    monkeypatch.setattr(subprocess, "run", fake_run)

    TerminalTaskDrawer(repo, recorded_console).open(
        DrawerMode.NEW, due_date=pendulum.date(2025, 6, 18)
    )

    assert edited == [["vi", str(tasks_path)]]
    assert "due_date: 2025-06-18" in recorded_console.export_text()
    assert [task["title"] for task in repo.get_all_tasks()] == ["Added"]


def test_drawer_edit_keeps_existing_source(write_tasks, monkeypatch, recorded_console):
    tasks_path = write_tasks([{"id": 1, "title": "Original"}])
    repo = TaskRepository(tasks_path)
    monkeypatch.setattr(subprocess, "run", lambda args, check: None)

    TerminalTaskDrawer(repo, recorded_console).open(DrawerMode.EDIT, 1)

    assert "Edit the task with id: 1" in recorded_console.export_text()
    assert repo.get_task(1)["title"] == "Original"


@pytest.mark.parametrize("typed_name", ["select", "sel"])
def test_aliases_resolve_to_the_registered_command(typed_name):
    group = typer.main.get_group(calendar.app)

    with click.Context(group) as ctx:
        command = group.get_command(ctx, typed_name)

    assert command is not None
    assert command.name == "select, sel"


def test_unknown_command_name_is_not_resolved():
    group = typer.main.get_group(calendar.app)

    with click.Context(group) as ctx:
        assert group.get_command(ctx, "selection") is None
