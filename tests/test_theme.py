# tests/test_theme.py

from __future__ import annotations

import io
from datetime import datetime

import pytest

from vibe_tasks.core.state import AppState
from vibe_tasks.tasks import task_api
from vibe_tasks.tasks.task_models import Category, Priority, Status, Task
from vibe_tasks.tasks.task_render import RULE, render_task_list, render_time_report
from vibe_tasks.tasks.task_theme import PLAIN, Theme, color_enabled


class _Tty(io.StringIO):
    def isatty(self) -> bool:
        return True


@pytest.fixture(autouse=True)
def _clean_color_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


def test_color_only_on_terminals(monkeypatch: pytest.MonkeyPatch) -> None:
    assert color_enabled(True, _Tty()) is True
    assert color_enabled(True, io.StringIO()) is False
    assert color_enabled(False, _Tty()) is False

    monkeypatch.setenv("FORCE_COLOR", "1")
    assert color_enabled(True, io.StringIO()) is True

    monkeypatch.setenv("NO_COLOR", "")
    assert color_enabled(True, _Tty()) is False


def test_plain_theme_adds_nothing() -> None:
    assert PLAIN.status(Status.TODO) == "TODO"
    assert PLAIN.paint("x", "31") == "x"
    assert Theme(enabled=True).paint("x") == "x"


def test_colored_listing(now: datetime) -> None:
    task = Task(
        id=1,
        title="Write report",
        priority=Priority.URGENT,
        status=Status.DONE,
        created_at=now,
        due_date=now,
        categories=[
            Category(name="Work", color="blue", emoji="💼"),
            Category(name="Odd", color="chartreuse", emoji=""),
        ],
    )

    text = render_task_list([task], emoji=True, theme=Theme(enabled=True))

    assert text.splitlines()[0] == f"\033[36m{RULE}\033[0m"
    assert "Task #1: \033[1mWrite report\033[0m" in text
    assert "Priority: \033[31m\033[1mURGENT\033[0m" in text
    assert "Status: \033[32mDONE\033[0m" in text
    assert "Categories: \033[34m💼 Work\033[0m, Odd" in text
    assert "Due: \033[35m2026-10-17 12:00\033[0m" in text


def test_time_report_rules_are_colored(now: datetime) -> None:
    task = Task(id=3, title="Gym", priority=Priority.LOW, created_at=now)
    lines = render_time_report(task, now=now, theme=Theme(enabled=True)).splitlines()
    assert lines[0] == lines[-1] == f"\033[36m{RULE}\033[0m"


def test_list_follows_color_setting(
    state: AppState, now: datetime, monkeypatch: pytest.MonkeyPatch
) -> None:
    task_api.create_task(state, title="Stretch", priority=Priority.HIGH, now=now)
    monkeypatch.setenv("FORCE_COLOR", "1")

    assert "\033[" not in task_api.list_tasks(state)

    state.settings.color = True
    assert "Priority: \033[31mHIGH\033[0m" in task_api.list_tasks(state)

    monkeypatch.setenv("NO_COLOR", "1")
    assert "\033[" not in task_api.list_tasks(state)
