# tests/conftest.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
from types import SimpleNamespace

import pytest

from vibe_tasks.core.state import AppState
from vibe_tasks.tasks.category_catalog import DEFAULT_CATEGORIES
from vibe_tasks.tasks.task_store import TaskStore

from .fakes import FakeNotifier, FakePrompter

TZ = timezone(timedelta(hours=2))


@pytest.fixture()
def now() -> datetime:
    return datetime(2026, 10, 17, 12, 0, 0, tzinfo=TZ)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than Settings.from_env(),
    to keep unit tests isolated from the real environment and home directory.
    """
    return SimpleNamespace(
        app_name="vibe_tasks",
        log_level="WARNING",
        log_to_file=False,
        emoji=False,
        color=False,
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.json",
        categories_path=tmp_path / "categories.json",
        log_dir=tmp_path,
        notify_window_hours=24,
        notify_cooldown_hours=6,
        notify_icon="calendar",
    )


@pytest.fixture()
def prompter() -> FakePrompter:
    return FakePrompter()


@pytest.fixture()
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture()
def state(settings: SimpleNamespace, prompter: FakePrompter, notifier: FakeNotifier) -> AppState:
    """
    AppState wired with deterministic fakes.

    NOTE: the TaskStore is real (writing into tmp_path) because its
    persistence behaviour is part of what we want to test.
    """
    store = TaskStore(settings.tasks_path)
    store.load()
    return AppState(
        settings=settings,
        store=store,
        prompter=prompter,
        notifier=notifier,
        categories=list(DEFAULT_CATEGORIES),
    )
