# src/vibe_tasks/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- loads the category catalog and the task collection,
- wires the concrete prompter/notifier into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_prompter import ConsolePrompter
from ..connectors.desktop_notifier import DesktopNotifier
from ..core.ports import Notifier, Prompter
from ..core.state import AppState
from ..tasks.category_catalog import load_category_catalog
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings=None,
    prompter: Prompter | None = None,
    notifier: Notifier | None = None,
) -> AppState:
    """
    Create AppState from the provided settings and load the task file.

    Keeping settings and ports injectable makes the app easy to test without a
    terminal or a notification daemon. If settings is None, falls back to get_settings().
    Raises StoreError / CategoryCatalogError when the local files are unusable.
    """
    if settings is None:
        settings = get_settings()

    emoji = bool(getattr(settings, "emoji", True))
    if prompter is None:
        prompter = ConsolePrompter(emoji=emoji)
    if notifier is None:
        notifier = DesktopNotifier(icon=str(getattr(settings, "notify_icon", "calendar")))

    categories = load_category_catalog(getattr(settings, "categories_path", None))

    store = TaskStore(settings.tasks_path)
    store.load()

    return AppState(
        settings=settings,
        store=store,
        prompter=prompter,
        notifier=notifier,
        categories=categories,
    )
