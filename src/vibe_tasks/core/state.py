# src/vibe_tasks/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_models import Category
from ..tasks.task_store import TaskStore
from .ports import Notifier, Prompter


@dataclass
class AppState:
    # Settings object (real Settings or a test SimpleNamespace).
    settings: Any

    store: TaskStore
    prompter: Prompter
    notifier: Notifier

    categories: list[Category] = field(default_factory=list)
