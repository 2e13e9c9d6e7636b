# src/vibe_tasks/tasks/task_theme.py

"""
ANSI color for task listings.

Decisions:
- Plain 16-color escape codes; category colors are the names stored with the task.
- Off unless asked for, and then only when stdout is a TTY (FORCE_COLOR=1 overrides).
- NO_COLOR always wins.
- Unknown color names render uncolored.
"""

from __future__ import annotations

import os
import sys
from typing import TextIO

from .task_models import Category, Priority, Status

_CODES = {
    "black": "30",
    "red": "31",
    "green": "32",
    "yellow": "33",
    "blue": "34",
    "magenta": "35",
    "cyan": "36",
    "white": "37",
}
BOLD = "1"
RESET = "\033[0m"

STATUS_COLOR: dict[Status, tuple[str, ...]] = {
    Status.TODO: (_CODES["red"],),
    Status.IN_PROGRESS: (_CODES["yellow"],),
    Status.DONE: (_CODES["green"],),
}

PRIORITY_COLOR: dict[Priority, tuple[str, ...]] = {
    Priority.LOW: (_CODES["blue"],),
    Priority.MEDIUM: (_CODES["yellow"],),
    Priority.HIGH: (_CODES["red"],),
    Priority.URGENT: (_CODES["red"], BOLD),
}


def color_enabled(wanted: bool, stream: TextIO | None = None) -> bool:
    """Whether to emit escape codes on `stream` (stdout by default)."""
    if not wanted or os.environ.get("NO_COLOR") is not None:
        return False
    if os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}:
        return True
    stream = stream if stream is not None else sys.stdout
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class Theme:
    def __init__(self, enabled: bool = False) -> None:
        self.enabled = enabled

    def paint(self, text: str, *codes: str) -> str:
        if not self.enabled or not codes:
            return text
        return "".join(f"\033[{c}m" for c in codes) + text + RESET

    def rule(self, text: str) -> str:
        return self.paint(text, _CODES["cyan"])

    def title(self, text: str) -> str:
        return self.paint(text, BOLD)

    def due(self, text: str) -> str:
        return self.paint(text, _CODES["magenta"])

    def status(self, status: Status) -> str:
        return self.paint(status.label, *STATUS_COLOR[status])

    def priority(self, priority: Priority) -> str:
        return self.paint(priority.label, *PRIORITY_COLOR[priority])

    def category(self, category: Category, *, emoji: bool = True) -> str:
        text = category.display if emoji else category.name
        code = _CODES.get(category.color.strip().lower())
        return self.paint(text, code) if code else text


PLAIN = Theme(enabled=False)
