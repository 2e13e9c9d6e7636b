# src/vibe_tasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task operations.

Operations depend on Protocols instead of the terminal or the desktop.
This keeps the operations testable without a live TTY or a notification daemon.
"""

from collections.abc import Sequence
from typing import Protocol


class Prompter(Protocol):
    """
    Interactive input provider.

    Implementations block until the user answers. Raising EOFError or
    KeyboardInterrupt aborts the running command.
    """

    def text(self, prompt: str, *, allow_empty: bool = False) -> str: ...

    def select(self, prompt: str, items: Sequence[str], *, default: int = 0) -> int: ...

    def multi_select(self, prompt: str, items: Sequence[str]) -> list[int]: ...

    def message(self, text: str) -> None: ...


class NotificationError(RuntimeError):
    """A single notification could not be delivered."""


class Notifier(Protocol):
    """
    Fire-and-forget desktop notification.

    Returns normally on success; raises NotificationError on failure.
    There is no delivery receipt.
    """

    def notify(self, summary: str, body: str) -> None: ...
