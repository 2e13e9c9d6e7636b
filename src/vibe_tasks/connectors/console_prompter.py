# src/vibe_tasks/connectors/console_prompter.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence

logger = logging.getLogger(__name__)

_SPLIT_REGEX = re.compile(r"[\s,]+")

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class ConsolePrompter:
    """
    Prompter backed by input()/print().

    Menus are numbered from 1. select() accepts an empty answer as the
    default; multi_select() accepts numbers separated by spaces or commas
    (empty answer selects nothing). Invalid answers are asked again.
    EOFError / KeyboardInterrupt propagate to the caller.
    """

    def __init__(
        self,
        *,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
        emoji: bool = True,
    ) -> None:
        self._input = input_fn
        self._output = output_fn
        self._emoji = emoji

    def _ask(self, prompt: str) -> str:
        marker = "✨ " if self._emoji else ""
        return self._input(f"{marker}{prompt}: ")

    def text(self, prompt: str, *, allow_empty: bool = False) -> str:
        while True:
            answer = self._ask(prompt).strip()
            if answer or allow_empty:
                return answer

    def _print_items(self, items: Sequence[str], default: int | None = None) -> None:
        for i, item in enumerate(items, start=1):
            mark = " (default)" if default is not None and i - 1 == default else ""
            self._output(f"  {i}) {item}{mark}")

    def select(self, prompt: str, items: Sequence[str], *, default: int = 0) -> int:
        self._print_items(items, default)
        while True:
            answer = self._ask(prompt).strip()
            if not answer:
                return default
            if answer.isdecimal() and 1 <= int(answer) <= len(items):
                return int(answer) - 1
            self._output(f"Please enter a number from 1 to {len(items)}.")

    def multi_select(self, prompt: str, items: Sequence[str]) -> list[int]:
        if not items:
            return []
        self._print_items(items)
        while True:
            answer = self._ask(f"{prompt} (numbers, empty for none)").strip()
            if not answer:
                return []
            parts = [p for p in _SPLIT_REGEX.split(answer) if p]
            if all(p.isdecimal() and 1 <= int(p) <= len(items) for p in parts):
                picked: list[int] = []
                for p in parts:
                    idx = int(p) - 1
                    if idx not in picked:
                        picked.append(idx)
                return picked
            logger.debug("Rejected multi-select answer %r", answer)
            self._output(f"Please enter numbers from 1 to {len(items)}.")

    def message(self, text: str) -> None:
        self._output(text)
