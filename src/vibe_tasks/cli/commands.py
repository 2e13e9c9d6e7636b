# src/vibe_tasks/cli/commands.py

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass

from .. import __version__
from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_api import Outcome, TaskResult

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1


@dataclass(frozen=True, slots=True)
class CommandResult:
    text: str
    exit_code: int = EXIT_OK


CommandHandler = Callable[[AppState, argparse.Namespace], CommandResult]


@dataclass(frozen=True, slots=True)
class _Command:
    name: str
    handler: CommandHandler
    help_text: str
    takes_id: bool


def _task_id(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid task id: {raw!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"task id must be positive: {raw!r}")
    return value


class CommandRegistry:
    """Subcommand registry: builds the argparse front-end and dispatches parsed args."""

    def __init__(self) -> None:
        self._commands: dict[str, _Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        *,
        takes_id: bool = False,
    ) -> None:
        key = name.lower()
        self._commands[key] = _Command(key, handler, help_text, takes_id)

    def names(self) -> list[str]:
        return list(self._commands)

    def build_parser(self, prog: str = "vibe-tasks") -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog=prog,
            description="A vibey task manager for good vibes only.",
        )
        parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
        sub = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
        for cmd in self._commands.values():
            p = sub.add_parser(cmd.name, help=cmd.help_text, description=cmd.help_text)
            if cmd.takes_id:
                p.add_argument("id", type=_task_id, help="task id")
        return parser

    def handle(self, state: AppState, args: argparse.Namespace) -> CommandResult:
        cmd = self._commands.get(str(args.command).lower())
        if cmd is None:
            return CommandResult(f"Unknown command: {args.command}", exit_code=2)
        logger.debug("Dispatching command=%s", cmd.name)
        return cmd.handler(state, args)


registry = CommandRegistry()


def _decorate(state: AppState, icon: str, text: str) -> str:
    if getattr(state.settings, "emoji", True):
        return f"{icon} {text}"
    return text


def _from_task_result(state: AppState, result: TaskResult, icon: str = "✅") -> CommandResult:
    if result.outcome is Outcome.NOT_FOUND:
        return CommandResult(result.message, exit_code=EXIT_NOT_FOUND)
    if result.outcome is Outcome.OK:
        return CommandResult(_decorate(state, icon, result.message))
    # Already running / not running: informational, nothing changed.
    return CommandResult(result.message)


def cmd_add(state: AppState, args: argparse.Namespace) -> CommandResult:
    result = task_api.add_task(state)
    return _from_task_result(state, result, "✨")


def cmd_list(state: AppState, args: argparse.Namespace) -> CommandResult:
    return CommandResult(task_api.list_tasks(state))


def cmd_complete(state: AppState, args: argparse.Namespace) -> CommandResult:
    return _from_task_result(state, task_api.complete_task(state, args.id))


def cmd_status(state: AppState, args: argparse.Namespace) -> CommandResult:
    return _from_task_result(state, task_api.update_status(state, args.id))


def cmd_delete(state: AppState, args: argparse.Namespace) -> CommandResult:
    return _from_task_result(state, task_api.delete_task(state, args.id))


def cmd_add_categories(state: AppState, args: argparse.Namespace) -> CommandResult:
    return _from_task_result(state, task_api.assign_categories(state, args.id))


def cmd_start_time(state: AppState, args: argparse.Namespace) -> CommandResult:
    return _from_task_result(state, task_api.start_timer(state, args.id), "⏰")


def cmd_stop_time(state: AppState, args: argparse.Namespace) -> CommandResult:
    return _from_task_result(state, task_api.stop_timer(state, args.id), "⏰")


def cmd_time_report(state: AppState, args: argparse.Namespace) -> CommandResult:
    result = task_api.time_report(state, args.id)
    if result.outcome is Outcome.NOT_FOUND:
        return CommandResult(result.message, exit_code=EXIT_NOT_FOUND)
    return CommandResult(result.message)


def cmd_check_notifications(state: AppState, args: argparse.Namespace) -> CommandResult:
    report = task_api.check_notifications(state)
    return CommandResult(report.summary())


registry.register("add", cmd_add, help_text="Add a new task")
registry.register("list", cmd_list, help_text="List all tasks")
registry.register("complete", cmd_complete, help_text="Mark a task as complete", takes_id=True)
registry.register("status", cmd_status, help_text="Update task status", takes_id=True)
registry.register("delete", cmd_delete, help_text="Delete a task", takes_id=True)
registry.register(
    "add-categories", cmd_add_categories, help_text="Set the categories of a task", takes_id=True
)
registry.register(
    "start-time", cmd_start_time, help_text="Start time tracking for a task", takes_id=True
)
registry.register(
    "stop-time", cmd_stop_time, help_text="Stop time tracking for a task", takes_id=True
)
registry.register(
    "time-report",
    cmd_time_report,
    help_text="Show time tracking summary for a task",
    takes_id=True,
)
registry.register(
    "check-notifications",
    cmd_check_notifications,
    help_text="Check for due tasks and send notifications",
)
