# src/vibe_tasks/tasks/task_render.py

"""Plain-text views of the task collection (list and time report)."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta

from .task_models import Task
from .task_theme import PLAIN, Theme

RULE = "=" * 50

DATE_FORMAT = "%Y-%m-%d %H:%M"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
CLOCK_FORMAT = "%H:%M:%S"


def format_hours(td: timedelta) -> str:
    """Whole minutes expressed as hours, two decimals: 1h29m59s -> '1.48 hours'."""
    minutes = int(td.total_seconds() / 60)
    return f"{minutes / 60:.2f} hours"


def render_task(task: Task, *, emoji: bool = True, theme: Theme = PLAIN) -> list[str]:
    lines = [f"Task #{task.id}: {theme.title(task.title)}"]
    if task.description:
        lines.append(f"Description: {task.description}")
    lines.append(f"Priority: {theme.priority(task.priority)}")
    lines.append(f"Status: {theme.status(task.status)}")

    if task.categories:
        names = ", ".join(theme.category(c, emoji=emoji) for c in task.categories)
        lines.append(f"Categories: {names}")

    if task.current_time_entry is not None:
        started = task.current_time_entry.start_time.strftime(CLOCK_FORMAT)
        prefix = "🔄 " if emoji else ""
        lines.append(f"{prefix}Currently tracking time (started: {started})")
    if task.time_entries:
        prefix = "⏱️ " if emoji else ""
        lines.append(f"{prefix}Total time: {format_hours(task.tracked_time())}")

    if task.due_date is not None:
        lines.append(f"Due: {theme.due(task.due_date.strftime(DATE_FORMAT))}")
    lines.append(f"Created: {task.created_at.strftime(DATE_FORMAT)}")
    return lines


def render_task_list(tasks: Iterable[Task], *, emoji: bool = True, theme: Theme = PLAIN) -> str:
    """Every task in insertion order, separated by rules."""
    tasks = list(tasks)
    if not tasks:
        suffix = " ✨" if emoji else ""
        return f"No tasks found. Add some tasks to get started!{suffix}"

    lines: list[str] = []
    for task in tasks:
        lines.append(theme.rule(RULE))
        lines.extend(render_task(task, emoji=emoji, theme=theme))
        lines.append("")
    lines[-1] = theme.rule(RULE)
    return "\n".join(lines)


def render_time_report(task: Task, *, now: datetime, theme: Theme = PLAIN) -> str:
    """
    Sessions, running session and total for one task.

    Total = closed durations + elapsed time of the running session.
    """
    rule = theme.rule(RULE)
    lines = [rule, f"Time Report for Task #{task.id}: {theme.title(task.title)}"]

    if not task.time_entries and task.current_time_entry is None:
        lines.append("No time entries recorded for this task.")
        lines.append(rule)
        return "\n".join(lines)

    total = timedelta()
    for i, entry in enumerate(task.time_entries, start=1):
        if entry.duration is None:
            continue
        total += entry.duration
        lines.append("")
        lines.append(f"Session {i}:")
        lines.append(f"Start: {entry.start_time.strftime(TIMESTAMP_FORMAT)}")
        if entry.end_time is not None:
            lines.append(f"End: {entry.end_time.strftime(TIMESTAMP_FORMAT)}")
        lines.append(f"Duration: {format_hours(entry.duration)}")

    current = task.current_time_entry
    if current is not None:
        running = current.elapsed(now)
        total += running
        lines.append("")
        lines.append("Current session:")
        lines.append(f"Started: {current.start_time.strftime(TIMESTAMP_FORMAT)}")
        lines.append(f"Running for: {format_hours(running)}")

    lines.append("")
    lines.append(f"Total time spent: {format_hours(total)}")
    lines.append(rule)
    return "\n".join(lines)
