# src/vibe_tasks/tasks/task_api.py

"""
Task operations.

Every operation works on state.store (already loaded by bootstrap), saves the
whole collection after a mutation and reports recoverable conditions
(unknown id, timer already running, ...) through TaskResult instead of raising.
Store failures propagate as StoreError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import StrEnum

from ..core.ports import NotificationError
from ..core.state import AppState
from .task_models import (
    PRIORITY_CHOICES,
    STATUS_LABELS,
    Category,
    Priority,
    Status,
    Task,
    TimeEntry,
    priority_from_index,
    status_from_index,
)
from .task_render import render_task_list, render_time_report
from .task_theme import Theme, color_enabled

logger = logging.getLogger(__name__)

DUE_DATE_INPUT_FORMAT = "%Y-%m-%d %H:%M"

NOTIFICATION_SUMMARY = "Task Due Soon!"

_HOUR = timedelta(hours=1)


class Outcome(StrEnum):
    OK = "ok"
    NOT_FOUND = "not_found"
    ALREADY_RUNNING = "already_running"
    NOT_RUNNING = "not_running"


@dataclass(slots=True, frozen=True)
class TaskResult:
    outcome: Outcome
    message: str
    task: Task | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK


def _now() -> datetime:
    return datetime.now().astimezone()


def _not_found(task_id: int) -> TaskResult:
    logger.info("Task %s not found", task_id)
    return TaskResult(Outcome.NOT_FOUND, "Task not found!")


def parse_due_date(text: str) -> datetime | None:
    """
    'YYYY-MM-DD HH:MM' in local time -> aware datetime.

    Empty text means no due date; anything else that does not parse raises ValueError.
    """
    text = (text or "").strip()
    if not text:
        return None
    naive = datetime.strptime(text, DUE_DATE_INPUT_FORMAT)
    return naive.astimezone()


# ---- create ----


def create_task(
    state: AppState,
    *,
    title: str,
    priority: Priority = Priority.MEDIUM,
    description: str | None = None,
    due_date: datetime | None = None,
    now: datetime | None = None,
) -> Task:
    """Non-interactive core of `add`: append a new Todo task and persist it."""
    if now is None:
        now = _now()
    description = (description or "").strip() or None

    task = state.store.add(
        title=title,
        priority=priority,
        description=description,
        due_date=due_date,
        created_at=now,
    )
    state.store.save()
    logger.info("Task created id=%s title=%r", task.id, task.title)
    return task


def add_task(state: AppState, *, now: datetime | None = None) -> TaskResult:
    """Interactive `add`: ask for the fields, create the task, then pick its categories."""
    p = state.prompter

    title = p.text("Task title").strip()
    while not title:
        p.message("Title required.")
        title = p.text("Task title").strip()

    description = p.text("Description (optional)", allow_empty=True)

    idx = p.select("Select priority", [pr.value for pr in PRIORITY_CHOICES], default=0)
    priority = priority_from_index(idx)

    due_date: datetime | None = None
    while True:
        raw_due = p.text("Due date (YYYY-MM-DD HH:MM, optional)", allow_empty=True)
        try:
            due_date = parse_due_date(raw_due)
            break
        except ValueError:
            logger.info("Rejected due date input %r", raw_due)
            p.message(
                f"Invalid due date {raw_due.strip()!r}: expected YYYY-MM-DD HH:MM "
                "(leave empty for no due date)."
            )

    task = create_task(
        state,
        title=title,
        priority=priority,
        description=description,
        due_date=due_date,
        now=now,
    )
    p.message("Task added successfully!")

    assign_categories(state, task.id)
    return TaskResult(Outcome.OK, f"Task {task.id} created.", task)


# ---- categories ----


def set_categories(state: AppState, task_id: int, categories: list[Category]) -> TaskResult:
    """Replace (never merge) a task's categories; duplicates keep their first position."""
    task = state.store.get(task_id)
    if task is None:
        return _not_found(task_id)

    unique: list[Category] = []
    for c in categories:
        if c not in unique:
            unique.append(c)

    task.categories = unique
    state.store.save()
    logger.info("Task %s categories -> %s", task_id, [c.name for c in unique])
    return TaskResult(Outcome.OK, "Categories updated!", task)


def assign_categories(state: AppState, task_id: int) -> TaskResult:
    if state.store.get(task_id) is None:
        return _not_found(task_id)

    catalog = list(state.categories)
    picked = state.prompter.multi_select("Select categories", [c.display for c in catalog])
    chosen = [catalog[i] for i in picked if 0 <= i < len(catalog)]
    return set_categories(state, task_id, chosen)


# ---- time tracking ----


def start_timer(state: AppState, task_id: int, *, now: datetime | None = None) -> TaskResult:
    task = state.store.get(task_id)
    if task is None:
        return _not_found(task_id)

    if task.current_time_entry is not None:
        return TaskResult(
            Outcome.ALREADY_RUNNING, "Time tracking is already running for this task!", task
        )

    if now is None:
        now = _now()
    task.current_time_entry = TimeEntry(start_time=now)
    state.store.save()
    logger.info("Timer started task=%s at=%s", task_id, now.isoformat())
    return TaskResult(Outcome.OK, "Time tracking started!", task)


def stop_timer(state: AppState, task_id: int, *, now: datetime | None = None) -> TaskResult:
    task = state.store.get(task_id)
    if task is None:
        return _not_found(task_id)

    entry = task.current_time_entry
    if entry is None:
        return TaskResult(Outcome.NOT_RUNNING, "No active time tracking for this task!", task)

    if now is None:
        now = _now()
    entry.close(now)
    task.time_entries.append(entry)
    task.current_time_entry = None
    state.store.save()
    logger.info("Timer stopped task=%s duration=%s", task_id, entry.duration)
    return TaskResult(Outcome.OK, "Time tracking stopped!", task)


def time_report(state: AppState, task_id: int, *, now: datetime | None = None) -> TaskResult:
    """Read-only; never saves."""
    task = state.store.get(task_id)
    if task is None:
        return _not_found(task_id)
    if now is None:
        now = _now()
    return TaskResult(Outcome.OK, render_time_report(task, now=now, theme=_theme(state)), task)


# ---- list / status / delete ----


def _theme(state: AppState) -> Theme:
    return Theme(enabled=color_enabled(bool(getattr(state.settings, "color", False))))


def list_tasks(state: AppState) -> str:
    emoji = bool(getattr(state.settings, "emoji", True))
    return render_task_list(state.store.tasks, emoji=emoji, theme=_theme(state))


def complete_task(state: AppState, task_id: int) -> TaskResult:
    return set_status(state, task_id, Status.DONE, message=f"Task {task_id} marked as complete!")


def set_status(
    state: AppState, task_id: int, status: Status, *, message: str = "Task status updated!"
) -> TaskResult:
    task = state.store.get(task_id)
    if task is None:
        return _not_found(task_id)

    task.status = status
    state.store.save()
    logger.info("Task %s status -> %s", task_id, status.value)
    return TaskResult(Outcome.OK, message, task)


def update_status(state: AppState, task_id: int) -> TaskResult:
    if state.store.get(task_id) is None:
        return _not_found(task_id)

    idx = state.prompter.select("Select new status", list(STATUS_LABELS), default=0)
    return set_status(state, task_id, status_from_index(idx))


def delete_task(state: AppState, task_id: int) -> TaskResult:
    task = state.store.remove(task_id)
    if task is None:
        return _not_found(task_id)

    state.store.save()
    logger.info("Task %s deleted", task_id)
    return TaskResult(Outcome.OK, f"Task {task_id} deleted!", task)


# ---- due-date reminders ----


def _whole_hours(td: timedelta) -> int:
    # Truncates toward zero: 30 minutes overdue still counts as 0 hours.
    return int(td / _HOUR)


def due_notification_text(
    task: Task,
    *,
    now: datetime,
    window_hours: int = 24,
    cooldown_hours: int = 6,
) -> str | None:
    """
    Reminder body for a task that is due soon, or None when it should stay quiet.

    Due soon: 0 <= whole hours until due <= window_hours.
    Quiet while the last reminder is fewer than cooldown_hours whole hours old.
    """
    if task.due_date is None:
        return None

    hours_left = _whole_hours(task.due_date - now)
    if not 0 <= hours_left <= window_hours:
        return None

    if task.last_notification is not None:
        if _whole_hours(now - task.last_notification) < cooldown_hours:
            return None

    when = "now" if hours_left == 0 else f"in {hours_left} hours"
    return f"Task '{task.title}' is due {when}!"


@dataclass(slots=True)
class NotificationReport:
    sent: list[int] = field(default_factory=list)
    failed: dict[int, str] = field(default_factory=dict)

    def summary(self) -> str:
        if not self.sent and not self.failed:
            return "No tasks due soon."
        lines = [f"Sent {len(self.sent)} notification(s)."]
        for task_id, err in self.failed.items():
            lines.append(f"Failed to send notification for task {task_id}: {err}")
        return "\n".join(lines)


def check_notifications(state: AppState, *, now: datetime | None = None) -> NotificationReport:
    """
    Send one reminder per due-soon task and stamp last_notification on success.

    Candidates are collected before anything is sent. A failed delivery is
    reported and skipped (no retry). The collection is saved once at the end.
    """
    if now is None:
        now = _now()
    window = int(getattr(state.settings, "notify_window_hours", 24))
    cooldown = int(getattr(state.settings, "notify_cooldown_hours", 6))

    candidates: list[tuple[Task, str]] = []
    for task in state.store.tasks:
        text = due_notification_text(task, now=now, window_hours=window, cooldown_hours=cooldown)
        if text is not None:
            candidates.append((task, text))

    report = NotificationReport()
    for task, text in candidates:
        try:
            state.notifier.notify(NOTIFICATION_SUMMARY, text)
        except NotificationError as e:
            logger.warning("Notification failed task_id=%s: %s", task.id, e)
            report.failed[task.id] = str(e)
            continue
        task.last_notification = now
        report.sent.append(task.id)
        logger.info("Notification sent task_id=%s", task.id)

    state.store.save()
    return report
