# tests/test_render.py

from __future__ import annotations

from datetime import datetime, timedelta

from vibe_tasks.tasks.category_catalog import DEFAULT_CATEGORIES
from vibe_tasks.tasks.task_models import Priority, Status, Task, TimeEntry
from vibe_tasks.tasks.task_render import (
    RULE,
    format_hours,
    render_task_list,
    render_time_report,
)


def _closed(start: datetime, minutes: int) -> TimeEntry:
    entry = TimeEntry(start_time=start)
    entry.close(start + timedelta(minutes=minutes))
    return entry


def test_format_hours_uses_whole_minutes() -> None:
    assert format_hours(timedelta(minutes=90)) == "1.50 hours"
    assert format_hours(timedelta(minutes=1, seconds=59)) == "0.02 hours"
    assert format_hours(timedelta()) == "0.00 hours"


def test_list_shows_every_field(now: datetime) -> None:
    task = Task(
        id=1,
        title="Write report",
        description="Q3 numbers",
        priority=Priority.HIGH,
        status=Status.IN_PROGRESS,
        created_at=now,
        due_date=datetime(2026, 10, 18, 9, 0, tzinfo=now.tzinfo),
        categories=[DEFAULT_CATEGORIES[0], DEFAULT_CATEGORIES[1]],
        time_entries=[_closed(now, 30), _closed(now + timedelta(hours=1), 60)],
        current_time_entry=TimeEntry(start_time=now.replace(hour=14, minute=5)),
    )

    out = render_task_list([task], emoji=True)
    lines = out.splitlines()

    assert lines[0] == RULE
    assert lines[-1] == RULE
    assert "Task #1: Write report" in lines
    assert "Description: Q3 numbers" in lines
    assert "Priority: HIGH" in lines
    assert "Status: IN PROGRESS" in lines
    assert "Categories: 💼 Work, 🏠 Personal" in lines
    assert "🔄 Currently tracking time (started: 14:05:00)" in lines
    assert "⏱️ Total time: 1.50 hours" in lines
    assert "Due: 2026-10-18 09:00" in lines
    assert "Created: 2026-10-17 12:00" in lines


def test_list_without_emoji_and_optional_fields(now: datetime) -> None:
    task = Task(id=3, title="Buy milk", priority=Priority.LOW, created_at=now)
    task.categories = [DEFAULT_CATEGORIES[4]]

    out = render_task_list([task], emoji=False)

    assert "Categories: Shopping" in out
    assert "Description" not in out
    assert "Due:" not in out
    assert "Total time" not in out
    assert "Status: TODO" in out
    assert "🛒" not in out


def test_list_keeps_insertion_order(now: datetime) -> None:
    tasks = [Task(id=i, title=f"t{i}", priority=Priority.MEDIUM, created_at=now) for i in (5, 2, 9)]
    out = render_task_list(tasks, emoji=False)
    assert out.index("Task #5") < out.index("Task #2") < out.index("Task #9")
    assert out.count(RULE) == 4


def test_time_report_with_running_session(now: datetime) -> None:
    task = Task(id=2, title="Study", priority=Priority.MEDIUM, created_at=now)
    task.time_entries = [_closed(now, 45)]
    task.current_time_entry = TimeEntry(start_time=now + timedelta(hours=1))

    out = render_time_report(task, now=now + timedelta(hours=1, minutes=15))

    assert "Time Report for Task #2: Study" in out
    assert "Session 1:" in out
    assert "Start: 2026-10-17 12:00:00" in out
    assert "End: 2026-10-17 12:45:00" in out
    assert "Duration: 0.75 hours" in out
    assert "Current session:" in out
    assert "Running for: 0.25 hours" in out
    assert "Total time spent: 1.00 hours" in out


def test_time_report_without_sessions(now: datetime) -> None:
    task = Task(id=4, title="Idle", priority=Priority.LOW, created_at=now)
    out = render_time_report(task, now=now)
    assert "No time entries recorded for this task." in out
    assert "Total time spent" not in out
