# src/vibe_tasks/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import StrEnum
from typing import Any


class Priority(StrEnum):
    """Task priority. Persisted by variant name."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    URGENT = "Urgent"

    @property
    def label(self) -> str:
        return self.value.upper()


class Status(StrEnum):
    """
    Task lifecycle status.

    Values are the persisted variant names; `label` is what listings show.
    """

    TODO = "Todo"
    IN_PROGRESS = "InProgress"
    DONE = "Done"

    @property
    def label(self) -> str:
        return {
            Status.TODO: "TODO",
            Status.IN_PROGRESS: "IN PROGRESS",
            Status.DONE: "DONE",
        }[self]


# Menu order for the interactive pickers.
PRIORITY_CHOICES: tuple[Priority, ...] = (
    Priority.LOW,
    Priority.MEDIUM,
    Priority.HIGH,
    Priority.URGENT,
)
STATUS_CHOICES: tuple[Status, ...] = (Status.TODO, Status.IN_PROGRESS, Status.DONE)
STATUS_LABELS: tuple[str, ...] = ("Todo", "In Progress", "Done")


def priority_from_index(idx: int) -> Priority:
    """Menu index -> Priority; anything out of range means Medium."""
    if 0 <= idx < len(PRIORITY_CHOICES):
        return PRIORITY_CHOICES[idx]
    return Priority.MEDIUM


def status_from_index(idx: int) -> Status:
    if 0 <= idx < len(STATUS_CHOICES):
        return STATUS_CHOICES[idx]
    return Status.TODO


# Durations are stored as float seconds; allow for rounding on the way back.
_DURATION_SLACK = timedelta(milliseconds=1)


def _ts_to_json(ts: datetime | None) -> str | None:
    return ts.isoformat() if ts is not None else None


def _ts_from_json(raw: Any, field_name: str) -> datetime | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ValueError(f"{field_name}: expected ISO timestamp string, got {type(raw).__name__}")
    ts = datetime.fromisoformat(raw)
    if ts.tzinfo is None:
        raise ValueError(f"{field_name}: timestamp has no UTC offset: {raw!r}")
    return ts


def _require_ts(raw: Any, field_name: str) -> datetime:
    ts = _ts_from_json(raw, field_name)
    if ts is None:
        raise ValueError(f"{field_name} is required")
    return ts


@dataclass(frozen=True, slots=True)
class Category:
    name: str
    color: str
    emoji: str

    @property
    def display(self) -> str:
        return f"{self.emoji} {self.name}" if self.emoji else self.name

    def to_json(self) -> dict[str, Any]:
        return {"name": self.name, "color": self.color, "emoji": self.emoji}

    @classmethod
    def from_json(cls, data: Any) -> Category:
        if not isinstance(data, dict):
            raise ValueError("category must be an object")
        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise ValueError("category.name is required")
        return cls(
            name=name,
            color=str(data.get("color") or ""),
            emoji=str(data.get("emoji") or ""),
        )


@dataclass(slots=True)
class TimeEntry:
    """
    One tracked work session.

    Open while end_time/duration are None; closed once both are set,
    with duration == end_time - start_time.
    """

    start_time: datetime
    end_time: datetime | None = None
    duration: timedelta | None = None

    @property
    def is_open(self) -> bool:
        return self.end_time is None

    def close(self, end_time: datetime) -> None:
        self.end_time = end_time
        self.duration = end_time - self.start_time

    def elapsed(self, now: datetime) -> timedelta:
        if self.duration is not None:
            return self.duration
        return now - self.start_time

    def to_json(self) -> dict[str, Any]:
        return {
            "start_time": _ts_to_json(self.start_time),
            "end_time": _ts_to_json(self.end_time),
            "duration": self.duration.total_seconds() if self.duration is not None else None,
        }

    @classmethod
    def from_json(cls, data: Any) -> TimeEntry:
        if not isinstance(data, dict):
            raise ValueError("time entry must be an object")
        raw_duration = data.get("duration")
        if raw_duration is not None and not isinstance(raw_duration, (int, float)):
            raise ValueError("time entry duration must be a number of seconds")
        entry = cls(
            start_time=_require_ts(data.get("start_time"), "start_time"),
            end_time=_ts_from_json(data.get("end_time"), "end_time"),
            duration=timedelta(seconds=raw_duration) if raw_duration is not None else None,
        )
        if (entry.end_time is None) != (entry.duration is None):
            raise ValueError("time entry needs both end_time and duration, or neither")
        if entry.end_time is not None and entry.duration is not None:
            if abs(entry.duration - (entry.end_time - entry.start_time)) > _DURATION_SLACK:
                raise ValueError("time entry duration does not match end_time - start_time")
        return entry


@dataclass(slots=True)
class Task:
    id: int
    title: str
    priority: Priority
    created_at: datetime

    description: str | None = None
    status: Status = Status.TODO
    due_date: datetime | None = None

    categories: list[Category] = field(default_factory=list)
    time_entries: list[TimeEntry] = field(default_factory=list)
    current_time_entry: TimeEntry | None = None
    last_notification: datetime | None = None

    @property
    def timer_running(self) -> bool:
        return self.current_time_entry is not None

    def tracked_time(self) -> timedelta:
        """Sum of closed sessions only."""
        total = timedelta()
        for entry in self.time_entries:
            if entry.duration is not None:
                total += entry.duration
        return total

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "priority": self.priority.value,
            "status": self.status.value,
            "due_date": _ts_to_json(self.due_date),
            "created_at": _ts_to_json(self.created_at),
            "categories": [c.to_json() for c in self.categories],
            "time_entries": [e.to_json() for e in self.time_entries],
            "current_time_entry": (
                self.current_time_entry.to_json() if self.current_time_entry is not None else None
            ),
            "last_notification": _ts_to_json(self.last_notification),
        }

    @classmethod
    def from_json(cls, data: Any) -> Task:
        """Strict decoder: anything unexpected raises ValueError."""
        if not isinstance(data, dict):
            raise ValueError("task must be an object")

        task_id = data.get("id")
        if not isinstance(task_id, int) or isinstance(task_id, bool) or task_id < 1:
            raise ValueError(f"task id must be a positive integer, got {task_id!r}")

        title = data.get("title")
        if not isinstance(title, str) or not title.strip():
            raise ValueError(f"task {task_id}: title is required")

        description = data.get("description")
        if description is not None and not isinstance(description, str):
            raise ValueError(f"task {task_id}: description must be a string")

        time_entries = [TimeEntry.from_json(e) for e in data.get("time_entries") or []]
        if any(e.is_open for e in time_entries):
            raise ValueError(f"task {task_id}: time_entries may only hold closed sessions")

        current = data.get("current_time_entry")
        current_entry = TimeEntry.from_json(current) if current is not None else None
        if current_entry is not None and not current_entry.is_open:
            raise ValueError(f"task {task_id}: current_time_entry is already closed")

        return cls(
            id=task_id,
            title=title,
            description=description,
            priority=Priority(data.get("priority")),
            status=Status(data.get("status")),
            due_date=_ts_from_json(data.get("due_date"), "due_date"),
            created_at=_require_ts(data.get("created_at"), "created_at"),
            categories=[Category.from_json(c) for c in data.get("categories") or []],
            time_entries=time_entries,
            current_time_entry=current_entry,
            last_notification=_ts_from_json(data.get("last_notification"), "last_notification"),
        )
