"""Typed dataclasses for the Keep data model.

All models use from_dict/to_dict for JSON serialization.
Dates are ISO strings, times are written as HH:MM:SS and read back from
any ISO time literal. Unknown keys are ignored; missing keys use defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import Any


def _date_from(value: Any) -> date | None:
    if value is None or value == "":
        return None
    return date.fromisoformat(str(value))


def _time_from(value: Any) -> time | None:
    if value is None or value == "":
        return None
    return time.fromisoformat(str(value))


def _bool_from(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"Expected true/false, got {value!r}")
    return value


def _time_to(value: time | None) -> str | None:
    return value.strftime("%H:%M:%S") if value is not None else None


# ── Tasks ─────────────────────────────────────────────────────


@dataclass
class Task:
    content: str = ""
    completed: bool = False
    date: date | None = None
    start_time: time | None = None
    end_time: time | None = None

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Task:
        """Build a Task; raises ValueError on malformed completed/date/time fields."""
        return cls(
            content=str(d.get("content", "")),
            completed=_bool_from(d.get("completed", False)),
            date=_date_from(d.get("date")),
            start_time=_time_from(d.get("start_time")),
            end_time=_time_from(d.get("end_time")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": self.content,
            "completed": self.completed,
            "date": self.date.isoformat() if self.date is not None else None,
            "start_time": _time_to(self.start_time),
            "end_time": _time_to(self.end_time),
        }

    def is_overdue(self, today: date) -> bool:
        return self.date is not None and self.date < today and not self.completed


# ── Store ─────────────────────────────────────────────────────


@dataclass
class Store:
    """All tasks (insertion order) plus the free-form note text."""

    tasks: list[Task] = field(default_factory=list)
    notes: str = ""

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Store:
        if not d or not isinstance(d, dict):
            return cls()
        raw_tasks = d.get("tasks") or []
        if not isinstance(raw_tasks, list):
            raise ValueError("'tasks' must be a list")
        tasks = []
        for t in raw_tasks:
            if not isinstance(t, dict):
                raise ValueError(f"Malformed task entry: {t!r}")
            tasks.append(Task.from_dict(t))
        return cls(tasks=tasks, notes=str(d.get("notes") or ""))

    def to_dict(self) -> dict[str, Any]:
        return {
            "tasks": [t.to_dict() for t in self.tasks],
            "notes": self.notes,
        }
