"""Task views and commands for Keep.

Every query returns (index, Task) pairs, where index points into
store.tasks. An index is only valid until the next append or delete;
callers re-query after each structural change.
"""

from __future__ import annotations

import logging
import re
from datetime import date, time

from keep.models import Store, Task

logger = logging.getLogger(__name__)

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


# ── Time fields ───────────────────────────────────────────────


def parse_time(text: str | None) -> time | None:
    """Parse a 24-hour 'HH:MM' literal; anything else yields None.

    '9:30' and '09:30' are accepted, '13:5' and '25:00' are not.
    """
    m = _TIME_RE.match((text or "").strip())
    if not m:
        return None
    try:
        return time(int(m.group(1)), int(m.group(2)))
    except ValueError:
        return None


def format_time(t: time | None) -> str:
    return t.strftime("%H:%M") if t is not None else ""


# ── Queries ───────────────────────────────────────────────────


def tasks_for_date(store: Store, day: date) -> list[tuple[int, Task]]:
    """All tasks scheduled on *day*, in storage order."""
    return [(i, t) for i, t in enumerate(store.tasks) if t.date == day]


def sort_for_display(tasks: list[tuple[int, Task]]) -> list[tuple[int, Task]]:
    """Timed tasks first by start time, then untimed ones in their given order."""
    return sorted(
        tasks,
        key=lambda pair: (pair[1].start_time is None, pair[1].start_time or time.min),
    )


def current_tasks(store: Store, day: date) -> list[tuple[int, Task]]:
    """The rows shown for *day*; row numbers index into this list."""
    return sort_for_display(tasks_for_date(store, day))


def overdue(store: Store, today: date) -> list[tuple[int, Task]]:
    """Incomplete tasks dated strictly before *today*, in storage order."""
    return [(i, t) for i, t in enumerate(store.tasks) if t.is_overdue(today)]


# ── Commands ──────────────────────────────────────────────────


def toggle(store: Store, index: int) -> bool:
    """Flip a task's completion flag. Returns False for a stale index."""
    if not 0 <= index < len(store.tasks):
        return False
    task = store.tasks[index]
    task.completed = not task.completed
    return True


def upsert(
    store: Store,
    index: int | None,
    content: str,
    day: date | None,
    start_time: str | None = None,
    end_time: str | None = None,
) -> tuple[int | None, list[str]]:
    """Add a task (index None) or edit one in place. Returns (index, errors).

    Empty content rejects the write. Malformed times are stored as None.
    Editing keeps the task's date and completion flag.
    """
    content = (content or "").strip()
    if not content:
        return None, ["Task content must not be empty"]

    start = parse_time(start_time)
    end = parse_time(end_time)
    for raw, parsed in ((start_time, start), (end_time, end)):
        if raw and raw.strip() and parsed is None:
            logger.debug("Ignoring malformed time %r", raw)

    if index is None:
        store.tasks.append(
            Task(content=content, completed=False, date=day, start_time=start, end_time=end)
        )
        return len(store.tasks) - 1, []

    if not 0 <= index < len(store.tasks):
        return None, [f"Task not found: {index}"]

    task = store.tasks[index]
    task.content = content
    task.start_time = start
    task.end_time = end
    return index, []


def delete(store: Store, index: int) -> bool:
    """Remove a task; later indices shift down by one."""
    if not 0 <= index < len(store.tasks):
        return False
    store.tasks.pop(index)
    return True


# ── Row selection ─────────────────────────────────────────────


def step_selection(selected: int, count: int, delta: int) -> int:
    """Move the selected row by *delta*, wrapping at both ends."""
    if count <= 0:
        return 0
    return (selected + delta) % count


def clamp_selection(selected: int, count: int) -> int:
    """Selection after the selected row was deleted."""
    if count <= 0:
        return 0
    return min(max(selected - 1, 0), count - 1)
