"""Plain-text pieces of the Keep screen (header, stats, overdue sidebar)."""

from __future__ import annotations

from datetime import date, time

from keep.models import Task

PREVIEW_MAX = 25
PREVIEW_KEEP = 22


def day_stats(tasks: list[tuple[int, Task]]) -> tuple[int, int, int]:
    """(total, pending, done) for a list of rows."""
    total = len(tasks)
    done = sum(1 for _, t in tasks if t.completed)
    return total, total - done, done


def header_text(day: date, today: date) -> str:
    label = f"📅 {day.strftime('%A, %B %d, %Y')}"
    if day == today:
        label += " (Today)"
    return label


def stats_text(total: int, pending: int, done: int) -> str:
    return f" {total} Total  •  {pending} Pending  •  {done} Done "


def time_cell(t: time | None) -> str:
    return f"🕐 {t.strftime('%H:%M')}" if t is not None else "   --:--"


def overdue_preview(content: str) -> str:
    if len(content) > PREVIEW_MAX:
        return content[:PREVIEW_KEEP] + "..."
    return content


def overdue_lines(items: list[tuple[int, Task]], limit: int) -> list[str]:
    """Sidebar lines for the first *limit* overdue tasks."""
    if not items:
        return ["", "  🎉 All caught up!"]
    lines = []
    for _, task in items[:limit]:
        day = task.date.strftime("%b %d") if task.date is not None else "---"
        lines.append(f"⚠ {day} {overdue_preview(task.content)}")
    return lines


def overdue_title(count: int) -> str:
    if count > 0:
        return f"⚠️  Overdue ({count})"
    return "✓ Overdue"
