"""Tests for keep/views.py: header, stats and overdue sidebar text."""

from datetime import date, time

from keep.models import Task
from keep.tasks import current_tasks, overdue
from keep.views import (
    day_stats,
    header_text,
    overdue_lines,
    overdue_preview,
    overdue_title,
    stats_text,
    time_cell,
)


def test_day_stats(sample_store):
    sample_store.tasks[0].completed = True
    assert day_stats(current_tasks(sample_store, date(2024, 1, 1))) == (3, 2, 1)
    assert day_stats([]) == (0, 0, 0)


def test_header_text_today():
    d = date(2024, 1, 1)
    assert header_text(d, d) == "📅 Monday, January 01, 2024 (Today)"
    assert header_text(d, date(2024, 1, 2)) == "📅 Monday, January 01, 2024"


def test_stats_text():
    assert stats_text(3, 2, 1) == " 3 Total  •  2 Pending  •  1 Done "


def test_time_cell():
    assert time_cell(time(9, 5)) == "🕐 09:05"
    assert time_cell(None) == "   --:--"


def test_overdue_preview_truncates():
    assert overdue_preview("short") == "short"
    assert overdue_preview("x" * 25) == "x" * 25
    assert overdue_preview("y" * 26) == "y" * 22 + "..."


def test_overdue_lines(sample_store):
    lines = overdue_lines(overdue(sample_store, date(2024, 1, 1)), limit=10)
    assert lines == ["⚠ Dec 30 Old report"]


def test_overdue_lines_limit():
    items = list(enumerate(Task(content=f"t{i}", date=date(2020, 1, 1)) for i in range(15)))
    assert len(overdue_lines(items, limit=10)) == 10


def test_overdue_lines_empty():
    assert overdue_lines([], limit=10)[-1].strip() == "🎉 All caught up!"


def test_overdue_title():
    assert overdue_title(0) == "✓ Overdue"
    assert overdue_title(4) == "⚠️  Overdue (4)"
