"""Shared test fixtures for Keep tests."""

from __future__ import annotations

import json
from datetime import date, time
from pathlib import Path

import pytest

from keep.models import Store, Task


@pytest.fixture
def sample_store() -> Store:
    """A store with tasks spread over a few days."""
    return Store(
        tasks=[
            Task(content="A", date=date(2024, 1, 1), start_time=time(9, 0)),
            Task(content="B", date=date(2024, 1, 1), start_time=time(8, 0)),
            Task(content="C", date=date(2024, 1, 1)),
            Task(content="Old report", date=date(2023, 12, 30)),
            Task(content="Old done", date=date(2023, 12, 31), completed=True),
            Task(content="Someday"),
            Task(content="Tomorrow", date=date(2024, 1, 2), start_time=time(7, 30)),
        ],
        notes="first line\nsecond",
    )


@pytest.fixture
def data_file(tmp_path: Path, monkeypatch) -> Path:
    """Temporary data file, wired through KEEP_DATA_FILE."""
    path = tmp_path / "keep_tasks.json"
    monkeypatch.setenv("KEEP_DATA_FILE", str(path))
    monkeypatch.setenv("KEEP_CONFIG", str(tmp_path / "missing-config.yaml"))
    return path


@pytest.fixture
def legacy_data(data_file: Path) -> Path:
    """A data file in the on-disk shape written by earlier releases."""
    payload = {
        "tasks": [
            {
                "content": "Standup",
                "completed": False,
                "date": "2024-03-04",
                "start_time": "09:15:00",
                "end_time": "09:30:00",
            },
            {
                "content": "Groceries",
                "completed": True,
                "date": None,
                "start_time": None,
                "end_time": None,
            },
        ],
    }
    data_file.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return data_file
