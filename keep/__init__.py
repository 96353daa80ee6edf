"""Keep core library: task store, views and the note editor.

Public API re-exports for convenient imports:
    from keep import Store, load_store, current_tasks, NoteBuffer, ...
"""

# Settings
from keep.config import (
    Settings,
    config_path,
    data_path,
    load_settings,
)

# File I/O
from keep.fileio import (
    read_text,
    read_json,
    read_yaml,
    write_json_atomic,
)

# Logging
from keep.logging_setup import setup_logging

# Models
from keep.models import (
    Store,
    Task,
)

# Persistence
from keep.store import (
    load_store,
    save_store,
)

# Tasks
from keep.tasks import (
    clamp_selection,
    current_tasks,
    delete,
    format_time,
    overdue,
    parse_time,
    sort_for_display,
    step_selection,
    tasks_for_date,
    toggle,
    upsert,
)

# Notes
from keep.notes import NoteBuffer

# Display helpers
from keep.views import (
    day_stats,
    header_text,
    overdue_lines,
    overdue_preview,
    overdue_title,
    stats_text,
    time_cell,
)
