#!/usr/bin/env python3
"""Keep TUI: interactive terminal task manager powered by Textual."""

from __future__ import annotations

import logging
import sys
from datetime import date, timedelta
from pathlib import Path

from rich.text import Text
from textual import events, on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widget import Widget
from textual.widgets import DataTable, Footer, Header, Input, Label, Static

from keep import (
    NoteBuffer,
    Store,
    clamp_selection,
    current_tasks,
    data_path,
    day_stats,
    delete,
    format_time,
    header_text,
    load_settings,
    load_store,
    overdue,
    overdue_lines,
    overdue_title,
    save_store,
    setup_logging,
    stats_text,
    step_selection,
    time_cell,
    toggle,
    upsert,
)
from keep.config import DEFAULT_OVERDUE_LIMIT

logger = logging.getLogger(__name__)


# ── Stylesheet ─────────────────────────────────────────────────

CSS = """
Screen {
    background: $surface;
}

#main-layout {
    height: 1fr;
}

#left-pane {
    width: 1fr;
    min-width: 40;
    border: round $primary-background-darken-2;
    padding: 0 1;
}

#overdue-pane {
    width: 35;
    border: round $success;
    padding: 0 1;
}

#overdue-pane.has-overdue {
    border: round $error;
}

.section-title {
    text-style: bold;
    color: $text;
    margin: 0 0 1 0;
}

#tasks-table {
    height: 1fr;
}

#notes-editor {
    height: 1fr;
    display: none;
}

#input-bar {
    dock: bottom;
    height: 5;
    border: round $accent;
    display: none;
}

#task-input {
    width: 3fr;
}

#start-input, #end-input {
    width: 1fr;
    min-width: 14;
}
"""


# ── Custom widgets ─────────────────────────────────────────────


class NotesEditor(Widget):
    """Free-form note editor drawn from a NoteBuffer with a block cursor."""

    can_focus = True

    MOTIONS = {
        "left": "move_left",
        "right": "move_right",
        "up": "move_up",
        "down": "move_down",
        "home": "move_home",
        "end": "move_end",
        "backspace": "delete_backward",
        "delete": "delete_forward",
    }

    def __init__(self, buffer: NoteBuffer, **kwargs) -> None:
        super().__init__(**kwargs)
        self.buffer = buffer
        self.dirty = False

    def render(self) -> Text:
        before, after = self.buffer.split()
        text = Text(before)
        text.append("█", style="bold white")
        text.append(after)
        return text

    def on_key(self, event: events.Key) -> None:
        method = self.MOTIONS.get(event.key)
        if method is not None:
            getattr(self.buffer, method)()
            if event.key in ("backspace", "delete"):
                self.dirty = True
        elif event.key == "enter":
            self.buffer.insert("\n")
            self.dirty = True
        elif event.is_printable and event.character:
            self.buffer.insert(event.character)
            self.dirty = True
        else:
            # ctrl+s, tab, ... fall through to app bindings
            return
        event.prevent_default()
        event.stop()
        self.refresh()


# ── Main app ───────────────────────────────────────────────────


class KeepApp(App):
    """Keep: scheduled tasks, overdue sidebar and a notes pad."""

    TITLE = "Keep"
    CSS = CSS
    AUTO_FOCUS = None

    TASK_ACTIONS = {
        "new_task", "edit_task", "toggle_task", "delete_task",
        "prev_day", "next_day", "prev_task", "next_task", "quit_app",
    }

    BINDINGS = [
        Binding("n", "new_task", "New"),
        Binding("e", "edit_task", "Edit"),
        Binding("space", "toggle_task", "Toggle"),
        Binding("d", "delete_task", "Delete"),
        Binding("left", "prev_day", "Prev day"),
        Binding("right", "next_day", "Next day"),
        Binding("up", "prev_task", "Up", show=False),
        Binding("down", "next_task", "Down", show=False),
        Binding("k", "prev_task", "Up", show=False),
        Binding("j", "next_task", "Down", show=False),
        Binding("h", "prev_day", "Prev day", show=False),
        Binding("l", "next_day", "Next day", show=False),
        Binding("tab", "tab", "View", priority=True),
        Binding("escape", "cancel_input", "Cancel"),
        Binding("ctrl+s", "save_notes", "Save"),
        Binding("q", "quit_app", "Quit"),
        Binding("ctrl+q", "force_quit", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        store: Store,
        data_file: Path | None = None,
        overdue_limit: int = DEFAULT_OVERDUE_LIMIT,
    ) -> None:
        super().__init__()
        self.store = store
        self.data_file = data_file
        self.overdue_limit = overdue_limit
        self.notes = NoteBuffer(store.notes)
        self.current_date = date.today()
        self.selected = 0
        self.view_mode = "tasks"
        self._rows: list = []
        self._input_mode = False
        self._editing: int | None = None
        self._field = 0

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        """Control which bindings are live for the current mode."""
        if action in self.TASK_ACTIONS:
            return self.view_mode == "tasks" and not self._input_mode
        if action == "cancel_input":
            return self._input_mode
        if action == "save_notes":
            return self.view_mode == "notes"
        return True

    def compose(self) -> ComposeResult:
        yield Header()
        yield Horizontal(
            Vertical(
                Label("Scheduled Tasks", id="pane-title", classes="section-title"),
                DataTable(id="tasks-table", cursor_type="row"),
                NotesEditor(self.notes, id="notes-editor"),
                id="left-pane",
            ),
            Vertical(
                Label(id="overdue-title", classes="section-title"),
                Static(id="overdue-list"),
                id="overdue-pane",
            ),
            id="main-layout",
        )
        yield Horizontal(
            Input(placeholder="Task", id="task-input"),
            Input(placeholder="Start HH:MM", id="start-input", restrict=r"[0-9:]*", max_length=5),
            Input(placeholder="End HH:MM", id="end-input", restrict=r"[0-9:]*", max_length=5),
            id="input-bar",
        )
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#tasks-table", DataTable)
        table.can_focus = False
        table.add_columns("  ", "Start Time", "End Time", "Task Description")
        self._refresh()

    # ── Rendering ──────────────────────────────────────────────

    def _refresh(self) -> None:
        self._rows = current_tasks(self.store, self.current_date)
        self._refresh_header()
        self._refresh_table()
        self._refresh_overdue()
        self.refresh_bindings()

    def _refresh_header(self) -> None:
        if self.view_mode == "notes":
            self.sub_title = "📝 Free-form Notes & Ideas"
            return
        total, pending, done = day_stats(self._rows)
        self.sub_title = (
            f"{header_text(self.current_date, date.today())}  {stats_text(total, pending, done)}"
        )

    def _refresh_table(self) -> None:
        table = self.query_one("#tasks-table", DataTable)
        table.clear()
        for _, task in self._rows:
            if task.completed:
                check = Text("●", style="green")
                content = Text(task.content, style="dim")
            else:
                check = Text("○", style="dim")
                content = Text(task.content)
            table.add_row(
                check,
                Text(time_cell(task.start_time), style="cyan" if task.start_time else "dim"),
                Text(time_cell(task.end_time), style="magenta" if task.end_time else "dim"),
                content,
            )
        if self._rows:
            table.move_cursor(row=self.selected)

    def _refresh_overdue(self) -> None:
        items = overdue(self.store, date.today())
        self.query_one("#overdue-title", Label).update(overdue_title(len(items)))
        self.query_one("#overdue-list", Static).update(
            "\n".join(overdue_lines(items, self.overdue_limit))
        )
        pane = self.query_one("#overdue-pane")
        if items:
            pane.add_class("has-overdue")
        else:
            pane.remove_class("has-overdue")

    def _persist(self) -> None:
        if not save_store(self.store, self.data_file):
            self.notify(
                "State may not have been saved.",
                title="Save failed", severity="warning",
            )

    def _selected_index(self) -> int | None:
        """Store index of the highlighted row, if any."""
        if 0 <= self.selected < len(self._rows):
            return self._rows[self.selected][0]
        return None

    # ── Task actions ───────────────────────────────────────────

    def action_next_task(self) -> None:
        self.selected = step_selection(self.selected, len(self._rows), 1)
        self._refresh_table()

    def action_prev_task(self) -> None:
        self.selected = step_selection(self.selected, len(self._rows), -1)
        self._refresh_table()

    def action_next_day(self) -> None:
        try:
            self.current_date += timedelta(days=1)
        except OverflowError:
            return
        self.selected = 0
        self._refresh()

    def action_prev_day(self) -> None:
        try:
            self.current_date -= timedelta(days=1)
        except OverflowError:
            return
        self.selected = 0
        self._refresh()

    def action_toggle_task(self) -> None:
        index = self._selected_index()
        if index is not None and toggle(self.store, index):
            self._persist()
            self._refresh()

    def action_delete_task(self) -> None:
        index = self._selected_index()
        if index is None or not delete(self.store, index):
            return
        self._persist()
        self._rows = current_tasks(self.store, self.current_date)
        self.selected = clamp_selection(self.selected, len(self._rows))
        self._refresh()

    def action_new_task(self) -> None:
        self._editing = None
        self._enter_input("", "", "")

    def action_edit_task(self) -> None:
        index = self._selected_index()
        if index is None:
            return
        task = self.store.tasks[index]
        self._editing = index
        self._enter_input(task.content, format_time(task.start_time), format_time(task.end_time))

    # ── Add / edit bar ─────────────────────────────────────────

    def _inputs(self) -> list[Input]:
        return [
            self.query_one("#task-input", Input),
            self.query_one("#start-input", Input),
            self.query_one("#end-input", Input),
        ]

    def _enter_input(self, content: str, start: str, end: str) -> None:
        self._input_mode = True
        self._field = 0
        for widget, value in zip(self._inputs(), (content, start, end)):
            widget.value = value
        bar = self.query_one("#input-bar")
        bar.border_title = "✏️  EDIT MODE" if self._editing is not None else "➕ ADD MODE"
        bar.display = True
        self._inputs()[0].focus()
        self.refresh_bindings()

    def _exit_input(self) -> None:
        self._input_mode = False
        self._editing = None
        self._field = 0
        for widget in self._inputs():
            widget.value = ""
        self.query_one("#input-bar").display = False
        self.set_focus(None)
        self.refresh_bindings()

    @on(Input.Submitted)
    def _on_input_submitted(self, event: Input.Submitted) -> None:
        content, start, end = (w.value for w in self._inputs())
        _, errors = upsert(self.store, self._editing, content, self.current_date, start, end)
        if errors:
            logger.debug("Task not saved: %s", "; ".join(errors))
        else:
            self._persist()
        self._exit_input()
        self._refresh()

    def action_cancel_input(self) -> None:
        if self._input_mode:
            self._exit_input()

    # ── View switching / notes ─────────────────────────────────

    def action_tab(self) -> None:
        if self._input_mode:
            self._field = (self._field + 1) % 3
            self._inputs()[self._field].focus()
            return
        self.view_mode = "notes" if self.view_mode == "tasks" else "tasks"
        self.selected = 0
        table = self.query_one("#tasks-table", DataTable)
        editor = self.query_one("#notes-editor", NotesEditor)
        notes_view = self.view_mode == "notes"
        table.display = not notes_view
        editor.display = notes_view
        self.query_one("#pane-title", Label).update("Notes" if notes_view else "Scheduled Tasks")
        if notes_view:
            editor.focus()
        else:
            self.set_focus(None)
        self._refresh()

    def action_save_notes(self) -> None:
        self._save_notes()
        self.notify("Notes saved.", title="Notes")

    def _save_notes(self) -> None:
        editor = self.query_one("#notes-editor", NotesEditor)
        self.store.notes = self.notes.text
        editor.dirty = False
        self._persist()

    def action_quit_app(self) -> None:
        self.action_force_quit()

    def action_force_quit(self) -> None:
        # Final save of unsaved notes before exit
        if self.query_one("#notes-editor", NotesEditor).dirty:
            self._save_notes()
        self.exit()


# ── Entry point ────────────────────────────────────────────────


def main() -> None:
    settings = load_settings()
    try:
        log_file = setup_logging(settings.log_dir, settings.log_level)
    except OSError as e:
        print(f"Cannot open log directory {settings.log_dir}: {e}")
        print("Set KEEP_LOG_DIR or log_dir in the config file.")
        sys.exit(1)

    path = data_path(settings)
    logger.info("Starting Keep (data=%s, log=%s)", path, log_file)
    app = KeepApp(load_store(path), path, overdue_limit=settings.overdue_limit)
    app.run()


if __name__ == "__main__":
    main()
