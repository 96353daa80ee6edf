"""Tests for cli/keep_tui.py: key bindings of the tasks view."""

from cli.keep_tui import KeepApp


def _actions_for(key):
    return {b.action for b in KeepApp.BINDINGS if b.key == key}


def test_vim_keys_navigate_tasks_and_days():
    assert _actions_for("k") == {"prev_task"}
    assert _actions_for("j") == {"next_task"}
    assert _actions_for("h") == {"prev_day"}
    assert _actions_for("l") == {"next_day"}


def test_vim_keys_are_task_view_only():
    for action in ("prev_task", "next_task", "prev_day", "next_day"):
        assert action in KeepApp.TASK_ACTIONS
