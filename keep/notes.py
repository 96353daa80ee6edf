"""Cursor editing over the flat note text.

The buffer is a single string; lines are derived from '\\n' on demand.
The cursor is a code-point offset kept within [0, len(text)].
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class NoteBuffer:
    text: str = ""
    cursor: int | None = None

    def __post_init__(self) -> None:
        # New buffers open with the cursor at the end of the text.
        if self.cursor is None:
            self.cursor = len(self.text)
        self._clamp()

    def _clamp(self) -> None:
        self.cursor = max(0, min(self.cursor, len(self.text)))

    # ── Line geometry ─────────────────────────────────────────

    def line_start(self, pos: int | None = None) -> int:
        """Offset just after the nearest newline before *pos*, or 0."""
        if pos is None:
            pos = self.cursor
        return self.text.rfind("\n", 0, pos) + 1

    def line_end(self, pos: int | None = None) -> int:
        """Offset of the next newline at or after *pos*, or len(text)."""
        if pos is None:
            pos = self.cursor
        nl = self.text.find("\n", pos)
        return len(self.text) if nl == -1 else nl

    def column(self) -> int:
        return self.cursor - self.line_start()

    def split(self) -> tuple[str, str]:
        """Text before and after the cursor."""
        return self.text[: self.cursor], self.text[self.cursor :]

    # ── Editing ───────────────────────────────────────────────

    def insert(self, ch: str) -> None:
        self.text = self.text[: self.cursor] + ch + self.text[self.cursor :]
        self.cursor += len(ch)
        self._clamp()

    def delete_backward(self) -> None:
        if self.cursor > 0:
            self.text = self.text[: self.cursor - 1] + self.text[self.cursor :]
            self.cursor -= 1
        self._clamp()

    def delete_forward(self) -> None:
        if self.cursor < len(self.text):
            self.text = self.text[: self.cursor] + self.text[self.cursor + 1 :]
        self._clamp()

    # ── Motion ────────────────────────────────────────────────

    def move_left(self) -> None:
        self.cursor -= 1
        self._clamp()

    def move_right(self) -> None:
        self.cursor += 1
        self._clamp()

    def move_up(self) -> None:
        """Same column on the previous line, clamped to its length.

        With no line above, the cursor goes to the start of its line.
        """
        start = self.line_start()
        if start == 0:
            self.cursor = start
            return
        col = self.cursor - start
        prev_newline = start - 1
        prev_start = self.line_start(prev_newline)
        self.cursor = prev_start + min(col, prev_newline - prev_start)
        self._clamp()

    def move_down(self) -> None:
        """Same column on the next line, clamped to its length.

        A trailing newline does not open a line to move onto.
        """
        nl = self.text.find("\n", self.cursor)
        if nl == -1:
            return
        col = self.column()
        next_start = nl + 1
        if next_start >= len(self.text):
            return
        next_len = self.line_end(next_start) - next_start
        self.cursor = next_start + min(col, next_len)
        self._clamp()

    def move_home(self) -> None:
        self.cursor = self.line_start()

    def move_end(self) -> None:
        self.cursor = self.line_end()
