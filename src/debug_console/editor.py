from __future__ import annotations

from typing import TYPE_CHECKING

from debug_console.constants import DEFAULT_PROMPT, is_printable
from debug_console.history import CommandHistory
from debug_console.position import (
    Position,
    end_position_of,
    origin_row_of,
    position_of,
    rows_spanned,
)

if TYPE_CHECKING:
    from debug_console.terminal import TerminalSurface


class EditorInvariantError(RuntimeError):
    """The edit buffer holds something the insertion rules never allow."""


class LineEditor:
    """Single-line editor drawing onto a TerminalSurface.

    Owns the edit buffer (ASCII bytes) and the caret offset into it. Screen
    positions are never cached: the row of offset 0 is re-derived from the
    terminal's current cursor row and the caret offset whenever it is
    needed, so scrolling cannot desynchronise the two.
    """

    def __init__(self, term: "TerminalSurface", history: CommandHistory | None = None,
                 prompt: str = DEFAULT_PROMPT):
        if not prompt or not is_printable(prompt):
            raise ValueError(f"prompt must be non-empty printable ASCII, got {prompt!r}")
        self.term = term
        self.history = history if history is not None else CommandHistory()
        self.prompt = prompt
        self._buf = bytearray()
        self._offset = 0

    @property
    def buffer(self) -> bytes:
        return bytes(self._buf)

    @property
    def text(self) -> str:
        return self._buf.decode("ascii")

    @property
    def cursor_offset(self) -> int:
        return self._offset

    @property
    def prompt_width(self) -> int:
        return len(self.prompt)

    # --- Geometry ---

    def _origin_row(self) -> int:
        return origin_row_of(
            self.term.cursor().row, self._offset, self.term.max_columns(), self.prompt_width
        )

    def position_of(self, offset: int) -> Position:
        """Screen position of ``offset`` in the line currently on screen."""
        return position_of(offset, self.term.max_columns(), self.prompt_width, self._origin_row())

    def line_start_position(self) -> Position:
        return self.position_of(0)

    def line_end_position(self) -> Position:
        return end_position_of(
            len(self._buf), self.term.max_columns(), self.prompt_width, self._origin_row()
        )

    def caret_in_sync(self) -> bool:
        """True if the terminal cursor column matches the caret offset.

        The origin row is derived from the cursor row itself, so only the
        column is checked here; a caret on the wrong row goes unnoticed.
        """
        return self.position_of(self._offset) == self.term.cursor()

    # --- Line lifecycle ---

    def begin_line(self):
        """Print the prompt and start an empty line at the cursor."""
        self._buf.clear()
        self._offset = 0
        self.term.write(self.prompt)

    def clear_line(self):
        """Erase every row of the current line and reprint the prompt."""
        width = self.term.max_columns()
        last_row = self.term.max_rows() - 1
        start_row = self._origin_row()
        end_row = start_row + rows_spanned(len(self._buf), width, self.prompt_width) - 1
        start_row = min(max(start_row, 0), last_row)
        end_row = min(max(end_row, 0), last_row)
        # Bottom-up so deleting a row never shifts one we still have to visit
        for row in range(end_row, start_row - 1, -1):
            self.term.move(Position(0, row))
            self.term.delete_row()
        self.term.move(Position(0, start_row))
        self._buf.clear()
        self._offset = 0
        self.term.write(self.prompt)

    def _redraw(self, data: bytes, caret: int):
        """Replace the line on screen with ``data`` and park the caret at ``caret``."""
        self.clear_line()
        self._buf.extend(data)
        self._offset = len(self._buf)
        self.term.write(self._buf.decode("ascii"))
        self._move_caret(caret)

    def _move_caret(self, offset: int):
        self.term.move(self.position_of(offset))
        self._offset = offset

    # --- Editing ---

    def insert(self, text: str):
        """Insert printable ASCII text at the caret."""
        if not text:
            return
        if not is_printable(text):
            raise ValueError(f"only printable ASCII can be inserted, got {text!r}")
        data = text.encode("ascii")
        if self._offset == len(self._buf):
            self._buf.extend(data)
            self._offset += len(data)
            self.term.write(text)
            return
        # Mid-line: the tail shifts right, so the whole line is redrawn
        spliced = self._buf[: self._offset] + data + self._buf[self._offset :]
        self._redraw(bytes(spliced), self._offset + len(data))

    def backspace(self):
        """Delete the byte before the caret."""
        if self._offset == 0:
            return
        if self._offset == len(self._buf):
            self.move_left()
            self.term.delete_char()
            self._buf.pop()
            return
        self.move_left()
        remaining = self._buf[: self._offset] + self._buf[self._offset + 1 :]
        self._redraw(bytes(remaining), self._offset)

    def clear_to_start(self):
        """Drop everything before the caret (Ctrl+U)."""
        self._redraw(bytes(self._buf[self._offset :]), 0)

    # --- Caret movement ---

    def move_left(self):
        if self._offset == 0:
            return
        col, row = self.term.cursor()
        if col == 0:
            self.term.move(Position(self.term.max_columns() - 1, row - 1))
        else:
            self.term.move(Position(col - 1, row))
        self._offset -= 1

    def move_right(self):
        if self._offset == len(self._buf):
            return
        col, row = self.term.cursor()
        if col == self.term.max_columns() - 1:
            self.term.move(Position(0, row + 1))
        else:
            self.term.move(Position(col + 1, row))
        self._offset += 1

    def move_to_start(self):
        self._move_caret(0)

    def move_to_end(self):
        self._move_caret(len(self._buf))

    # --- History ---

    def _load(self, entry: str | None):
        if entry is None:
            self.clear_line()
        else:
            self._redraw(entry.encode("ascii"), len(entry))

    def history_prev(self):
        """Show the next older history entry.

        From at-top the current draft is saved as the newest entry first,
        and that saved draft is what the first press shows; older entries
        follow on later presses. Down walks back to the draft.
        """
        if self.history.at_top():
            self.history.add_command(self.text)
        self._load(self.history.prev())

    def history_next(self):
        """Show the next newer history entry, or an empty line at top."""
        self._load(self.history.next())

    # --- Submit / terminal events ---

    def commit(self) -> str:
        """Submit the line: echo it, record it, and return it."""
        try:
            line = self._buf.decode("ascii")
        except UnicodeDecodeError as e:
            raise EditorInvariantError(f"edit buffer is not ASCII: {bytes(self._buf)!r}") from e
        self.clear_line()
        self.term.write(line)
        # A line that exactly fills its last row has already wrapped
        if self.term.cursor().column != 0:
            self.term.write("\n")
        if line.strip():
            self.history.add_command(line)
        else:
            self.history.reset()
        self._buf.clear()
        self._offset = 0
        return line

    def on_resize(self):
        """Pick up the new terminal size; the buffer is left alone."""
        self.term.resize()
        self.term.set_scroll_region(0, self.term.max_rows())
