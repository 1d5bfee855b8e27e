"""Shared fixtures: an in-memory terminal that wraps and scrolls like curses."""

from __future__ import annotations

import pytest

from debug_console.editor import LineEditor
from debug_console.history import CommandHistory
from debug_console.position import Position
from debug_console.types import KeyEvent


class FakeTerminal:
    """Character grid with a cursor, scrollok on, and scripted key events."""

    def __init__(self, columns: int = 80, rows: int = 24, events=None):
        self.columns = columns
        self.rows = rows
        self.grid = [[" "] * columns for _ in range(rows)]
        self.col = 0
        self.row = 0
        self.events = list(events or [])
        self.scroll_region = None
        self.resized = 0

    # --- TerminalSurface ---

    def max_columns(self) -> int:
        return self.columns

    def max_rows(self) -> int:
        return self.rows

    def cursor(self) -> Position:
        return Position(self.col, self.row)

    def move(self, pos: Position):
        assert 0 <= pos.column < self.columns, pos
        assert 0 <= pos.row < self.rows, pos
        self.col, self.row = pos.column, pos.row

    def _newline(self):
        self.col = 0
        self.row += 1
        if self.row == self.rows:
            self.grid.pop(0)
            self.grid.append([" "] * self.columns)
            self.row = self.rows - 1

    def write(self, text: str):
        for ch in text:
            if ch == "\n":
                # curses clears to end of line before moving down
                for c in range(self.col, self.columns):
                    self.grid[self.row][c] = " "
                self._newline()
                continue
            self.grid[self.row][self.col] = ch
            self.col += 1
            if self.col == self.columns:
                self._newline()

    def delete_char(self):
        line = self.grid[self.row]
        del line[self.col]
        line.append(" ")

    def delete_row(self):
        del self.grid[self.row]
        self.grid.append([" "] * self.columns)

    def set_scroll_region(self, top: int, rows: int):
        self.scroll_region = (top, rows)

    def resize(self):
        self.resized += 1

    def read_event(self) -> KeyEvent:
        if not self.events:
            raise KeyboardInterrupt
        return self.events.pop(0)

    # --- Inspection helpers ---

    def row_text(self, row: int) -> str:
        return "".join(self.grid[row]).rstrip()

    def screen_text(self) -> str:
        """All rows joined as they would wrap, trailing blanks removed."""
        return "\n".join(self.row_text(r) for r in range(self.rows)).rstrip("\n")


@pytest.fixture
def term():
    return FakeTerminal()


@pytest.fixture
def narrow_term():
    # 10 columns with a 3-wide prompt leaves 7 cells on the first row
    return FakeTerminal(columns=10, rows=6)


@pytest.fixture
def make_editor():
    def _make(term, prompt="debug> ", history=None):
        ed = LineEditor(term, history if history is not None else CommandHistory(), prompt)
        ed.begin_line()
        return ed

    return _make


@pytest.fixture
def fake_terminal_cls():
    return FakeTerminal
