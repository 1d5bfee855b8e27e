from __future__ import annotations

import curses
from typing import Protocol

from debug_console.constants import (
    CR,
    CTRL_A,
    CTRL_E,
    CTRL_H,
    CTRL_L,
    CTRL_U,
    DEL,
    LF,
    PRINTABLE_MAX,
    PRINTABLE_MIN,
)
from debug_console.position import Position
from debug_console.types import KeyEvent, KeyKind


class TerminalSurface(Protocol):
    """Everything the editor needs from the screen.

    Writes advance the cursor and wrap at the right margin; positions are
    (column, row) with (0, 0) at the top-left.
    """

    def max_columns(self) -> int: ...

    def max_rows(self) -> int: ...

    def cursor(self) -> Position: ...

    def move(self, pos: Position) -> None: ...

    def write(self, text: str) -> None: ...

    def delete_char(self) -> None: ...

    def delete_row(self) -> None: ...

    def set_scroll_region(self, top: int, rows: int) -> None: ...

    def resize(self) -> None: ...

    def read_event(self) -> KeyEvent: ...


_KEY_CODES = {
    LF: KeyKind.ENTER,
    CR: KeyKind.ENTER,
    curses.KEY_ENTER: KeyKind.ENTER,
    DEL: KeyKind.BACKSPACE,
    CTRL_H: KeyKind.BACKSPACE,
    curses.KEY_BACKSPACE: KeyKind.BACKSPACE,
    CTRL_U: KeyKind.KILL_TO_START,
    CTRL_L: KeyKind.CLEAR_LINE,
    CTRL_A: KeyKind.MOVE_TO_START,
    CTRL_E: KeyKind.MOVE_TO_END,
    curses.KEY_RESIZE: KeyKind.RESIZE,
    curses.KEY_UP: KeyKind.UP,
    curses.KEY_DOWN: KeyKind.DOWN,
    curses.KEY_LEFT: KeyKind.LEFT,
    curses.KEY_RIGHT: KeyKind.RIGHT,
}


def decode_key(ch: int) -> KeyEvent:
    """Translate a getch() code into a logical key event."""
    kind = _KEY_CODES.get(ch)
    if kind is not None:
        return KeyEvent(kind, code=ch)
    if PRINTABLE_MIN <= ch <= PRINTABLE_MAX:
        return KeyEvent.char(chr(ch))
    return KeyEvent(KeyKind.UNKNOWN, code=ch)


class CursesTerminal:
    """TerminalSurface over a curses window (normally stdscr)."""

    def __init__(self, window):
        self.window = window
        curses.noecho()
        curses.curs_set(1)
        self.window.keypad(True)
        self.window.scrollok(True)
        self.window.timeout(-1)  # block in getch()
        self.set_scroll_region(0, self.max_rows())

    def max_columns(self) -> int:
        return self.window.getmaxyx()[1]

    def max_rows(self) -> int:
        return self.window.getmaxyx()[0]

    def cursor(self) -> Position:
        y, x = self.window.getyx()
        return Position(x, y)

    def move(self, pos: Position):
        try:
            self.window.move(pos.row, pos.column)
        except curses.error:
            pass

    def write(self, text: str):
        try:
            self.window.addstr(text)
        except curses.error:
            pass

    def delete_char(self):
        try:
            self.window.delch()
        except curses.error:
            pass

    def delete_row(self):
        try:
            self.window.deleteln()
        except curses.error:
            pass

    def set_scroll_region(self, top: int, rows: int):
        # curses takes an inclusive bottom margin
        try:
            self.window.setscrreg(top, max(top, rows - 1))
        except curses.error:
            pass

    def resize(self):
        curses.update_lines_cols()

    def read_event(self) -> KeyEvent:
        self.window.refresh()
        ch = self.window.getch()
        return decode_key(ch)
