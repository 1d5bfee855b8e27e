from __future__ import annotations

from typing import TYPE_CHECKING

from debug_console.constants import DEFAULT_PROMPT
from debug_console.debug_log import DebugLogger
from debug_console.editor import LineEditor
from debug_console.evaluators import Evaluator, get_evaluator
from debug_console.history import CommandHistory
from debug_console.terminal import CursesTerminal
from debug_console.types import KeyEvent, KeyKind

if TYPE_CHECKING:
    from debug_console.config import Config
    from debug_console.terminal import TerminalSurface


class Console:
    """Input loop: reads key events, edits the line, answers each commit."""

    def __init__(self, term: "TerminalSurface", evaluator: Evaluator,
                 prompt: str = DEFAULT_PROMPT, history: CommandHistory | None = None,
                 logger: DebugLogger | None = None):
        self.term = term
        self.evaluator = evaluator
        self.history = history if history is not None else CommandHistory()
        self.editor = LineEditor(term, self.history, prompt)
        self.logger = logger if logger is not None else DebugLogger()

    def handle_event(self, ev: KeyEvent) -> str | None:
        # Returns the committed line on Enter, otherwise None
        self.logger.log_key(ev)
        ed = self.editor

        if ev.kind == KeyKind.ENTER:
            return ed.commit()

        if ev.kind == KeyKind.CHAR:
            ed.insert(ev.text)
        elif ev.kind == KeyKind.BACKSPACE:
            ed.backspace()
        elif ev.kind == KeyKind.KILL_TO_START:
            ed.clear_to_start()
        elif ev.kind == KeyKind.CLEAR_LINE:
            ed.clear_line()
        elif ev.kind == KeyKind.MOVE_TO_START:
            ed.move_to_start()
        elif ev.kind == KeyKind.MOVE_TO_END:
            ed.move_to_end()
        elif ev.kind == KeyKind.LEFT:
            ed.move_left()
        elif ev.kind == KeyKind.RIGHT:
            ed.move_right()
        elif ev.kind == KeyKind.UP:
            ed.history_prev()
        elif ev.kind == KeyKind.DOWN:
            ed.history_next()
        elif ev.kind == KeyKind.RESIZE:
            ed.on_resize()
        else:
            self.logger.log_note(f"dropped key code {ev.code}")
            return None

        if not ed.caret_in_sync():
            self.logger.log_note(
                f"caret desync: offset {ed.cursor_offset} expected at "
                f"{ed.position_of(ed.cursor_offset)}, terminal at {self.term.cursor()}"
            )
        return None

    def read_line(self) -> str:
        """Block until a line is committed and return it."""
        self.editor.begin_line()
        while True:
            line = self.handle_event(self.term.read_event())
            if line is not None:
                return line

    def respond(self, line: str) -> str:
        """Evaluate a committed line and echo the response."""
        response = self.evaluator(line)
        self.term.write(f"{response}\n")
        self.logger.log_session(line, response)
        return response

    def run(self):
        """Serve lines until Ctrl+C."""
        try:
            while True:
                self.respond(self.read_line())
        except KeyboardInterrupt:
            return
        finally:
            self.logger.stop()


def run_console(stdscr, config: "Config", debug: bool = False):
    logger = DebugLogger(key_log=config.debug.key_log, session_log=config.debug.session_log)
    if debug:
        logger.start()
    console = Console(
        CursesTerminal(stdscr),
        get_evaluator(config.evaluator.name),
        prompt=config.editor.prompt,
        logger=logger,
    )
    console.run()
