import time
from dataclasses import dataclass
from enum import Enum, auto


class KeyKind(Enum):
    CHAR = auto()
    ENTER = auto()
    BACKSPACE = auto()
    KILL_TO_START = auto()
    CLEAR_LINE = auto()
    MOVE_TO_START = auto()
    MOVE_TO_END = auto()
    RESIZE = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class KeyEvent:
    kind: KeyKind
    text: str = ""  # the character for CHAR events
    code: int = -1  # raw key code, kept for logging

    @classmethod
    def char(cls, ch: str) -> "KeyEvent":
        return cls(KeyKind.CHAR, text=ch, code=ord(ch))

    def describe(self) -> str:
        if self.kind == KeyKind.CHAR:
            return f"CHAR {self.text!r}"
        if self.kind == KeyKind.UNKNOWN:
            return f"UNKNOWN code={self.code}"
        return self.kind.name


def ts_str(t: float) -> str:
    lt = time.localtime(t)
    return time.strftime("%H:%M:%S", lt)
