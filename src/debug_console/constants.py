# Control characters delivered by getch() in raw/keypad mode
CTRL_A = 0x01  # move to start of line
CTRL_E = 0x05  # move to end of line
CTRL_H = 0x08  # backspace on some terminals
CTRL_L = 0x0C  # clear line / redraw
CTRL_U = 0x15  # kill to start of line
LF = 0x0A
CR = 0x0D
DEL = 0x7F  # backspace on most terminals

# Printable single-byte range accepted into the edit buffer
PRINTABLE_MIN = 0x20
PRINTABLE_MAX = 0x7E

DEFAULT_PROMPT = "debug> "


def is_printable(text: str) -> bool:
    """True if every character is in the printable single-byte range."""
    return all(PRINTABLE_MIN <= ord(c) <= PRINTABLE_MAX for c in text)
