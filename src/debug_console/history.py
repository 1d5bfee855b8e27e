class CommandHistory:
    """Append-only log of submitted lines with a single browse cursor.

    The cursor ranges over ``[0, len(entries)]``; ``len(entries)`` means
    "not browsing" (at-top). Browsing never mutates the entries.
    """

    def __init__(self):
        self._entries: list[str] = []
        self._cursor = 0

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._entries)

    def add_command(self, line: str):
        """Append a line and return to at-top."""
        self._entries.append(line)
        self.reset()

    def reset(self):
        """Stop browsing without touching the entries."""
        self._cursor = len(self._entries)

    def at_top(self) -> bool:
        return self._cursor == len(self._entries)

    def prev(self) -> str | None:
        """Step to an older entry.

        Returns None once the oldest entry has been reached. The cursor is
        floored at 0 so repeated calls at the oldest entry are harmless and
        ``next()`` still walks forward from there.
        """
        if self._cursor <= 0:
            return None
        self._cursor -= 1
        return self._entries[self._cursor]

    def next(self) -> str | None:
        """Step to a newer entry. Returns None when at (or back at) top."""
        if self.at_top():
            return None
        self._cursor += 1
        if self.at_top():
            return None
        return self._entries[self._cursor]
