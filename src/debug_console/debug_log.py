import time

from debug_console.types import KeyEvent, ts_str


class DebugLogger:
    """Manages optional debug log files for key events and the command session."""

    def __init__(self, key_log: str = "console_keys.log",
                 session_log: str = "console_session.log"):
        self.enabled = False
        self.key_log = key_log
        self.session_log = session_log
        self._key_fh = None
        self._session_fh = None

    def start(self):
        self._key_fh = open(self.key_log, "a", encoding="utf-8")
        self._session_fh = open(self.session_log, "a", encoding="utf-8")
        self.enabled = True
        sep = f"\n{'='*60}\n  Session started: {time.strftime('%Y-%m-%d %H:%M:%S')}\n{'='*60}\n"
        for fh in (self._key_fh, self._session_fh):
            fh.write(sep)
            fh.flush()

    def stop(self):
        self.enabled = False
        for fh in (self._key_fh, self._session_fh):
            if fh:
                try:
                    fh.close()
                except Exception:
                    pass
        self._key_fh = self._session_fh = None

    def log_key(self, ev: KeyEvent):
        if not self.enabled or not self._key_fh:
            return
        self._key_fh.write(f"{ts_str(time.time())} | {ev.describe()}\n")
        self._key_fh.flush()

    def log_note(self, text: str):
        """Free-form diagnostic line in the key log (desyncs, dropped keys)."""
        if not self.enabled or not self._key_fh:
            return
        self._key_fh.write(f"{ts_str(time.time())} | NOTE | {text}\n")
        self._key_fh.flush()

    def log_session(self, line: str, response: str):
        if not self.enabled or not self._session_fh:
            return
        ts = ts_str(time.time())
        self._session_fh.write(f"{ts} > {line}\n")
        for out in response.split("\n"):
            self._session_fh.write(f"{ts} < {out}\n")
        self._session_fh.flush()
