from debug_console.debug_log import DebugLogger
from debug_console.types import KeyEvent, KeyKind


def _logger(tmp_path):
    return DebugLogger(
        key_log=str(tmp_path / "keys.log"), session_log=str(tmp_path / "session.log")
    )


class TestDebugLogger:
    def test_disabled_by_default_writes_nothing(self, tmp_path):
        logger = _logger(tmp_path)
        logger.log_key(KeyEvent.char("a"))
        logger.log_session("a", "b")
        assert not (tmp_path / "keys.log").exists()
        assert not (tmp_path / "session.log").exists()

    def test_start_writes_session_header(self, tmp_path):
        logger = _logger(tmp_path)
        logger.start()
        logger.stop()
        assert "Session started" in (tmp_path / "keys.log").read_text()
        assert "Session started" in (tmp_path / "session.log").read_text()

    def test_key_lines(self, tmp_path):
        logger = _logger(tmp_path)
        logger.start()
        logger.log_key(KeyEvent.char("x"))
        logger.log_key(KeyEvent(KeyKind.UP))
        logger.log_key(KeyEvent(KeyKind.UNKNOWN, code=9))
        logger.log_note("caret desync")
        logger.stop()
        text = (tmp_path / "keys.log").read_text()
        assert "| CHAR 'x'" in text
        assert "| UP" in text
        assert "| UNKNOWN code=9" in text
        assert "| NOTE | caret desync" in text

    def test_multiline_response(self, tmp_path):
        logger = _logger(tmp_path)
        logger.start()
        logger.log_session("cmd", "one\ntwo")
        logger.stop()
        text = (tmp_path / "session.log").read_text()
        assert "> cmd" in text
        assert "< one" in text
        assert "< two" in text

    def test_calls_after_stop_are_noops(self, tmp_path):
        logger = _logger(tmp_path)
        logger.start()
        logger.stop()
        logger.log_key(KeyEvent.char("a"))
        logger.stop()
        assert not logger.enabled
