# Area: Shared Tests
"""Tests for mathroll.errors and structured logging."""

import json
import logging
import sys

import pytest

from mathroll._shared.logging_config import JSONFormatter, log_rejected_action, setup_logging
from mathroll.errors import InvalidActionError, MathRollError, RosterError


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    pkg_logger = logging.getLogger("mathroll")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    pkg_logger.setLevel(logging.NOTSET)
    pkg_logger.propagate = True


class TestErrors:
    """Tests for the exception hierarchy."""

    def test_hierarchy(self):
        assert issubclass(InvalidActionError, MathRollError)
        assert issubclass(RosterError, MathRollError)

    def test_invalid_action_message(self):
        error = InvalidActionError("claim", "p1", "unknown equation 42")
        assert str(error) == "Invalid action 'claim' from p1: unknown equation 42"

    def test_format_error_log(self):
        error = InvalidActionError("claim", "p1", "not your turn", payload={"equation_id": 3})
        block = error.format_error_log()
        assert "ACTION REJECTED" in block
        assert "INVALID_ACTION" in block
        assert '"equation_id": 3' in block


class TestLogging:
    """Tests for setup_logging and log_rejected_action."""

    def test_json_file_output(self, tmp_path):
        log_path = tmp_path / "logs" / "match.log"
        setup_logging(log_file_path=str(log_path), level="DEBUG")
        logging.getLogger("mathroll.test").info("hello %s", "world")
        for handler in logging.getLogger("mathroll").handlers:
            handler.flush()

        record = json.loads(log_path.read_text(encoding="utf-8").strip().splitlines()[-1])
        assert record["message"] == "hello world"
        assert record["logger"] == "mathroll.test"
        assert record["level"] == "INFO"

    def test_setup_replaces_handlers(self, tmp_path):
        setup_logging(log_file_path=str(tmp_path / "a.log"))
        setup_logging(log_file_path=None)
        handlers = logging.getLogger("mathroll").handlers
        assert len(handlers) == 1
        assert logging.getLogger("mathroll").propagate is False

    def test_json_formatter_includes_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord("mathroll", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())
        data = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in data["exception"]

    def test_log_rejected_action(self, capsys):
        setup_logging(log_file_path=None)
        log_rejected_action(InvalidActionError("roll", "p2", "not your turn"))
        assert "ACTION REJECTED" in capsys.readouterr().err

    def test_rejected_action_context_in_json_file(self, tmp_path, capsys):
        log_path = tmp_path / "match.log"
        setup_logging(log_file_path=str(log_path))
        log_rejected_action(InvalidActionError("claim", "p3", "equation 9 already claimed"))
        for handler in logging.getLogger("mathroll").handlers:
            handler.flush()

        record = json.loads(log_path.read_text(encoding="utf-8").strip().splitlines()[-1])
        assert record["level"] == "ERROR"
        assert record["action"] == "claim"
        assert record["player_id"] == "p3"
        assert record["reason"] == "equation 9 already claimed"

    def test_json_formatter_omits_absent_context(self):
        record = logging.LogRecord("mathroll", logging.INFO, __file__, 1, "plain", None, None)
        data = json.loads(JSONFormatter().format(record))
        assert "player_id" not in data
        assert "reason" not in data
