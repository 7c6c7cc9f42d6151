"""Tests for logging setup."""

import io
import logging

import pytest

from ytframes.core.logging import QUIET_LOGGERS, setup_logging


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    quiet = {name: logging.getLogger(name).level for name in QUIET_LOGGERS}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, lvl in quiet.items():
        logging.getLogger(name).setLevel(lvl)


class TestSetupLogging:
    def test_format_and_level(self):
        stream = io.StringIO()
        setup_logging("warning", stream=stream)

        log = logging.getLogger("ytframes.test")
        log.info("hidden")
        log.warning("shown")

        output = stream.getvalue()
        assert "hidden" not in output
        assert "| WARNING  | ytframes.test | shown" in output

    def test_second_call_replaces_handler(self):
        first, second = io.StringIO(), io.StringIO()
        setup_logging("INFO", stream=first)
        setup_logging("INFO", stream=second)

        logging.getLogger("ytframes.test").info("once")
        assert first.getvalue() == ""
        assert "once" in second.getvalue()

    def test_http_loggers_quiet_unless_debug(self):
        setup_logging("INFO", stream=io.StringIO())
        assert logging.getLogger("urllib3").level == logging.WARNING

        setup_logging("DEBUG", stream=io.StringIO())
        assert logging.getLogger("urllib3").level == logging.DEBUG

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="unknown log level"):
            setup_logging("loud")
