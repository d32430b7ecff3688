"""
Tests for logging setup.
"""

import logging

import pytest

from devenv.core.observability.logging_config import (
    LOG_LEVEL_ENV_VAR,
    ClickEchoHandler,
    _parse_level,
    resolve_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _restore(restore_logging):
    yield restore_logging


def _devenv_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if getattr(h, "_devenv", False)]


class TestParseLevel:
    def test_names(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("INFO") == logging.INFO

    def test_fallback(self):
        assert _parse_level(None) == logging.WARNING
        assert _parse_level("") == logging.WARNING
        assert _parse_level("loud") == logging.WARNING


class TestResolveLevel:
    def test_flag_precedence(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "ERROR")
        assert resolve_level(debug=True, verbose=True, quiet=True) == "DEBUG"
        assert resolve_level(verbose=True, quiet=True) == "INFO"
        assert resolve_level(quiet=True) == "ERROR"

    def test_env_then_default(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "INFO")
        assert resolve_level() == "INFO"
        monkeypatch.delenv(LOG_LEVEL_ENV_VAR)
        assert resolve_level() == "WARNING"


class TestSetupLogging:
    def test_console_only(self):
        setup_logging("INFO")
        handlers = _devenv_handlers()
        assert len(handlers) == 1
        assert isinstance(handlers[0], ClickEchoHandler)
        assert handlers[0].level == logging.INFO
        assert logging.getLogger().level == logging.INFO

    def test_replaces_own_handlers_only(self):
        root = logging.getLogger()
        foreign = logging.NullHandler()
        root.addHandler(foreign)
        setup_logging("INFO")
        setup_logging("ERROR")
        assert len(_devenv_handlers()) == 1
        assert foreign in root.handlers

    def test_warning_format_is_message_only(self):
        setup_logging("WARNING")
        assert _devenv_handlers()[0].formatter._fmt == "%(message)s"

    def test_console_goes_to_stderr(self, capsys):
        setup_logging("WARNING")
        logging.getLogger("devenv.test").warning("Unknown tool 'ghost' requested, skipping")
        captured = capsys.readouterr()
        assert "Unknown tool 'ghost' requested, skipping" in captured.err
        assert captured.out == ""

    def test_below_level_dropped(self, capsys):
        setup_logging("WARNING")
        logging.getLogger("devenv.test").info("install order: git")
        assert "install order" not in capsys.readouterr().err

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "devenv.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        assert len(_devenv_handlers()) == 2
        # root goes as low as the most verbose handler
        assert logging.getLogger().level == logging.DEBUG

        logging.getLogger("devenv.test").debug("resolved order: git")
        for handler in _devenv_handlers():
            handler.flush()
        assert "resolved order: git" in log_file.read_text()

    def test_file_level_defaults_to_console(self, tmp_path):
        setup_logging("ERROR", log_file=str(tmp_path / "x.log"))
        assert all(h.level == logging.ERROR for h in _devenv_handlers())
