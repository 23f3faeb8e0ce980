import logging
import sys

from passguard.config import logging_config
from passguard.config.logging_config import log_uncaught_exceptions, setup_logging, timestamp


def test_timestamp_is_iso8601():
    assert "T" in timestamp()


def test_uncaught_exceptions_are_logged(caplog, capsys):
    try:
        raise ValueError("boom")
    except ValueError as e:
        exc = e

    with caplog.at_level(logging.ERROR):
        log_uncaught_exceptions(ValueError, exc, exc.__traceback__)

    assert "Uncaught exception: ValueError: boom" in caplog.text
    assert "test_logging_config.py" in caplog.text
    assert "Something went wrong" in capsys.readouterr().err


def test_uncaught_exception_without_traceback(caplog):
    with caplog.at_level(logging.ERROR):
        log_uncaught_exceptions(RuntimeError, RuntimeError("x"), None)
    assert "<no traceback>" in caplog.text


def test_crash_message_names_configured_log_file(monkeypatch, tmp_path, capsys):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    monkeypatch.setattr(logging_config, "_log_file", logging_config._log_file)
    log_file = tmp_path / "crash.log"

    setup_logging(log_file=str(log_file))
    try:
        assert sys.excepthook is log_uncaught_exceptions
        log_uncaught_exceptions(RuntimeError, RuntimeError("x"), None)
    finally:
        for handler in root.handlers:
            handler.close()

    assert f"Details saved to {log_file}" in capsys.readouterr().err
    assert "RuntimeError: x" in log_file.read_text()
