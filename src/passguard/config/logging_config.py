import logging
import os
import sys
import traceback
import pendulum

from passguard.config.config_passguard import LOG_FILE, LOG_LEVEL

# Path named in the crash message, set by setup_logging
_log_file = LOG_FILE


def setup_logging(log_file: str = LOG_FILE, level: str = LOG_LEVEL) -> None:
    """
    Configure the root logger and install the uncaught exception hook.

    Does nothing if the root logger already has handlers, so it is safe
    to call more than once.

    Args:
        log_file: File that log records are appended to.
        level: Name of the minimum level to record (e.g. "ERROR").
    """
    global _log_file
    if logging.getLogger().handlers:
        return  # already configured

    logging.basicConfig(
        filename=log_file,
        filemode="a",
        level=getattr(logging, level.upper(), logging.ERROR),
        format="%(message)s",
    )

    _log_file = str(log_file)
    sys.excepthook = log_uncaught_exceptions


def timestamp() -> str:
    """Current local time as an ISO 8601 string for log messages."""
    return pendulum.now().to_iso8601_string()


def log_uncaught_exceptions(exctype, value, tb):
    now = timestamp()

    lines = []
    for frame in traceback.extract_tb(tb):
        filename = os.path.basename(frame.filename)
        lines.append(
            f'  File "{filename}", line {frame.lineno}, in {frame.name}'
        )

    trace_summary = "\n".join(reversed(lines)) if lines else "  <no traceback>"
    error_msg = f"{exctype.__name__}: {value}"

    logging.error(
        f"[{now}] Uncaught exception: {error_msg}\n"
        f"Traceback (most recent call last):\n"
        f"{trace_summary}\n"
        f"{error_msg}\n"
    )

    print("\nError! Something went wrong.", file=sys.stderr)
    print(f"Details saved to {_log_file}\n", file=sys.stderr)
