"""Custom logging utilities for the RegexLoops application."""
# src/regexloops/logging_utils.py

import logging
import sys
import time
from logging import FileHandler

from . import paths


class _UTCFormatter(logging.Formatter):
    """Formats timestamps in UTC with 6-digit microseconds and a 'Z' suffix."""

    def __init__(self, fmt: str) -> None:
        super().__init__(fmt=fmt, datefmt="%Y-%m-%dT%H:%M:%S")
        self.converter = time.gmtime

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Format the time with 6-digit microseconds and a 'Z' for UTC."""
        ct = self.converter(record.created)
        s = time.strftime(datefmt, ct) if datefmt else time.strftime(self.default_time_format, ct)
        microseconds = int((record.created - int(record.created)) * 1_000_000)
        return f"{s}.{microseconds:06d}Z"


# Console Log Formatter
class ConsoleFormatter(_UTCFormatter):
    """A formatter for console output to provide clean, user-friendly logs."""

    def __init__(self, version: str) -> None:
        """
        Initialize the formatter with the application version.

        Args:
            version: The RegexLoops application version.

        """
        super().__init__(f"%(asctime)s | RegexLoops - {version} | %(levelname)s | %(message)s")


# File Log Formatter
class FileFormatter(_UTCFormatter):
    """A detailed formatter for debug log files, aimed at developers."""

    def __init__(self) -> None:
        """Initialize the detailed file formatter."""
        super().__init__("%(asctime)s | %(name)-30s | %(funcName)-20s:%(lineno)-4d | %(levelname)-8s | %(message)s")


def setup_logging(version: str, *, debug: bool = False) -> None:
    """
    Configure the root logger for the RegexLoops application.

    Demonstration results own standard output, so all log records go to
    standard error:
    1.  Console: WARNING and above by default, DEBUG if debug=True.
    2.  File (DEBUG): Detailed logs written to '.regexloops/logs/debug.log'
        when debug=True.

    Args:
        version: The application version, included in console logs.
        debug: If True, enables detailed file logging and sets console level to DEBUG.

    """
    root_logger = logging.getLogger()
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    level = logging.DEBUG if debug else logging.WARNING
    root_logger.setLevel(level)

    # --- Console Handler ---
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(ConsoleFormatter(version))
    root_logger.addHandler(console_handler)

    if debug:
        try:
            log_dir = paths.get_log_dir()
            paths.ensure_dir_exists(log_dir)
            log_file_path = log_dir / "debug.log"

            # --- File Handler (DEBUG) ---
            file_handler = FileHandler(log_file_path, mode="w", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(FileFormatter())
            root_logger.addHandler(file_handler)

            logging.getLogger().info(
                "Debug mode enabled. Detailed logs will be written to %s",
                log_file_path,
            )
        except OSError:
            logging.getLogger().exception("Failed to create debug log file. Continuing with console logging only.")
