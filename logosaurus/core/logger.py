"""
Main Logger class - synchronous header-formatting logger

A Logger writes one line per record to its output: a header built from
the format flags, the message, and a newline unless the message already
ends with one. It can be used from multiple threads at once; writes are
serialized so lines never interleave.
"""

from __future__ import annotations

import sys
import threading
from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

from logosaurus.core.flags import Flag
from logosaurus.core.log_entry import LogEntry
from logosaurus.core.log_level import LogLevel
from logosaurus.core.logger_config import check_prefix, coerce_flags, coerce_level
from logosaurus.formatters.header_formatter import format_header

if TYPE_CHECKING:
    from logosaurus.core.logger_builder import LoggerBuilder


class Logger:
    """
    Header-formatting logger.

    State (level, output, flags, prefix) lives behind a single lock that
    is also held while writing, so a write never observes a half-applied
    configuration change.

    Use ``Logger.builder()`` to construct one, or ``Logger.default()``.
    """

    def __init__(
        self,
        output: Any = None,
        level: LogLevel = LogLevel.TRACE,
        flags: int = Flag.STD,
        prefix: str = "",
    ):
        """
        Initialize logger.

        Args:
            output: Destination with write(str) and flush() (default: stderr)
            level: Minimum severity that is written
            flags: Header format flags
            prefix: Text placed at the start of the header (or just before
                    the message with Flag.MSG_PREFIX)
        """
        if output is None:
            from logosaurus.writers.console_writer import ConsoleWriter
            output = ConsoleWriter()

        self._lock = threading.Lock()  # guards below fields and writes
        self._level = coerce_level(level)
        self._output = output
        self._flags = coerce_flags(flags)
        self._prefix = check_prefix(prefix)

    @classmethod
    def builder(cls) -> "LoggerBuilder":
        """Return a LoggerBuilder with default settings."""
        from logosaurus.core.logger_builder import LoggerBuilder
        return LoggerBuilder()

    @classmethod
    def default(cls) -> "Logger":
        """
        Create a default logger.

        A default logger has level TRACE, writes to stderr, uses
        Flag.STD and an empty prefix.
        """
        return cls()

    # Configuration

    def get_level(self) -> LogLevel:
        """Return the current threshold."""
        with self._lock:
            return self._level

    def set_level(self, level: LogLevel) -> None:
        """Set the threshold."""
        level = coerce_level(level)
        with self._lock:
            self._level = level

    def get_output(self) -> Any:
        """Return the destination where output is written."""
        with self._lock:
            return self._output

    def set_output(self, output: Any) -> None:
        """Set the destination where output is written."""
        if output is None:
            raise ValueError("output cannot be None")
        with self._lock:
            self._output = output

    def get_flags(self) -> Flag:
        """Return the current format flags."""
        with self._lock:
            return self._flags

    def set_flags(self, flags: int) -> None:
        """Set the format flags."""
        flags = coerce_flags(flags)
        with self._lock:
            self._flags = flags

    def get_prefix(self) -> str:
        """Return the current prefix."""
        with self._lock:
            return self._prefix

    def set_prefix(self, prefix: str) -> None:
        """Set the prefix."""
        prefix = check_prefix(prefix)
        with self._lock:
            self._prefix = prefix

    level = property(get_level, set_level)
    output = property(get_output, set_output)
    flags = property(get_flags, set_flags)
    prefix = property(get_prefix, set_prefix)

    # Writing

    def enabled(self, level: LogLevel) -> bool:
        """
        Check whether a record of the given level would be written.

        OFF is only a threshold; a record at OFF is never written.
        """
        if level >= LogLevel.OFF:
            return False
        with self._lock:
            return level >= self._level

    def write_output(
        self,
        level: LogLevel,
        target: str,
        file_name: Optional[str],
        line_number: Optional[int],
        message: str,
        now: Optional[datetime] = None,
    ) -> None:
        """
        Write a message using the logger.

        Does nothing if the level is not enabled. A newline is appended
        unless the message already ends with one. Errors raised by the
        output are discarded.

        Args:
            level: Severity of the record
            target: Module or subsystem name
            file_name: Source file path, or None
            line_number: Source line, or None
            message: Message text
            now: Timestamp of the record (default: now)
        """
        if not self.enabled(level):
            return

        if now is None:
            now = datetime.now().astimezone()  # taken before waiting for the lock
        maybe_newline = "" if message.endswith("\n") else "\n"

        with self._lock:
            header = format_header(
                target, file_name, line_number, level, now,
                self._flags, self._prefix,
            )
            try:
                self._output.write(f"{header}{message}{maybe_newline}")
            except Exception:
                pass

    def log(self, entry: LogEntry) -> None:
        """Write a LogEntry."""
        self.write_output(
            entry.level,
            entry.target,
            entry.file_name,
            entry.line_number,
            entry.message,
            now=entry.timestamp,
        )

    def _log_from_caller(self, level: LogLevel, message: Any) -> None:
        if not self.enabled(level):
            return
        # 0: _log_from_caller, 1: trace/debug/..., 2: caller
        frame = sys._getframe(2)
        self.write_output(
            level,
            frame.f_globals.get("__name__", ""),
            frame.f_code.co_filename,
            frame.f_lineno,
            str(message),
        )

    def trace(self, message: Any) -> None:
        """Log trace message."""
        self._log_from_caller(LogLevel.TRACE, message)

    def debug(self, message: Any) -> None:
        """Log debug message."""
        self._log_from_caller(LogLevel.DEBUG, message)

    def info(self, message: Any) -> None:
        """Log info message."""
        self._log_from_caller(LogLevel.INFO, message)

    def warn(self, message: Any) -> None:
        """Log warning message."""
        self._log_from_caller(LogLevel.WARN, message)

    def error(self, message: Any) -> None:
        """Log error message."""
        self._log_from_caller(LogLevel.ERROR, message)

    def flush(self) -> None:
        """Flush the output. Errors are discarded."""
        with self._lock:
            try:
                self._output.flush()
            except Exception:
                pass

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"Logger(level={self._level.name}, flags={int(self._flags)}, "
            f"prefix={self._prefix!r})"
        )
