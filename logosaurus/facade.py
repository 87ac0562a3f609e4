"""
Standard library logging integration

Installs a Logger as the process-wide sink of Python's ``logging``
module. Installation happens at most once per process::

    import logging
    import logosaurus

    logosaurus.init(logosaurus.Logger.default())
    logging.getLogger(__name__).warning("hello, world")
    # WARN  2020/10/02 21:27:03 hello, world
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Optional

from logosaurus.core.log_level import LogLevel
from logosaurus.core.logger import Logger

_exception_formatter = logging.Formatter()

_lock = threading.Lock()
_logger: Optional[Logger] = None
_handler: Optional["LogosaurusHandler"] = None


class SetLoggerError(RuntimeError):
    """Raised when a logger has already been installed."""


class LogosaurusHandler(logging.Handler):
    """
    Forward ``logging`` records to a Logger.

    The record's logger name becomes the target, ``pathname`` and
    ``lineno`` the source location, and ``created`` the timestamp. Level
    gating is done by the Logger.
    """

    def __init__(self, logger: Logger):
        super().__init__(level=logging.NOTSET)
        self.logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        level = LogLevel.from_stdlib(record.levelno)
        if not self.logger.enabled(level):
            return
        try:
            message = record.getMessage()
            if record.exc_info and not record.exc_text:
                record.exc_text = _exception_formatter.formatException(record.exc_info)
            if record.exc_text:
                message = f"{message}\n{record.exc_text}"
            if record.stack_info:
                message = f"{message}\n{_exception_formatter.formatStack(record.stack_info)}"
        except Exception:
            self.handleError(record)
            return
        self.logger.write_output(
            level,
            record.name,
            record.pathname or None,
            record.lineno,
            message,
            now=datetime.fromtimestamp(record.created).astimezone(),
        )

    def flush(self) -> None:
        self.logger.flush()


def init(logger: Logger) -> None:
    """
    Install ``logger`` as the sink of the ``logging`` module.

    Registers the TRACE level name, attaches a LogosaurusHandler to the
    root logger and sets the root level to the logger's threshold.

    Raises:
        SetLoggerError: If a logger has already been installed
    """
    global _logger, _handler

    with _lock:
        if _logger is not None:
            raise SetLoggerError("a logger has already been initialized")

        logging.addLevelName(int(LogLevel.TRACE), "TRACE")
        handler = LogosaurusHandler(logger)
        root = logging.getLogger()
        root.addHandler(handler)
        root.setLevel(int(logger.level))

        _logger = logger
        _handler = handler


def get_logger() -> Optional[Logger]:
    """Return the installed Logger, or None before init()."""
    with _lock:
        return _logger
