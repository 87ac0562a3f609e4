"""
Log level enumeration

Severity levels shared by the logger and the standard library bridge.
"""

import logging
from enum import IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Values are compatible with Python's logging module: a larger value
    is more severe, and a record passes a threshold when
    ``record_level >= threshold``.
    """

    TRACE = 5       # Most verbose, detailed tracing
    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARN = 30       # Warning messages
    ERROR = 40      # Error messages
    OFF = 100       # Threshold only: logging disabled

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level_str = level_str.strip().upper()
        if level_str == "WARNING":
            level_str = "WARN"
        if level_str in cls.__members__:
            return cls[level_str]
        raise ValueError(f"Invalid log level: {level_str}")

    @classmethod
    def from_stdlib(cls, levelno: int) -> "LogLevel":
        """
        Map a ``logging`` level number to the nearest level at or below it.

        CRITICAL collapses to ERROR; anything below DEBUG is TRACE.
        """
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARN
        if levelno >= logging.INFO:
            return cls.INFO
        if levelno >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE

    @property
    def label(self) -> str:
        """Canonical upper-case name printed in log headers."""
        return LEVEL_NAMES.get(self, self.name)


# Mapping from log level to names
LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.TRACE: "TRACE",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.OFF: "OFF",
}
