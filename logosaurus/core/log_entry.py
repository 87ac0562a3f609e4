"""
Log entry data structure
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from logosaurus.core.log_level import LogLevel


def _now() -> datetime:
    """Current time as an aware datetime in the local time zone."""
    return datetime.now().astimezone()


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Contains the metadata of a single record: severity, target (the
    module or subsystem name), source location and message. The
    timestamp is taken when the entry is created.
    """

    level: LogLevel
    message: str
    target: str = ""
    file_name: Optional[str] = None
    line_number: Optional[int] = None
    timestamp: datetime = field(default_factory=_now)

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if self.level is LogLevel.OFF:
            raise ValueError("OFF is not a record level")
        if not isinstance(self.message, str):
            self.message = str(self.message)
