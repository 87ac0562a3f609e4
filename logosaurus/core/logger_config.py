"""
Logger configuration management
"""

from dataclasses import dataclass
from typing import Any, Dict, Union

from logosaurus.core.flags import FLAG_MASK, Flag
from logosaurus.core.log_level import LogLevel


def coerce_level(level: Union[LogLevel, int, str]) -> LogLevel:
    """Convert a level name or number to LogLevel, raising ValueError if invalid."""
    if isinstance(level, str):
        return LogLevel.from_string(level)
    return LogLevel(level)


def coerce_flags(flags: Union[Flag, int, str]) -> Flag:
    """Convert a flag expression or number to Flag, raising ValueError if invalid."""
    if isinstance(flags, str):
        return Flag.from_string(flags)
    if not 0 <= int(flags) <= FLAG_MASK:
        raise ValueError("flags must fit in 8 bits")
    return Flag(flags)


def check_prefix(prefix: str) -> str:
    """Return prefix unchanged, raising TypeError if it is not a string."""
    if not isinstance(prefix, str):
        raise TypeError("prefix must be a string")
    return prefix


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Holds the settings a Logger is built from. ``level`` and ``flags``
    accept strings (``"warn"``, ``"STD|SHORT_FILE"``) and are converted
    on construction.
    """

    level: Union[LogLevel, str] = LogLevel.TRACE
    flags: Union[Flag, int, str] = Flag.STD
    prefix: str = ""

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.level = coerce_level(self.level)
        self.flags = coerce_flags(self.flags)
        self.prefix = check_prefix(self.prefix)

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging: everything, with source locations."""
        return cls(
            level=LogLevel.TRACE,
            flags=Flag.STD | Flag.MICROSECONDS | Flag.SHORT_FILE,
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            level=LogLevel.WARN,
            flags=Flag.STD | Flag.UTC,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LoggerConfig":
        """
        Create configuration from a dictionary.

        Args:
            data: Mapping with optional "level", "flags" and "prefix" keys

        Returns:
            New LoggerConfig instance

        Raises:
            ValueError: If a key is unknown or a value is invalid
        """
        unknown = set(data) - {"level", "flags", "prefix"}
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        return cls(
            level=data.get("level", LogLevel.TRACE),
            flags=data.get("flags", Flag.STD),
            prefix=data.get("prefix", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "level": self.level.name,
            "flags": int(self.flags),
            "prefix": self.prefix,
        }
