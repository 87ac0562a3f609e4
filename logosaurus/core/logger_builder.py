"""Logger builder pattern"""

from dataclasses import replace
from typing import Any, Optional, Union

from logosaurus.core.log_level import LogLevel
from logosaurus.core.logger import Logger
from logosaurus.core.logger_config import LoggerConfig


class LoggerBuilder:
    """
    Builder pattern for logger construction.

    Unset values default to those of ``Logger.default()``: level TRACE,
    output stderr, flags ``Flag.STD`` and an empty prefix.

    Example:
        logger = (LoggerBuilder()
            .with_level(LogLevel.DEBUG)
            .with_output(sys.stderr)
            .with_flags(Flag.STD | Flag.SHORT_FILE)
            .with_prefix("myprogram: ")
            .build())
    """

    def __init__(self):
        self._config = LoggerConfig()
        self._output: Optional[Any] = None

    def with_level(self, level: Union[LogLevel, str]) -> "LoggerBuilder":
        """Set minimum log level."""
        self._config = replace(self._config, level=level)
        return self

    def with_output(self, output: Any) -> "LoggerBuilder":
        """Set the destination where output should be written."""
        self._output = output
        return self

    def with_flags(self, flags: Union[int, str]) -> "LoggerBuilder":
        """Set the formatting flags."""
        self._config = replace(self._config, flags=flags)
        return self

    def with_prefix(self, prefix: str) -> "LoggerBuilder":
        """Set the prefix."""
        self._config = replace(self._config, prefix=prefix)
        return self

    def with_config(self, config: LoggerConfig) -> "LoggerBuilder":
        """Take level, flags and prefix from a LoggerConfig."""
        self._config = replace(config)
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        return Logger(
            output=self._output,
            level=self._config.level,
            flags=self._config.flags,
            prefix=self._config.prefix,
        )
