"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Main logger class
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- Flag: Header format flags
- LoggerConfig: Configuration management
"""

from logosaurus.core.flags import Flag
from logosaurus.core.logger import Logger
from logosaurus.core.logger_builder import LoggerBuilder
from logosaurus.core.log_entry import LogEntry
from logosaurus.core.log_level import LogLevel
from logosaurus.core.logger_config import LoggerConfig

__all__ = ["Logger", "LoggerBuilder", "LogEntry", "LogLevel", "Flag", "LoggerConfig"]
