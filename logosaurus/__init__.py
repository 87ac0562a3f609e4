"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Logosaurus - a header-formatting logger modeled after Go's log package

Every message is written on its own line, preceded by a header whose
content is selected with format flags:

    WARN  2020/10/02 21:27:03 hello, world
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from logosaurus.core.flags import Flag
from logosaurus.core.logger import Logger
from logosaurus.core.logger_builder import LoggerBuilder
from logosaurus.core.log_entry import LogEntry
from logosaurus.core.log_level import LogLevel
from logosaurus.core.logger_config import LoggerConfig
from logosaurus.facade import LogosaurusHandler, SetLoggerError, get_logger, init

# Import submodules (not all classes by default)
from logosaurus import formatters
from logosaurus import writers

__all__ = [
    "Flag",
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "LogosaurusHandler",
    "SetLoggerError",
    "get_logger",
    "init",
    "formatters",
    "writers",
]
