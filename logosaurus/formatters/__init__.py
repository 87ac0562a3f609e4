"""
Log formatters module

Builds the header text placed before each log message.
"""

from logosaurus.formatters.header_formatter import (
    UNKNOWN_FILE,
    format_datetime,
    format_entry_header,
    format_header,
    short_file_name,
)

__all__ = [
    "UNKNOWN_FILE",
    "format_datetime",
    "format_entry_header",
    "format_header",
    "short_file_name",
]
