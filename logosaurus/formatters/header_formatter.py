"""
Header formatter

Renders the Go-style header placed in front of every log message. The
functions here are pure: the output depends only on the arguments.

Header element order is fixed::

    [prefix] [LEVEL ] [YYYY/MM/DD ] [HH:MM:SS[.micro] ] [target ]file:line: [prefix]
"""

import re
from datetime import datetime, timezone
from typing import Optional

from logosaurus.core.flags import Flag
from logosaurus.core.log_entry import LogEntry
from logosaurus.core.log_level import LogLevel

UNKNOWN_FILE = "???"

_SEPARATORS = re.compile(r"[\\/]")


def short_file_name(path: str) -> str:
    """
    Return the final path component of ``path``.

    Trailing separators are ignored (``"src/"`` gives ``"src"``), and a
    path without separators is returned unchanged. When no name is left
    (``"/"``, ``"src/.."``), ``"???"`` is returned.
    """
    base = _SEPARATORS.split(path.rstrip("/\\"))[-1]
    if not base or base in (".", ".."):
        return UNKNOWN_FILE
    return base


def format_datetime(flags: int, now: datetime) -> str:
    """
    Render the date/time part of the header.

    ``now`` is converted to UTC when the UTC flag is set, otherwise to the
    local time zone. Naive datetimes are taken as local time.
    """
    if not flags & (Flag.DATE | Flag.TIME | Flag.MICROSECONDS):
        return ""

    if flags & Flag.UTC:
        now = now.astimezone(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone()

    buf = []
    if flags & Flag.DATE:
        buf.append(f"{now.year:04d}/{now.month:02d}/{now.day:02d} ")
    if flags & (Flag.TIME | Flag.MICROSECONDS):
        buf.append(f"{now.hour:02d}:{now.minute:02d}:{now.second:02d}")
        if flags & Flag.MICROSECONDS:
            buf.append(f".{now.microsecond:06d}")
        buf.append(" ")
    return "".join(buf)


def format_header(
    target: str,
    file_name: Optional[str],
    line_number: Optional[int],
    level: LogLevel,
    now: datetime,
    flags: int,
    prefix: str = "",
) -> str:
    """
    Build the header text for one log line.

    Args:
        target: Module or subsystem name of the record
        file_name: Source file path, or None when unknown
        line_number: Source line, or None when unknown (printed as 0)
        level: Severity of the record
        now: Instant the record was accepted
        flags: Bitmask of Flag values
        prefix: Prefix text, emitted verbatim without a separator

    Returns:
        Header string without a trailing newline. Empty for Flag.NONE
        and an empty prefix.
    """
    buf = []

    if not flags & Flag.MSG_PREFIX:
        buf.append(prefix)

    if flags & Flag.LEVEL:
        buf.append(f"{LogLevel(level).label:<5} ")

    buf.append(format_datetime(flags, now))

    if flags & (Flag.LONG_FILE | Flag.SHORT_FILE) and file_name is not None:
        if flags & Flag.LONG_FILE:
            buf.append(f"{target} ")
        # SHORT_FILE wins for the file token when both bits are set
        if flags & Flag.SHORT_FILE:
            path = short_file_name(file_name)
        else:
            path = file_name
        line = line_number if line_number is not None else 0
        buf.append(f"{path}:{line}: ")

    if flags & Flag.MSG_PREFIX:
        buf.append(prefix)

    return "".join(buf)


def format_entry_header(entry: LogEntry, flags: int, prefix: str = "") -> str:
    """Build the header for a LogEntry."""
    return format_header(
        entry.target,
        entry.file_name,
        entry.line_number,
        entry.level,
        entry.timestamp,
        flags,
        prefix,
    )
