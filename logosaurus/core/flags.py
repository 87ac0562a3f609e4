"""
Header formatting flags

Each bit switches one header element on or off. Apart from MSG_PREFIX,
the flags do not control the order of the header elements, only whether
they appear.

For example, ``Flag.DATE | Flag.TIME`` produces::

    2009/01/23 17:05:23 message

while ``Flag.DATE | Flag.TIME | Flag.MICROSECONDS | Flag.SHORT_FILE | Flag.LEVEL``
produces::

    INFO  2009/01/23 17:05:23.123123 main.py:3: message
"""

import re
from enum import IntFlag


class Flag(IntFlag):
    """Formatting flags for the header of a log line."""

    NONE = 0
    DATE = 1            # Date in local time zone: 2009/01/23
    TIME = 2            # Time in local time zone: 17:05:23
    MICROSECONDS = 4    # 17:05:23.023123; assumes TIME
    LONG_FILE = 8       # Target, full file path and line: "app.db /src/app/db.py:3"
    SHORT_FILE = 16     # Final file name element and line: "db.py:3"
    UTC = 32            # Use UTC rather than the local time zone
    MSG_PREFIX = 64     # Move the prefix to just before the message
    LEVEL = 128         # Level name, upper case, padded to width 5
    STD = DATE | TIME | LEVEL

    @classmethod
    def from_string(cls, spec: str) -> "Flag":
        """
        Parse a flag expression such as ``"STD|SHORT_FILE"``.

        Names are case-insensitive and may be separated by ``|``, ``,``
        or whitespace. An empty string yields ``Flag.NONE``.

        Raises:
            ValueError: If a name is not a known flag
        """
        result = cls.NONE
        for name in re.split(r"[|,\s]+", spec.strip()):
            if not name:
                continue
            key = name.upper()
            if key not in cls.__members__:
                raise ValueError(f"Invalid format flag: {name}")
            result |= cls[key]
        return result


# Largest value representable by the 8 flag bits
FLAG_MASK = 0xFF
