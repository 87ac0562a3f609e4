"""In-memory writer"""

import threading
from typing import List


class MemoryWriter:
    """
    Collect log output in memory.

    The buffer has its own lock, so the same MemoryWriter can be shared
    between several loggers and read while they write. Mostly useful in
    tests.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._chunks: List[str] = []
        self.flush_count = 0

    def write(self, text: str) -> int:
        """Append text to the buffer."""
        with self._lock:
            self._chunks.append(text)
        return len(text)

    def flush(self):
        """Count the flush; there is nothing to flush."""
        with self._lock:
            self.flush_count += 1

    def getvalue(self) -> str:
        """Return everything written so far."""
        with self._lock:
            return "".join(self._chunks)

    def lines(self) -> List[str]:
        """Return the output split into lines, without terminators."""
        return self.getvalue().splitlines()

    def clear(self):
        """Discard the buffer."""
        with self._lock:
            self._chunks.clear()
