"""Console writer"""

import sys
from typing import Optional, TextIO


class ConsoleWriter:
    """Write log lines to stderr (default) or stdout."""

    def __init__(self, stream: Optional[TextIO] = None, stdout: bool = False):
        """
        Initialize console writer.

        Args:
            stream: Output stream. When None, the current sys.stderr
                    (or sys.stdout) is looked up on every write.
            stdout: Use sys.stdout instead of sys.stderr
        """
        self._stream = stream
        self.use_stdout = stdout

    @property
    def stream(self) -> TextIO:
        """Stream that receives the output."""
        if self._stream is not None:
            return self._stream
        return sys.stdout if self.use_stdout else sys.stderr

    def write(self, text: str) -> int:
        """Write text to the stream."""
        return self.stream.write(text)

    def flush(self):
        """Flush stream."""
        self.stream.flush()

    def __repr__(self) -> str:
        name = "stdout" if self.use_stdout else "stderr"
        return f"ConsoleWriter({name if self._stream is None else self._stream!r})"
