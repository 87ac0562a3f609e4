"""Writers module - Log output destinations

Any object with ``write(str)`` and ``flush()`` can be used as a Logger
output; these are the ones shipped with the package.
"""

from logosaurus.writers.console_writer import ConsoleWriter
from logosaurus.writers.file_writer import FileWriter
from logosaurus.writers.memory_writer import MemoryWriter

__all__ = ["ConsoleWriter", "FileWriter", "MemoryWriter"]
