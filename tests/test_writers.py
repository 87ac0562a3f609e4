"""Tests for output destinations"""

import io

import pytest

from logosaurus import Flag, LogLevel, LoggerBuilder
from logosaurus.writers import ConsoleWriter, FileWriter, MemoryWriter


class TestConsoleWriter:
    """Test console writer."""

    def test_stderr_default(self, capsys):
        writer = ConsoleWriter()
        writer.write("to stderr\n")
        writer.flush()
        captured = capsys.readouterr()
        assert captured.err == "to stderr\n"
        assert captured.out == ""

    def test_stdout(self, capsys):
        logger = (LoggerBuilder()
            .with_output(ConsoleWriter(stdout=True))
            .with_flags(Flag.LEVEL)
            .build())
        logger.info("to stdout")
        assert capsys.readouterr().out == "INFO  to stdout\n"

    def test_explicit_stream(self):
        stream = io.StringIO()
        writer = ConsoleWriter(stream=stream)
        writer.write("abc")
        assert writer.stream is stream
        assert stream.getvalue() == "abc"


class TestFileWriter:
    """Test file writer."""

    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "logs" / "nested" / "app.log"
        with FileWriter(str(path)) as writer:
            logger = LoggerBuilder().with_output(writer).with_flags(Flag.LEVEL).build()
            logger.info("first")
            logger.error("second")
            logger.flush()

        assert path.read_text(encoding="utf-8") == "INFO  first\nERROR second\n"

    def test_appends(self, tmp_path):
        path = tmp_path / "app.log"
        path.write_text("existing\n", encoding="utf-8")
        writer = FileWriter(str(path))
        writer.write("appended\n")
        writer.close()
        assert path.read_text(encoding="utf-8") == "existing\nappended\n"

    def test_closed_writer_is_silent_through_logger(self, tmp_path):
        writer = FileWriter(str(tmp_path / "app.log"))
        writer.close()
        with pytest.raises(ValueError):
            writer.write("x")

        logger = LoggerBuilder().with_output(writer).build()
        logger.error("dropped")
        logger.flush()


class TestMemoryWriter:
    """Test in-memory writer."""

    def test_lines_and_clear(self):
        writer = MemoryWriter()
        logger = (LoggerBuilder()
            .with_output(writer)
            .with_flags(Flag.NONE)
            .with_level(LogLevel.DEBUG)
            .build())
        logger.debug("one")
        logger.info("two\n")
        assert writer.lines() == ["one", "two"]

        writer.clear()
        assert writer.getvalue() == ""

    def test_shared_between_loggers(self):
        writer = MemoryWriter()
        first = LoggerBuilder().with_output(writer).with_flags(Flag.NONE).with_prefix("1 ").build()
        second = LoggerBuilder().with_output(writer).with_flags(Flag.NONE).with_prefix("2 ").build()
        first.info("a")
        second.info("b")
        assert writer.getvalue() == "1 a\n2 b\n"
