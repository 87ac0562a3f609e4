"""Tests for logging module integration"""

import logging
import sys
from datetime import datetime

import pytest

import logosaurus
from logosaurus import Flag, LogLevel, Logger, LoggerBuilder, SetLoggerError

pytestmark = pytest.mark.usefixtures("fresh_facade")


class TestInit:
    """Test global registration."""

    def test_init_once(self, memory_writer):
        logger = Logger(output=memory_writer)
        logosaurus.init(logger)
        assert logosaurus.get_logger() is logger

        with pytest.raises(SetLoggerError):
            logosaurus.init(Logger(output=memory_writer))
        assert logosaurus.get_logger() is logger

    def test_no_logger_before_init(self):
        assert logosaurus.get_logger() is None

    def test_sets_root_level(self, memory_writer):
        logosaurus.init(Logger(output=memory_writer, level=LogLevel.WARN))
        assert logging.getLogger().level == logging.WARNING

    def test_trace_level_name(self, memory_writer):
        logosaurus.init(Logger(output=memory_writer))
        assert logging.getLevelName(5) == "TRACE"


class TestHandler:
    """Test records routed through the logging module."""

    def test_level_filter(self, memory_writer):
        logger = (LoggerBuilder()
            .with_output(memory_writer)
            .with_level(LogLevel.WARN)
            .with_flags(Flag.LEVEL)
            .build())
        logosaurus.init(logger)

        log = logging.getLogger("scenario")
        log.log(5, "suppressed trace message")
        log.debug("suppressed debug message")
        log.info("suppressed info message")
        log.warning("warn message")
        log.error("error message")

        assert memory_writer.getvalue() == "WARN  warn message\nERROR error message\n"

    def test_newline(self, memory_writer):
        logosaurus.init(LoggerBuilder().with_output(memory_writer).with_flags(Flag.NONE).build())

        log = logging.getLogger("scenario")
        log.warning("message0")
        log.warning("message1\n\n")
        log.warning("message2\n")

        assert memory_writer.getvalue() == "message0\nmessage1\n\nmessage2\n"

    def test_trace_and_critical(self, memory_writer):
        logosaurus.init(LoggerBuilder().with_output(memory_writer).with_flags(Flag.LEVEL).build())

        log = logging.getLogger("scenario")
        log.log(5, "trace %s", "args")
        log.critical("critical")

        assert memory_writer.getvalue() == "TRACE trace args\nERROR critical\n"

    def test_location_and_target(self, memory_writer):
        logosaurus.init(LoggerBuilder()
            .with_output(memory_writer)
            .with_flags(Flag.LONG_FILE | Flag.SHORT_FILE)
            .build())

        line = sys._getframe().f_lineno + 1
        logging.getLogger("app.db").info("query")

        assert memory_writer.getvalue() == f"app.db test_facade.py:{line}: query\n"

    def test_exception_text(self, memory_writer):
        logosaurus.init(LoggerBuilder().with_output(memory_writer).with_flags(Flag.NONE).build())

        try:
            raise KeyError("missing")
        except KeyError:
            logging.getLogger("scenario").exception("lookup failed")

        lines = memory_writer.lines()
        assert lines[0] == "lookup failed"
        assert lines[1] == "Traceback (most recent call last):"
        assert lines[-1] == "KeyError: 'missing'"

    def test_logger_level_change_applies(self, memory_writer):
        logger = LoggerBuilder().with_output(memory_writer).with_flags(Flag.NONE).build()
        logosaurus.init(logger)
        logger.set_level(LogLevel.ERROR)

        logging.getLogger("scenario").warning("gated by the logger")
        logging.getLogger("scenario").error("kept")

        assert memory_writer.getvalue() == "kept\n"

    def test_handler_flush(self, memory_writer):
        logosaurus.init(Logger(output=memory_writer))
        for handler in logging.getLogger().handlers:
            if isinstance(handler, logosaurus.LogosaurusHandler):
                handler.flush()
        assert memory_writer.flush_count == 1

    def test_record_creation_time_used(self, memory_writer):
        handler = logosaurus.LogosaurusHandler(
            Logger(output=memory_writer, flags=Flag.DATE | Flag.TIME)
        )
        record = logging.LogRecord("scenario", logging.INFO, "app.py", 1, "m", None, None)
        record.created = datetime(2001, 2, 3, 4, 5, 6).timestamp()

        handler.handle(record)

        assert memory_writer.getvalue() == "2001/02/03 04:05:06 m\n"
