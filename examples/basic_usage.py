#!/usr/bin/env python3
"""Basic usage example"""

import logging
import sys

import logosaurus
from logosaurus import Flag, LogLevel, LoggerBuilder


def main():
    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_level(LogLevel.DEBUG)
        .with_output(sys.stderr)
        .with_flags(Flag.STD | Flag.SHORT_FILE | Flag.MICROSECONDS)
        .with_prefix("basic_usage: ")
        .build())

    # basic_usage: INFO  2020/10/02 21:27:03.123123 basic_usage.py:21: hello, world!
    logger.info("hello, world!")
    logger.trace("suppressed: below DEBUG")

    # Route the logging module through the same logger
    logosaurus.init(logger)
    log = logging.getLogger("example")
    log.debug("Debug through logging")
    log.warning("Warning through logging")
    try:
        1 / 0
    except ZeroDivisionError:
        log.exception("Something failed")

    # Move the prefix next to the message
    logger.flags = Flag.LEVEL | Flag.MSG_PREFIX
    logger.error("This is error")

    logger.flush()


if __name__ == "__main__":
    main()
