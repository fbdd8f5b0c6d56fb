#!/usr/bin/env python3
"""Basic usage example"""

from easy_logger import ConsoleWriter, FileLoggerFactory, LoggerBuilder, LoggerConfig


def main():
    # Create logger with builder pattern
    with (LoggerBuilder()
            .with_caller()
            .with_delta_time()
            .with_console()
            .with_file("logs/")
            .build()) as logger:

        logger.trace("This is trace")
        logger.debug("This is debug")
        logger.verbose("This is verbose")
        logger.info("Application started")
        logger.warn("This is warning")
        logger.error("This is error")
        ok = logger.fatal("This is fatal")
        print(f"All writers succeeded: {ok}")

    # Many loggers sharing one start time, one file each
    factory = FileLoggerFactory("logs/", LoggerConfig(log_caller=True), ConsoleWriter())
    with factory.create("network") as network, factory.create("storage") as storage:
        network.info("Connected")
        storage.info("Mounted")


if __name__ == "__main__":
    main()
