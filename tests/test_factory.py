"""Tests for the file logger factory and logger builder"""

import io
import pytest
import tempfile
from datetime import datetime
from pathlib import Path

from easy_logger import (
    ConsoleWriter,
    FileLoggerFactory,
    FileWriter,
    LoggerBuilder,
    LoggerConfig,
)

YEAR_ONE = datetime(1, 1, 1)


class TestFileLoggerFactory:
    """Test FileLoggerFactory functionality."""

    def test_names_from_ids(self):
        ids = ["apple", "banana", "cherry"]
        with tempfile.TemporaryDirectory() as tmpdir:
            factory = FileLoggerFactory(tmpdir, LoggerConfig(start_time=YEAR_ONE))
            loggers = [factory.create(id) for id in ids]
            for logger in loggers:
                logger.close()

            for id in ids:
                assert (Path(tmpdir) / f"01-01-0001T00:00:00.000_{id}.log").exists()

    def test_default_id_is_caller_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            factory = FileLoggerFactory(tmpdir, LoggerConfig(start_time=YEAR_ONE))
            logger = factory.create()
            logger.close()

            assert (Path(tmpdir) / "01-01-0001T00:00:00.000_test_factory.log").exists()

    def test_duplicate_id_fails(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            factory = FileLoggerFactory(tmpdir, LoggerConfig(start_time=YEAR_ONE))
            first = factory.create("same")
            with pytest.raises(FileExistsError):
                factory.create("same")
            first.close()

    def test_shares_config_and_extra_writers(self):
        stream = io.StringIO()
        console = ConsoleWriter(stream)
        config = LoggerConfig(start_time=YEAR_ONE, log_timestamp=False)
        with tempfile.TemporaryDirectory() as tmpdir:
            factory = FileLoggerFactory(tmpdir, config, console)
            network = factory.create("network")
            storage = factory.create("storage")

            assert network.config is storage.config
            assert isinstance(network.writers[0], FileWriter)
            assert network.writers[1] is console

            network.info("connected")
            network.close()
            storage.info("mounted")
            storage.close()

            assert stream.getvalue() == "[INFO] | connected\n[INFO] | mounted\n"
            assert console.closed

    def test_extra_writers_serve_sequential_loggers(self):
        stream = io.StringIO()
        console = ConsoleWriter(stream)
        config = LoggerConfig(start_time=YEAR_ONE, log_timestamp=False)
        with tempfile.TemporaryDirectory() as tmpdir:
            factory = FileLoggerFactory(tmpdir, config, console)
            with factory.create("first") as first:
                assert first.info("first") is True
            with factory.create("second") as second:
                assert second.info("second") is True

            assert stream.getvalue() == "[INFO] | first\n[INFO] | second\n"
            second_log = Path(tmpdir) / "01-01-0001T00:00:00.000_second.log"
            assert second_log.read_text(encoding="utf-8") == "[INFO] | second\n"

    def test_clone_with_directory(self):
        config = LoggerConfig(start_time=YEAR_ONE)
        with tempfile.TemporaryDirectory() as first_dir, tempfile.TemporaryDirectory() as second_dir:
            factory = FileLoggerFactory(first_dir, config)
            clone = factory.clone_with_directory(second_dir)

            assert clone.config is config
            clone.create("moved").close()

            assert (Path(second_dir) / "01-01-0001T00:00:00.000_moved.log").exists()
            assert list(Path(first_dir).iterdir()) == []


class TestLoggerBuilder:
    """Test LoggerBuilder functionality."""

    def test_builder_pattern(self):
        stream = io.StringIO()
        start = datetime(2020, 1, 1)
        logger = (LoggerBuilder()
            .with_start_time(start)
            .with_delta_time()
            .with_unix_time()
            .with_clock(lambda: datetime(2020, 1, 1, 0, 0, 1))
            .with_console(stream)
            .build())

        assert logger.config.start_time == start
        logger.info("tick")
        logger.close()

        assert stream.getvalue() == "[INFO] | 1000 | tick\n"

    def test_section_toggles(self):
        stream = io.StringIO()
        with (LoggerBuilder()
                .with_timestamp(False)
                .with_level(False)
                .with_caller()
                .with_console(stream)
                .build()) as logger:
            logger.warn("m", "/tmp/job.py", 3)

        assert stream.getvalue() == "job.py:3 | m\n"

    def test_with_file_and_custom_writer(self):
        stream = io.StringIO()
        with tempfile.TemporaryDirectory() as tmpdir:
            logger = (LoggerBuilder()
                .with_config(LoggerConfig(start_time=YEAR_ONE, log_timestamp=False))
                .with_file(tmpdir, id="built")
                .add_writer(ConsoleWriter(stream))
                .build())
            logger.error("both")
            logger.close()

            path = Path(tmpdir) / "01-01-0001T00:00:00.000_built.log"
            assert path.read_text(encoding="utf-8") == "[ERROR] | both\n"
            assert stream.getvalue() == "[ERROR] | both\n"
