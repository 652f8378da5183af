"""
Tests for the ephemtable.utils.logging module, which provides a helper function for setting up
logging for the ephemtable command line interface.
"""

import logging
from pathlib import Path

import pytest

from ephemtable.utils.logging import setup_logging


TEST_LOG_LEVELS = [
    (level_name, logging.getLevelNamesMapping()[level_name])
    for level_name in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
]


@pytest.mark.parametrize("logger_name", ["ephemtable", "ephemtable.submodule"])
@pytest.mark.parametrize("level_name,level", TEST_LOG_LEVELS)
def test_setup_logging_defaults(caplog, logger_name: str, level_name: str, level: int):
    setup_logging()
    logger = logging.getLogger(logger_name)
    logger.log(level, f"{level_name.lower()} message")

    if level_name == "DEBUG":
        assert len(caplog.records) == 0
    else:
        assert len(caplog.records) == 1
        logged_record = caplog.records[0]
        assert logged_record.name == logger_name
        assert logged_record.levelname == level_name
        assert logged_record.message == f"{level_name.lower()} message"


@pytest.mark.parametrize("logger_name", ["ephemtable", "ephemtable.submodule"])
@pytest.mark.parametrize("level_name,level", TEST_LOG_LEVELS)
def test_setup_logging_debug(caplog, logger_name: str, level_name: str, level: int):
    setup_logging(debug=True)
    logger = logging.getLogger(logger_name)
    logger.log(level, f"{level_name.lower()} message")

    assert len(caplog.records) == 1
    logged_record = caplog.records[0]
    assert logged_record.name == logger_name
    assert logged_record.levelname == level_name


@pytest.mark.parametrize("level_name,level", TEST_LOG_LEVELS)
def test_setup_logging_to_file(caplog, tmp_path: Path, level_name: str, level: int):
    log_file = tmp_path / "logfile.txt"
    setup_logging(logfile=log_file)
    logger = logging.getLogger("ephemtable.submodule")
    logger.log(level, f"{level_name.lower()} message")

    with log_file.open() as logs:
        lines = logs.readlines()
    if level_name == "DEBUG":
        assert len(caplog.records) == 0
        assert len(lines) == 0
    else:
        assert len(caplog.records) == 1
        assert len(lines) == 1
        assert lines[0].endswith(f"{level_name.lower()} message\n")


def test_setup_logging_debug_to_file(tmp_path: Path):
    log_file = tmp_path / "logfile.txt"
    setup_logging(debug=True, logfile=log_file)
    logging.getLogger("ephemtable.submodule").debug("debug message")

    with log_file.open() as logs:
        lines = logs.readlines()
    assert len(lines) == 1
    assert "DEBUG" in lines[0]
    assert "test_setup_logging_debug_to_file" in lines[0]
    assert lines[0].endswith("debug message\n")


def test_other_loggers_are_not_configured(caplog):
    setup_logging(debug=True)
    logging.getLogger("some_other_package").debug("debug message")
    assert len(caplog.records) == 0
