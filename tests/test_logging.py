"""Tests for logging setup and timing helper."""

import logging
import logging.handlers

import pytest

from mod_updater.utils.logging import TimedOperation, setup_logging


def test_setup_logging_with_file(tmp_path):
    log_file = tmp_path / "logs" / "updater.log"

    logger = setup_logging(log_level="WARNING", log_file=log_file, log_to_console=False)
    logger.getChild("sync").debug("written to file only")
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.WARNING
    assert [type(h) for h in logger.handlers] == [logging.handlers.RotatingFileHandler]
    assert log_file.exists()


def test_setup_logging_is_repeatable():
    setup_logging(log_level="INFO")
    logger = setup_logging(log_level="DEBUG")

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_timed_operation_logs_success(caplog):
    logger = logging.getLogger("mod_updater.test")

    with caplog.at_level(logging.INFO, logger="mod_updater"):
        with TimedOperation(logger, "backup") as op:
            pass

    assert "Starting backup" in caplog.text
    assert "Completed backup" in caplog.text
    assert op.duration >= 0


def test_timed_operation_logs_failure_and_reraises(caplog):
    logger = logging.getLogger("mod_updater.test")

    with caplog.at_level(logging.INFO, logger="mod_updater"):
        with pytest.raises(RuntimeError):
            with TimedOperation(logger, "sync"):
                raise RuntimeError("disk full")

    assert "Failed sync" in caplog.text
    assert "disk full" in caplog.text
    assert [r.levelname for r in caplog.records if "Failed sync" in r.getMessage()] == ["INFO"]
