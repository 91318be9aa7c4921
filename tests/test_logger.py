"""Tests for logging setup and the event helpers."""

import logging

import pytest

from pwnedcheck.utils.logger import (
    QUIET_LOGGERS,
    log_breach_check,
    log_range_request,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_console_only_by_default(restore_root_logger):
    setup_logging("WARNING")

    assert restore_root_logger.level == logging.WARNING
    assert len(restore_root_logger.handlers) == 1
    assert not isinstance(restore_root_logger.handlers[0], logging.FileHandler)


def test_file_handler_writes_debug(restore_root_logger, tmp_path):
    log_file = tmp_path / "nested" / "pwnedcheck.log"

    setup_logging("DEBUG", str(log_file))
    logging.getLogger("pwnedcheck.test").debug("written to file")
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert "written to file" in log_file.read_text()


def test_third_party_loggers_are_quieted(restore_root_logger):
    setup_logging("DEBUG")

    for name, level in QUIET_LOGGERS.items():
        assert logging.getLogger(name).level == level


def test_unknown_level_is_rejected(restore_root_logger):
    with pytest.raises(ValueError):
        setup_logging("chatty")


def test_event_helpers_only_carry_the_prefix(caplog):
    caplog.set_level(logging.DEBUG)

    log_range_request("CBFDA", "success", 12.5)
    log_breach_check("CBFDA", True, "breach_count")
    log_breach_check("CBFDA", False, "is_compromised")

    assert [record.levelno for record in caplog.records] == [logging.INFO, logging.WARNING, logging.INFO]
    assert all("CBFDA" in record.getMessage() for record in caplog.records)
