"""Tests for fastmap.fastmap_logging."""

import logging

import pytest

from fastmap import Grid
from fastmap import fastmap_logging
from fastmap.fastmap_logging import (
    LOGGER_NAME,
    create_module_logger,
    function_logger,
    get_module_logger,
    get_rootlogger,
    log_to_stderr,
    method_logger,
)


@pytest.fixture
def restore_root_logger():
    """Undo any configuration log_to_stderr applies to the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    rootlogger = fastmap_logging._rootlogger
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    fastmap_logging._rootlogger = rootlogger


def test_create_module_logger_uses_caller_module():
    """Without a name, the logger is named after the calling module."""
    logger = create_module_logger()

    assert logger.name == f"{LOGGER_NAME}.{__name__}"


def test_create_module_logger_explicit_name():
    """An explicit name is placed under the package logger."""
    assert create_module_logger("custom").name == f"{LOGGER_NAME}.custom"
    assert get_module_logger("custom") is create_module_logger("custom")


def test_grid_construction_is_logged(caplog):
    """Creating a grid emits debug records from the grid module."""
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)

    Grid(3, 4)

    messages = [
        r.getMessage() for r in caplog.records if r.name == "FASTMAP.fastmap.grid"
    ]
    assert "calling Grid.__init__ with (3, 4) and {}" in messages
    assert "allocated 12 cells for grid (3, 4)" in messages


def test_failed_construction_logs_call_only(caplog):
    """A rejected grid logs the call but never the allocation."""
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)

    with pytest.raises(ValueError):
        Grid(0, 4)

    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("calling Grid.__init__") for m in messages)
    assert not any(m.startswith("allocated") for m in messages)


def test_function_logger(caplog):
    """function_logger records each call with its arguments."""
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)

    @function_logger(__name__)
    def add(a, b):
        return a + b

    assert add(1, b=2) == 3
    assert "calling add with (1,) and {'b': 2}" in caplog.messages


def test_method_logger_skips_instance(caplog):
    """method_logger omits self from the logged arguments."""
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)

    class Counter:
        @method_logger(__name__)
        def bump(self, step):
            return step + 1

    assert Counter().bump(4) == 5
    assert "calling Counter.bump with (4,) and {}" in caplog.messages


def test_log_to_stderr(restore_root_logger):
    """log_to_stderr configures a stream handler on the package logger."""
    logger = log_to_stderr(logging.INFO)

    assert logger is restore_root_logger
    assert logger.level == logging.INFO
    assert get_rootlogger() is logger
    handler = logger.handlers[-1]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.level == logging.INFO


def test_log_to_stderr_default_level(restore_root_logger):
    """Without a level, DEBUG is used."""
    logger = log_to_stderr()

    assert logger.level == fastmap_logging.DEFAULT_LEVEL == logging.DEBUG


def test_log_to_stderr_pass_root_logger_level(restore_root_logger):
    """Passing through to the root logger adds no handler."""
    before = list(restore_root_logger.handlers)
    logger = log_to_stderr(logging.INFO, pass_root_logger_level=True)

    assert logger.handlers == before
    assert logger.propagate
    assert logger.level == logging.INFO
