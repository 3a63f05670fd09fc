"""Tests for the application logger."""

import logging
import logging.handlers

from todomatic.utils.logger import get_logger


def test_logger_writes_to_log_dir(tmp_path):
    logger = get_logger()
    logger.info("hello from test")
    for handler in logger.handlers:
        handler.flush()

    assert logger is get_logger()
    assert logger.name == "todomatic"
    assert logger.propagate is False
    assert "hello from test" in (tmp_path / "todomatic.log").read_text()


def test_module_loggers_share_handler(tmp_path):
    get_logger()
    logging.getLogger("todomatic.services.task_store").warning("child message")
    for handler in logging.getLogger("todomatic").handlers:
        handler.flush()

    assert "child message" in (tmp_path / "todomatic.log").read_text()


def test_rotating_handler_settings():
    handlers = [
        h
        for h in get_logger().handlers
        if isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    assert handlers
    assert handlers[0].maxBytes == 5 * 1024 * 1024
    assert handlers[0].backupCount == 3
