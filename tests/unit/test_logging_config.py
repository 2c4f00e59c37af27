"""
Unit tests for logging setup and access log formatting.
"""

import logging
import logging.handlers

import pytest

from hello_service.logging_config import LoggingConfig, log_api_access


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level
    access_logger = logging.getLogger("access")
    access_handlers = access_logger.handlers[:]
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
    for handler in access_logger.handlers[:]:
        if handler not in access_handlers:
            access_logger.removeHandler(handler)
    access_logger.propagate = True


def test_setup_is_idempotent(restore_root_logger):
    config = LoggingConfig("DEBUG")
    config.setup_logging()
    root_logger = config.setup_logging()

    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == 1
    assert len(logging.getLogger("access").handlers) == 1
    assert logging.getLogger("access").propagate is False


def test_setup_adds_rotating_file_handler(tmp_path, restore_root_logger):
    log_file = tmp_path / "logs" / "hello.log"
    root_logger = LoggingConfig("INFO", str(log_file)).setup_logging()

    file_handlers = [h for h in root_logger.handlers
                     if isinstance(h, logging.handlers.RotatingFileHandler)]
    assert len(file_handlers) == 1
    logging.getLogger("hello_service.test").info("written")
    file_handlers[0].flush()
    assert "written" in log_file.read_text(encoding="utf-8")
    file_handlers[0].close()


def test_access_line_format(caplog):
    with caplog.at_level(logging.INFO, logger="access"):
        log_api_access("GET", "/", 200, 0.0123)

    assert caplog.records[-1].getMessage() == (
        "method=GET | path=/ | status=200 | response_time=0.012s"
    )


def test_access_line_with_error(caplog):
    with caplog.at_level(logging.INFO, logger="access"):
        log_api_access("GET", "/boom", 500, error="boom")

    assert caplog.records[-1].getMessage() == "method=GET | path=/boom | status=500 | error=boom"
