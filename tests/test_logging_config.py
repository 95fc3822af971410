import logging

import pytest

from californication.logging_config import setup_logging, PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_repeated_setup_does_not_duplicate_handlers():
    setup_logging()
    logger = setup_logging()
    assert len(logger.handlers) == 1


def test_log_file_records_thread_name(tmp_path):
    log_file = tmp_path / "logs" / "californication.log"
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))

    logging.getLogger("californication.controller.presenter").info("Sort mode changed")
    for handler in logger.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "MainThread" in text
    assert "Sort mode changed" in text


def test_http_libraries_are_quieted():
    setup_logging(level=logging.DEBUG)
    assert logging.getLogger("urllib3").level == logging.WARNING
