"""
Logging Configuration
=====================
Sets up the 'californication' logger for the application.

The remote fetch runs on a QThread, so every record carries its thread name
to tell GUI-thread and worker-thread messages apart. HTTP libraries are kept
at WARNING so a refresh does not flood the console with connection details.
"""
import logging
import os
import sys
from typing import Iterable, Optional

PACKAGE_LOGGER = "californication"
LOG_FORMAT = '%(asctime)s - %(threadName)s - %(name)s - %(levelname)s - %(message)s'
NOISY_LIBRARIES = ("urllib3", "requests")


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    quiet_libraries: Iterable[str] = NOISY_LIBRARIES,
) -> logging.Logger:
    """
    Configures the application logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file. Its directory is
            created if needed and the file is appended to across runs.
        quiet_libraries: Third-party loggers capped at WARNING.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Calling this twice must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    for name in quiet_libraries:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logger.debug(f"Logging initialized (level={logging.getLevelName(level)}, file={log_file}).")
    return logger
