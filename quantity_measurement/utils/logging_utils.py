"""
Central logging utilities.

Configures the package logger once per process:

- console (stderr), so log lines never mix with menu output on stdout
- optional file

Library modules only call logging.getLogger(__name__); handlers are
attached here and nowhere else.
"""

import logging
from pathlib import Path

LOGGER_NAME = "quantity_measurement"

LOG_FORMAT = (
    "%(asctime)s | "
    "%(levelname)-8s | "
    "%(name)s | "
    "%(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(level: str = "WARNING", log_path: Path | None = None) -> logging.Logger:
    """
    Create and configure the package logger.

    Parameters
    ----------
    level : str
        Logging level:
        "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"
    log_path : Path, optional
        Also write records to this file

    Returns
    -------
    logger : logging.Logger
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)

    # Prevent duplicate handlers if setup_logger is called multiple times
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    ch = logging.StreamHandler()
    ch.setLevel(logger.level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    if log_path is not None:
        log_path = Path(log_path).expanduser().resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)

        fh = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        fh.setLevel(logger.level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)
        logger.info(f"Logging to file: {log_path}")

    logger.debug("Logger initialized")
    return logger


def reset_logger() -> None:
    """Detach and close all handlers of the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
