"""Logging setup for the vastucompass package."""

import logging
import sys


def setup_logging(level: int | str = logging.INFO, log_file: str | None = None) -> None:
    """Configure the 'vastucompass' namespace logger.

    Safe to call repeatedly; existing handlers are replaced, not stacked.

    Args:
        level: Logging level, e.g. logging.DEBUG or "DEBUG".
        log_file: Optional path to also write logs to.
    """
    logger = logging.getLogger("vastucompass")
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
