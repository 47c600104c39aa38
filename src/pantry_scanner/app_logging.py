"""Logging configuration helpers."""

import logging

LOGGER_NAME = "pantry_scanner"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach one stream handler to the package logger and set its level."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s")
        )
        logger.addHandler(handler)
        logger.propagate = False
    return logger
