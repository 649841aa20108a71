"""Logging setup for the service."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_HANDLER_NAME = "financial_statements"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a stream handler to the package logger and set its level.

    Safe to call more than once; the handler is only added the
    first time.
    """
    logger = logging.getLogger("financial_statements")
    logger.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
