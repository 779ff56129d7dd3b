from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
PACKAGE_LOGGER = __name__.rsplit(".", 2)[0]
HANDLER_NAME = "school_attendance.console"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Safe to call more than once (e.g. one Flask app per test).
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
