"""Logging setup for the carb_analysis package logger."""

import logging

PACKAGE_LOGGER = "carb_analysis"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Attach one stream handler to the package logger and set its level.

    ``level`` accepts a number or a name such as ``"DEBUG"``. Repeated calls
    only update the level.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if any(h.get_name() == PACKAGE_LOGGER for h in logger.handlers):
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.set_name(PACKAGE_LOGGER)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
