import logging

from ..config import LOG_LEVEL

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name="ceramics_trade", level=None):
    """
    Return the package logger with a single stream handler attached.

    Module loggers (``logging.getLogger(__name__)``) under ``ceramics_trade.*``
    propagate here, so calling this once at start-up is enough.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level or LOG_LEVEL)
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(ch)
    elif level is not None:
        logger.setLevel(level)
    return logger
