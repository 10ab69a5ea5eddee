import logging
import os
from functools import wraps

_TRACE_LOGGER = logging.getLogger("hvswitch.trace")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logger(level: int = logging.WARNING, name: str = "hvswitch") -> logging.Logger:
    """
    Ensure the hvswitch logger has a handler in case the app didn't configure logging.
    Safe to call multiple times.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def trace_enabled() -> bool:
    val = os.getenv("HVSWITCH_TRACE", "0")
    return str(val).lower() not in {"", "0", "false", "no"}


def trace(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        if trace_enabled():
            _TRACE_LOGGER.debug("Entering %s", func.__qualname__)
        result = func(*args, **kwargs)
        if trace_enabled():
            _TRACE_LOGGER.debug("Exiting %s", func.__qualname__)
        return result
    return wrapper
