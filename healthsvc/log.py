import logging
import os


def get_logger(name: str = "healthsvc") -> logging.Logger:
    """Return the service logger, configured once from LOG_LEVEL."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        _level = os.getenv("LOG_LEVEL", "INFO").upper()
        logger.setLevel(getattr(logging, _level, logging.INFO))
        _h = logging.StreamHandler()
        _h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(_h)
    return logger


LOGGER = get_logger()
