"""
utils/logger.py
---------------
Centralized logging configuration.
Modules call `get_logger(__name__)`; the first call installs a stdout
handler on the root logger at `config.LOG_LEVEL`. Statement text is
logged at DEBUG by the connection pool, so set LOG_LEVEL=DEBUG to trace
every query.
"""

import logging
import logging.config

from config import LOG_LEVEL

_LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "stdout": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "stream": "ext://sys.stdout",
        },
    },
    "root": {"level": LOG_LEVEL, "handlers": ["stdout"]},
}
_configured = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger, configuring logging on first use.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    global _configured
    if not _configured:
        logging.config.dictConfig(_LOGGING)
        _configured = True
    return logging.getLogger(name)
