"""
Logging Configuration
=====================
cachematrix is a library: it only emits records on the ``cachematrix``
logger and leaves routing them to the host application. The package
installs a ``NullHandler`` on import so nothing is printed unless the
application configures logging.

``setup_logging`` is an opt-in helper for scripts and notebooks that want to
see the cache hits, misses and invalidations without writing their own
logging setup. It only ever replaces handlers it installed itself.
"""
import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "cachematrix"

# Marks handlers created by setup_logging so re-running it leaves foreign ones alone
_OWNED_ATTR = "_cachematrix_owned"


def _owned(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _OWNED_ATTR, True)
    return handler


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach console (and optionally file) output to the 'cachematrix' logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path; records are appended to it.
        stream: Console stream, ``sys.stdout`` by default.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, _OWNED_ATTR, False):
            logger.removeHandler(handler)
            handler.close()

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = _owned(logging.StreamHandler(stream or sys.stdout))
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = _owned(logging.FileHandler(log_file, mode='a', encoding='utf-8'))
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging configured at level {logging.getLevelName(level)}.")
    return logger
