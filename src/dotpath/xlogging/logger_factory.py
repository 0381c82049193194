# File: src/dotpath/xlogging/logger_factory.py
"""
Factory for CoreLogger instances registered in the logging hierarchy.
"""

import logging

from dotpath.xlogging.core_logger import CoreLogger


def create_logger(name: str, *, level: int | str | None = None) -> CoreLogger:
    """
    Return the CoreLogger registered under ``name``, creating it if needed.

    The logger is created through ``logging.getLogger()`` so that it gets a
    parent and propagates like any other logger (caplog relies on this).

    :param name: Logger name, normally ``__name__``.
    :param level: Optional explicit level overriding the environment.
    :raises TypeError: If a plain Logger already holds the name.
    """
    existing = logging.Logger.manager.loggerDict.get(name)
    if isinstance(existing, CoreLogger):
        logger = existing
    else:
        logging_class = logging.getLoggerClass()
        logging.setLoggerClass(CoreLogger)
        try:
            logger = logging.getLogger(name)
        finally:
            logging.setLoggerClass(logging_class)
        if not isinstance(logger, CoreLogger):
            raise TypeError(f"Logger {name!r} already exists as {type(logger).__name__}")
    if level is not None:
        logger.setLevel(level)
    return logger


# End of file: src/dotpath/xlogging/logger_factory.py
