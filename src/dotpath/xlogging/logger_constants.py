# File: src/dotpath/xlogging/logger_constants.py

import logging


TRACE = logging.DEBUG - 1  # (9) LOG.trace() will not output at DEBUG level

ENV_LOG_LEVELS = "DOTPATH_LOG_LEVELS"
ENV_LOG_LEVEL_PREFIX = "DOTPATH_LOG_LEVEL"


_logging_constants_initialized = False


def initialize_logger_constants() -> None:
    """Register custom logging levels if not already registered."""
    global _logging_constants_initialized
    if _logging_constants_initialized:
        return
    _logging_constants_initialized = True
    if "TRACE" not in logging.getLevelNamesMapping():
        logging.addLevelName(TRACE, "TRACE")


# End of file: src/dotpath/xlogging/logger_constants.py
