"""
package: dotpath.xlogging
"""

# <AUTOGEN_INIT>
from dotpath.xlogging import (
    core_logger,
    logger_constants,
    logger_factory,
    logger_formatter,
    logger_util,
)
from dotpath.xlogging.core_logger import CoreLogger, initialize_root
from dotpath.xlogging.logger_factory import create_logger


__all__ = [
    "CoreLogger",
    "core_logger",
    "create_logger",
    "initialize_root",
    "logger_constants",
    "logger_factory",
    "logger_formatter",
    "logger_util",
]
# </AUTOGEN_INIT>
