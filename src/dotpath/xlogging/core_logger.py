# File: src/dotpath/xlogging/core_logger.py
"""
Logger class for dotpath with environment-driven levels.

Example:
    >>> from dotpath.xlogging.logger_factory import create_logger
    >>> logger = create_logger(__name__)
    >>> with logger.prefix_with("[keypath_set]"):
    ...     logger.debug("replacing %r", "a.b")

Design:
- Only the root logger owns handlers; CoreLogger instances propagate.
- initialize_root() is the only entry point for root setup, and it only
  manages one stderr handler. Handlers owned by the host application are
  never touched.
- Levels come from LogLevelConfig; a library logger never sits below the
  root's effective level unless the root is lowered explicitly.
"""

from __future__ import annotations

import contextvars
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, TextIO

from dotpath.xlogging.logger_constants import TRACE, initialize_logger_constants
from dotpath.xlogging.logger_formatter import CoreFormatter
from dotpath.xlogging.logger_util import LogLevelConfig, parse_level


__all__: list[str] = [
    "CoreLogger",
    "initialize_root",
]

_LOG_ROOT_ATTR_NAME = "_dotpath_corelogger_initialized"

_log_prefix: contextvars.ContextVar[str] = contextvars.ContextVar("log_prefix", default="")


class CoreLogger(logging.Logger):
    """
    logging.Logger with a TRACE level, environment-driven level resolution,
    and a context manager for scoped message prefixes.
    """

    def __init__(self, name: str, level: int | str = logging.NOTSET) -> None:
        """
        :param name: Logger name, normally the module's ``__name__``.
        :param level: Explicit level; NOTSET resolves the level from the environment.
        """
        initialize_logger_constants()
        if level in (logging.NOTSET, "NOTSET", ""):
            level = LogLevelConfig.get_instance().get_effective_level(name)
        super().__init__(name, level)

        root_level = logging.getLogger().getEffectiveLevel()
        if self.level < root_level:
            self.setLevel(root_level)

    def __repr__(self) -> str:
        level = self.getEffectiveLevel()
        return f"<{self.__class__.__name__} '{self.name}' {logging.getLevelName(level)}={level}>"

    def _log(self, level: int, msg: object, args: Any, *pargs: Any, **kwargs: Any) -> None:
        prefix = _log_prefix.get()
        if prefix:
            msg = f"{prefix}{msg}"
        kwargs["stacklevel"] = kwargs.get("stacklevel", 1) + 1
        super()._log(level, msg, args, *pargs, **kwargs)

    def trace(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Log a message at TRACE level (below DEBUG)."""
        if self.isEnabledFor(TRACE):
            kwargs["stacklevel"] = kwargs.get("stacklevel", 1) + 1  # this frame
            self._log(TRACE, msg, args, **kwargs)

    @contextmanager
    def prefix_with(self, prefix: str) -> Iterator[None]:
        """
        Prefix every message logged within the current context.

        Nested prefixes accumulate; state lives in a contextvar, so threads
        and tasks do not see each other's prefixes.
        """
        current = _log_prefix.get()
        token = _log_prefix.set(f"{current}{prefix} > ")
        try:
            yield
        finally:
            _log_prefix.reset(token)


def initialize_root(
    fmt: str | None = None,
    datefmt: str | None = None,
    level: int | str | None = None,
    force: bool = False,
    stream: TextIO | None = None,
) -> None:
    """
    Idempotently configure the root logger for CoreLogger output.

    - Ensures exactly one handler on ``stream`` (default stderr) uses CoreFormatter.
    - ``force=True`` removes and recreates that handler.
    - Sets the root level to ``level`` if given, else WARNING if the root is NOTSET.

    :param fmt: Format string for CoreFormatter.
    :param datefmt: Date format for CoreFormatter.
    :param level: Root level (int or name).
    :param force: Reinitialize even if already initialized.
    :param stream: Target stream; defaults to ``sys.stderr``.
    """
    root = logging.getLogger()
    if getattr(root, _LOG_ROOT_ATTR_NAME, False) and not force:
        return
    setattr(root, _LOG_ROOT_ATTR_NAME, True)
    initialize_logger_constants()

    target = stream or sys.stderr
    owned = [
        h for h in root.handlers if isinstance(h, logging.StreamHandler) and h.stream is target
    ]
    if force:
        for h in owned:
            root.removeHandler(h)
        owned = []
    if not owned:
        handler = logging.StreamHandler(target)
        handler.setFormatter(CoreFormatter(fmt, datefmt))
        root.addHandler(handler)
    elif not any(isinstance(h.formatter, CoreFormatter) for h in owned):
        owned[0].setFormatter(CoreFormatter(fmt, datefmt))

    if level is not None:
        numeric = parse_level(level) if isinstance(level, str) else level
        root.setLevel(numeric if numeric is not None else logging.WARNING)
    elif root.level == logging.NOTSET:
        root.setLevel(logging.WARNING)


# End of file: src/dotpath/xlogging/core_logger.py
