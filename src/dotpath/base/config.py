# File: src/dotpath/base/config.py
"""
Environment-driven settings for dotpath.

The accessors themselves take no configuration; the settings here only shape
diagnostics (log levels and colored output). Overrides are kept in
thread-local storage so that tests and embedding applications can flip a
flag on one thread without affecting others.

Exports:
- load_environment(): load the nearest ``.env`` file once.
- color_enabled(): check or override whether log output should be colored.

Environment variables:
- ``NO_COLOR``: any non-empty value disables color.
- ``DOTPATH_COLOR``: ``always``, ``never`` or ``auto`` (default).
- ``DOTPATH_LOG_LEVELS`` / ``DOTPATH_LOG_LEVEL_<MODULE>``: see
  ``dotpath.xlogging.logger_util``.
"""

from __future__ import annotations

import os
import sys
import threading
from dataclasses import dataclass
from functools import cache
from typing import TextIO

import dotenv


__all__ = [
    "color_enabled",
    "load_environment",
]

_tls = threading.local()

_COLOR_ALWAYS = {"1", "always", "on", "true", "yes"}
_COLOR_NEVER = {"0", "never", "off", "false", "no"}


@dataclass
class TLSAttrs:
    """Thread-local overrides for environment checks."""

    color_enabled_override: bool | None = None


def _get_tls() -> TLSAttrs:
    """Return the current thread's TLSAttrs instance, initializing if needed."""
    try:
        return _tls.state
    except AttributeError:
        _tls.state = TLSAttrs()
        return _tls.state


@cache
def load_environment() -> bool:
    """
    Load variables from the nearest ``.env`` file into ``os.environ``.

    Runs once per process. Variables already present in the environment are
    never overridden.

    :return: True if at least one variable was loaded from a file.
    """
    dotenv_path = dotenv.find_dotenv(usecwd=True)
    if not dotenv_path:
        return False
    return dotenv.load_dotenv(dotenv_path=dotenv_path, override=False)


def color_enabled(
    stream: TextIO | None = None,
    *,
    unset_override: bool = False,
    override: bool | None = None,
) -> bool:
    """
    Decide whether log output written to ``stream`` should carry ANSI colors.

    Rules, first match wins:
      1. Explicit override (thread-local).
      2. ``NO_COLOR`` set to any non-empty value: off.
      3. ``DOTPATH_COLOR`` set to an always/never spelling.
      4. ``stream`` (default: ``sys.stderr``) is a terminal.

    :param stream: Stream the output is destined for.
    :param unset_override: If True, clears any prior override for this thread.
    :param override: If True or False, sets the override for this thread.
    """
    tls = _get_tls()
    if unset_override:
        tls.color_enabled_override = None
    if override is not None:
        tls.color_enabled_override = override
        return override
    if tls.color_enabled_override is not None:
        return tls.color_enabled_override

    load_environment()
    if os.environ.get("NO_COLOR"):
        return False
    setting = os.environ.get("DOTPATH_COLOR", "auto").strip().lower()
    if setting in _COLOR_ALWAYS:
        return True
    if setting in _COLOR_NEVER:
        return False

    target = stream if stream is not None else sys.stderr
    isatty = getattr(target, "isatty", None)
    return bool(isatty and isatty())


# End of file: src/dotpath/base/config.py
