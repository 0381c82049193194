# File: src/dotpath/conftest.py
"""
Shared fixtures: isolate DOTPATH_* environment variables and logging state.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

import pytest

from dotpath.base import config as cfg
from dotpath.xlogging import logger_util as lu
from dotpath.xlogging.logger_formatter import CoreFormatter
from dotpath.xlogging.logger_util import LogLevelConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear DOTPATH_* and NO_COLOR, skip .env loading, and reset the level singleton."""
    monkeypatch.setattr(cfg, "load_environment", lambda: False)
    monkeypatch.setattr(lu, "load_environment", lambda: False)
    for key in [k for k in os.environ if k.startswith("DOTPATH_") or k == "NO_COLOR"]:
        monkeypatch.delenv(key, raising=False)
    LogLevelConfig.reset_instance()
    cfg.color_enabled(unset_override=True)
    yield
    LogLevelConfig.reset_instance()
    cfg.color_enabled(unset_override=True)


@pytest.fixture
def clean_logging() -> Iterator[logging.Logger]:
    """
    Reset the root logger level and init flag around a test, and remove any
    CoreFormatter handlers the test installed. Yields the root logger.
    """
    root = logging.getLogger()
    prev_level = root.level
    prev_handlers = set(root.handlers)
    prev_attr = getattr(root, "_dotpath_corelogger_initialized", None)

    root.setLevel(logging.WARNING)
    if hasattr(root, "_dotpath_corelogger_initialized"):
        delattr(root, "_dotpath_corelogger_initialized")

    yield root

    for handler in list(root.handlers):
        if handler not in prev_handlers and isinstance(handler.formatter, CoreFormatter):
            root.removeHandler(handler)
    root.setLevel(prev_level)
    if prev_attr is not None:
        setattr(root, "_dotpath_corelogger_initialized", prev_attr)
    elif hasattr(root, "_dotpath_corelogger_initialized"):
        delattr(root, "_dotpath_corelogger_initialized")


# End of file: src/dotpath/conftest.py
