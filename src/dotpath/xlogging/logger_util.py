# File: src/dotpath/xlogging/logger_util.py
"""
Environment variable-driven log level configuration.

Two sources are supported:
- Pattern-based DSL strings in DOTPATH_LOG_LEVELS, e.g.
  ``"dotpath.nested_access:TRACE; dotpath.*=DEBUG, INFO"``
- Per-logger overrides in variables like DOTPATH_LOG_LEVEL_DOTPATH_NESTED__ACCESS
  (``__`` stands for ``_`` and ``_`` for ``.`` in the module name)

Precedence when resolving a logger name: exact > ancestor > glob > default.
"""

from __future__ import annotations

import fnmatch
import logging
import os
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Final, NamedTuple

from dotpath.base.config import load_environment
from dotpath.xlogging.logger_constants import (
    ENV_LOG_LEVEL_PREFIX,
    ENV_LOG_LEVELS,
    initialize_logger_constants,
)


__all__ = ["LogLevelConfig", "PatternLevel"]

_FRAGMENT_SEPARATOR_RX: Final[re.Pattern[str]] = re.compile(r"[;, ]+")
_ASSIGNMENT_OPERATOR_RX: Final[re.Pattern[str]] = re.compile(r"[:=]+")
_GLOB_CHARS: Final[str] = "*?["

_log_level_config_instance: LogLevelConfig | None = None


class PatternLevel(NamedTuple):
    """Mapping from a logger-name pattern to an integer log level."""

    pattern: str
    level: int


def level_names_mapping() -> dict[str, int]:
    """Uppercase level names (including TRACE) to numeric levels."""
    initialize_logger_constants()
    return {
        name.upper(): level
        for name, level in logging.getLevelNamesMapping().items()
        if isinstance(level, int)
    }


def parse_level(text: str, level_map: dict[str, int] | None = None) -> int | None:
    """Return a numeric level from a level name or decimal string, else None."""
    s = text.strip().strip("\"'")
    if not s:
        return None
    if s.isdigit():
        return int(s)
    level = (level_map or level_names_mapping()).get(s.upper())
    if level is None or level == logging.NOTSET:
        return None
    return level


def module_from_env_name(name: str) -> str | None:
    """
    Return the module a DOTPATH_LOG_LEVEL_<SUFFIX> variable targets.

    ``""`` means the default/root entry; None means the variable is unrelated.
    """
    if name == ENV_LOG_LEVEL_PREFIX:
        return ""
    prefix = ENV_LOG_LEVEL_PREFIX + "_"
    if not name.startswith(prefix):
        return None
    suffix = name[len(prefix) :]
    if not re.fullmatch(r"[A-Z][A-Z0-9_]*", suffix):
        return None
    if suffix == "ROOT":
        return ""
    return suffix.replace("__", "\0").replace("_", ".").replace("\0", "_").lower()


def parse_levels_dsl(dsl: str, *, module: str = "") -> Iterator[PatternLevel]:
    """
    Parse a DSL string into pattern/level pairs.

    A fragment is ``pattern:LEVEL``, ``pattern=LEVEL`` or a bare ``LEVEL``
    (the default entry, pattern ``""``). When ``module`` is given, patterns
    are taken relative to it.
    """
    level_map = level_names_mapping()
    for fragment in _FRAGMENT_SEPARATOR_RX.split(dsl):
        part = fragment.strip()
        if not part:
            continue
        pieces = _ASSIGNMENT_OPERATOR_RX.split(part, maxsplit=1)
        if len(pieces) == 2:
            pattern, level_text = pieces[0].strip().strip("'\""), pieces[1]
        else:
            pattern, level_text = "", pieces[0]
        level = parse_level(level_text, level_map)
        if level is None:
            continue
        if module:
            pattern = f"{module}.{pattern}" if pattern not in {"", "root"} else module
        if pattern.lower() == "root":
            pattern = ""
        yield PatternLevel(pattern, level)


@dataclass(slots=True)
class LogLevelConfig:
    """
    Resolve log levels for logger names from the environment.

    Precedence: exact > ancestor > glob > default > fallback.
    """

    pattern_to_level: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.pattern_to_level:
            self.update_from_environment()

    def update_from_environment(self) -> None:
        """Rebuild pattern->level mappings from the current environment."""
        load_environment()
        self.pattern_to_level.clear()
        dsl = os.environ.get(ENV_LOG_LEVELS, "")
        for entry in parse_levels_dsl(dsl):
            self.pattern_to_level[entry.pattern] = entry.level
        # Per-module variables override the shared DSL
        for name, value in sorted(os.environ.items()):
            module = module_from_env_name(name)
            if module is None:
                continue
            for entry in parse_levels_dsl(value, module=module):
                self.pattern_to_level[entry.pattern] = entry.level

    def get_effective_level(self, logger_name: str, *, default: int = logging.WARNING) -> int:
        """Return the configured level for a logger name."""
        name_lc = logger_name.lower()
        structural = {k.lower(): v for k, v in self.pattern_to_level.items() if k}

        # 1) Exact
        if name_lc in structural:
            return structural[name_lc]

        # 2) Ancestor
        parts = name_lc.split(".")
        while len(parts) > 1:
            parts.pop()
            ancestor = ".".join(parts)
            if ancestor in structural:
                return structural[ancestor]

        # 3) Most specific glob
        best: tuple[int, int] | None = None
        for pattern, level in structural.items():
            if not any(ch in pattern for ch in _GLOB_CHARS):
                continue
            if fnmatch.fnmatchcase(name_lc, pattern):
                score = min(
                    (i for i, ch in enumerate(pattern) if ch in _GLOB_CHARS), default=len(pattern)
                )
                if best is None or score > best[0]:
                    best = (score, level)
        if best is not None:
            return best[1]

        # 4) Default entry, else fallback
        return self.pattern_to_level.get("", default)

    @classmethod
    def get_instance(cls) -> LogLevelConfig:
        """Return the shared LogLevelConfig, creating it if needed."""
        global _log_level_config_instance
        if _log_level_config_instance is None:
            _log_level_config_instance = LogLevelConfig()
        return _log_level_config_instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared instance so the next lookup re-reads the environment."""
        global _log_level_config_instance
        _log_level_config_instance = None


# End of file: src/dotpath/xlogging/logger_util.py
