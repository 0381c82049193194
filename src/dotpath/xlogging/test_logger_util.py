# File: src/dotpath/xlogging/test_logger_util.py
"""
Tests for DOTPATH_LOG_LEVELS parsing and level resolution.
"""

from __future__ import annotations

import logging

import pytest

from dotpath.xlogging.logger_constants import TRACE
from dotpath.xlogging.logger_util import (
    LogLevelConfig,
    PatternLevel,
    module_from_env_name,
    parse_level,
    parse_levels_dsl,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("debug", logging.DEBUG),
        (" INFO ", logging.INFO),
        ("'warning'", logging.WARNING),
        ("trace", TRACE),
        ("15", 15),
        ("NOTSET", None),
        ("bogus", None),
        ("", None),
    ],
)
def test_parse_level(text: str, expected: int | None) -> None:
    assert parse_level(text) == expected


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("DOTPATH_LOG_LEVEL", ""),
        ("DOTPATH_LOG_LEVEL_ROOT", ""),
        ("DOTPATH_LOG_LEVEL_DOTPATH", "dotpath"),
        ("DOTPATH_LOG_LEVEL_DOTPATH_NESTED__ACCESS", "dotpath.nested_access"),
        ("DOTPATH_LOG_LEVELS", None),
        ("DOTPATH_LOG_LEVEL_lower", None),
        ("OTHER_LOG_LEVEL_X", None),
    ],
)
def test_module_from_env_name(name: str, expected: str | None) -> None:
    assert module_from_env_name(name) == expected


def test_parse_levels_dsl_fragments() -> None:
    entries = list(parse_levels_dsl("a.b:DEBUG; c=INFO, WARNING  bad:NOPE root:ERROR"))
    assert entries == [
        PatternLevel("a.b", logging.DEBUG),
        PatternLevel("c", logging.INFO),
        PatternLevel("", logging.WARNING),
        PatternLevel("", logging.ERROR),
    ]


def test_parse_levels_dsl_relative_to_module() -> None:
    assert list(parse_levels_dsl("TRACE; sub:INFO", module="pkg")) == [
        PatternLevel("pkg", TRACE),
        PatternLevel("pkg.sub", logging.INFO),
    ]


def test_effective_level_precedence() -> None:
    config = LogLevelConfig(
        {
            "app": logging.INFO,
            "app.core": logging.DEBUG,
            "lib.*": logging.ERROR,
            "lib.core.*": TRACE,
            "": logging.CRITICAL,
        }
    )
    assert config.get_effective_level("app.core") == logging.DEBUG
    assert config.get_effective_level("App.Core") == logging.DEBUG
    assert config.get_effective_level("app.core.db") == logging.DEBUG
    assert config.get_effective_level("app.web") == logging.INFO
    assert config.get_effective_level("lib.web") == logging.ERROR
    assert config.get_effective_level("lib.core.db") == TRACE
    assert config.get_effective_level("other") == logging.CRITICAL


def test_effective_level_fallback() -> None:
    config = LogLevelConfig()
    assert config.pattern_to_level == {}
    assert config.get_effective_level("anything") == logging.WARNING
    assert config.get_effective_level("anything", default=logging.INFO) == logging.INFO


def test_environment_sources(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOTPATH_LOG_LEVELS", "dotpath:INFO; dotpath.nested_access:ERROR")
    monkeypatch.setenv("DOTPATH_LOG_LEVEL_DOTPATH_NESTED__ACCESS", "TRACE")
    config = LogLevelConfig()
    assert config.get_effective_level("dotpath.predicates") == logging.INFO
    assert config.get_effective_level("dotpath.nested_access") == TRACE


def test_instance_is_shared_until_reset(monkeypatch: pytest.MonkeyPatch) -> None:
    first = LogLevelConfig.get_instance()
    assert LogLevelConfig.get_instance() is first

    monkeypatch.setenv("DOTPATH_LOG_LEVELS", "DEBUG")
    LogLevelConfig.reset_instance()
    second = LogLevelConfig.get_instance()
    assert second is not first
    assert second.get_effective_level("x") == logging.DEBUG


# End of file: src/dotpath/xlogging/test_logger_util.py
