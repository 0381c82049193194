# File: src/dotpath/base/test_container_probe.py
"""
Tests for container classification and key resolution.
"""

from __future__ import annotations

from collections import OrderedDict, UserDict, UserList
from types import MappingProxyType
from typing import Any

import pytest

from dotpath.base.container_probe import (
    accessible,
    exists,
    is_native_container,
    is_sequence,
    resolve_key,
    sequence_index,
)
from dotpath.base.types import MISSING


class Lookup:
    def __init__(self, data: dict[str, Any]) -> None:
        self._data = data

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __getitem__(self, key: str) -> Any:
        return self._data[key]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ({}, True),
        ([], True),
        ((1,), True),
        (OrderedDict(), True),
        (UserDict(), True),
        (UserList(), True),
        (MappingProxyType({}), True),
        (range(3), True),
        (Lookup({}), True),
        ("text", False),
        (b"bytes", False),
        (bytearray(b"x"), False),
        (None, False),
        (42, False),
        ({1, 2}, False),
        (object(), False),
    ],
)
def test_accessible(value: object, expected: bool) -> None:
    assert accessible(value) is expected


def test_native_container_excludes_keyed_access_objects() -> None:
    assert is_native_container({"a": 1})
    assert is_native_container([1])
    assert not is_native_container(Lookup({}))
    assert not is_sequence("abc")


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        (0, 0),
        (5, 5),
        ("3", 3),
        ("-1", -1),
        ("007", 7),
        ("1.5", None),
        ("", None),
        ("-", None),
        ("x", None),
        ("٣", None),
        (True, None),
        (None, None),
    ],
)
def test_sequence_index(key: object, expected: int | None) -> None:
    assert sequence_index(key) == expected


def test_resolve_key_mappings() -> None:
    assert resolve_key({"a": 1}, "a") == "a"
    assert resolve_key({1: "one"}, "1") == 1
    assert resolve_key({"1": "str", 1: "int"}, "1") == "1"
    assert resolve_key({"a": 1}, "b") is MISSING


def test_resolve_key_sequences() -> None:
    items = ["a", "b"]
    assert resolve_key(items, "0") == 0
    assert resolve_key(items, 1) == 1
    assert resolve_key(items, "2") is MISSING
    assert resolve_key(items, "-1") is MISSING
    assert resolve_key(items, "name") is MISSING


def test_resolve_key_other_values() -> None:
    assert resolve_key(Lookup({"k": None}), "k") == "k"
    assert resolve_key(Lookup({}), "k") is MISSING
    assert resolve_key("abc", "0") is MISSING
    assert resolve_key(None, "a") is MISSING


def test_exists_is_about_keys_not_values() -> None:
    assert exists({"a": None}, "a") is True
    assert exists({"a": 0}, "b") is False
    assert exists([None], "0") is True


def test_exists_unhashable_key_is_false() -> None:
    assert exists({"a": 1}, ["a"]) is False


# End of file: src/dotpath/base/test_container_probe.py
