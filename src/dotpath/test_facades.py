# File: src/dotpath/test_facades.py
"""
Tests for the Arr and Str registry-dispatch wrappers.
"""

from __future__ import annotations

import json

import pytest

from dotpath.base.errors import UnknownOperationError
from dotpath.facades import ARR_OPERATIONS, STR_OPERATIONS, Arr, Str


# ----------------------------------------------------------------------
# Arr
# ----------------------------------------------------------------------


def test_arr_dispatches_keypath_operations() -> None:
    arr = Arr.create_from({"user": {"name": "ada"}})
    assert arr.get("user.name") == "ada"
    assert arr.get("user.email", "none") == "none"
    assert arr.has("user.name") is True
    assert arr.has_any(["user.email", "user.name"]) is True


def test_arr_accepts_camel_case_names() -> None:
    arr = Arr.create_from({"a": 1, "b": 2})
    assert arr.hasAny(["x", "b"]) is True
    assert arr.acceptValues([2]) == {"b": 2}


def test_arr_set_and_forget_are_chainable_and_in_place() -> None:
    data = {"a": {"b": 1}}
    arr = Arr(data)
    result = arr.set("a.c", 2).forget("a.b")
    assert result is arr
    assert arr.all() == {"a": {"c": 2}}
    assert data == {"a": {"c": 2}}


def test_arr_set_with_none_path_rebinds_storage() -> None:
    arr = Arr({"a": 1})
    arr.set(None, {"b": 2})
    assert arr.all() == {"b": 2}


def test_arr_keyword_named_operation() -> None:
    arr = Arr({"a": 1, "b": 2})
    assert getattr(arr, "except")("a") == {"b": 2}


def test_arr_native_style_operations() -> None:
    arr = Arr([3, 1, 3, 2])
    assert arr.count() == 4
    assert arr.keys() == [0, 1, 2, 3]
    assert arr.values() == [3, 1, 3, 2]
    assert arr.reverse() == [2, 3, 1, 3]
    assert arr.sum() == 9
    assert arr.unique() == [3, 1, 2]
    assert Arr({"x": 1, "y": 1, "z": 2}).unique() == {"x": 1, "z": 2}


def test_arr_collection_operations() -> None:
    rows = Arr([{"id": 1, "tags": ["a"]}, {"id": 2, "tags": ["b", "c"]}])
    assert rows.pluck("id") == [1, 2]
    assert rows.pluck("tags", "id") == {1: ["a"], 2: ["b", "c"]}
    assert Arr([[1], [2, [3]]]).flatten(1) == [1, 2, [3]]
    assert Arr([[1], [2]]).collapse() == [1, 2]


def test_arr_unknown_operation_raises() -> None:
    arr = Arr([])
    with pytest.raises(UnknownOperationError) as excinfo:
        arr.doesNotExist()
    assert str(excinfo.value) == "Arr.doesNotExist doesn't exist"
    assert not hasattr(arr, "nope")


def test_arr_defaults_to_empty_list_and_serializes_as_json() -> None:
    assert Arr().all() == []
    arr = Arr({"a": [1, 2]})
    assert json.loads(str(arr)) == {"a": [1, 2]}
    assert repr(arr) == "Arr({'a': [1, 2]})"


def test_arr_dir_lists_operations() -> None:
    listing = dir(Arr([]))
    assert "pluck" in listing
    assert "all" in listing


def test_arr_registry_is_fixed() -> None:
    for name in ("get", "set", "forget", "has", "has_any", "pluck", "flatten", "collapse"):
        assert name in ARR_OPERATIONS


# ----------------------------------------------------------------------
# Str
# ----------------------------------------------------------------------


@pytest.mark.parametrize(
    ("operation", "expected"),
    [
        ("snake", "foo_bar_baz"),
        ("kebab", "foo-bar-baz"),
        ("camel", "fooBarBaz"),
        ("pascal", "FooBarBaz"),
        ("title", "Foo Bar Baz"),
        ("upper", "FOOBAR BAZ"),
        ("lower", "foobar baz"),
    ],
)
def test_str_case_operations(operation: str, expected: str) -> None:
    assert getattr(Str.create_from("fooBar baz"), operation)() == expected


def test_str_case_convert_and_predicates() -> None:
    text = Str("fooBar")
    assert text.caseConvert("kebab") == "foo-bar"
    assert text.length() == 6
    assert text.startsWith(["x", "foo"]) is True
    assert text.endsWith("baz") is False
    assert text.contains(["foo", "Bar"]) is True
    assert text.containsAny(["zzz", "oB"]) is True
    assert text.wrapWith("/") == "/fooBar/"


def test_str_unknown_case_raises() -> None:
    with pytest.raises(UnknownOperationError):
        Str("x").case_convert("sponge")


def test_str_none_becomes_empty() -> None:
    assert str(Str(None)) == ""
    assert Str.create_from(None).length() == 0
    assert "snake" in STR_OPERATIONS


# End of file: src/dotpath/test_facades.py
