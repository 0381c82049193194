# File: src/dotpath/base/test_keypath.py

import pytest

from dotpath.base.keypath import as_key_list, has_delimiter, normalize_keypath, split_keypath


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("a", ("a",)),
        ("a.b.c", ("a", "b", "c")),
        ("", ("",)),
        ("a..b", ("a", "", "b")),
        (".a", ("", "a")),
        ("users.0.name", ("users", "0", "name")),
    ],
)
def test_split_keypath(path: str, expected: tuple[str, ...]) -> None:
    assert split_keypath(path) == expected


def test_normalize_keypath_accepts_pre_split_sequences() -> None:
    assert normalize_keypath("a.b") == ("a", "b")
    assert normalize_keypath(["a.b", "c"]) == ("a.b", "c")
    assert normalize_keypath(("x", 1)) == ("x", "1")  # type: ignore[arg-type]
    assert normalize_keypath([]) == ()


def test_normalize_keypath_rejects_other_types() -> None:
    with pytest.raises(TypeError, match="Keypath must be a str"):
        normalize_keypath(12)  # type: ignore[arg-type]


def test_has_delimiter() -> None:
    assert has_delimiter("a.b")
    assert not has_delimiter("ab")


@pytest.mark.parametrize(
    ("keys", "expected"),
    [
        (None, []),
        ("a.b", ["a.b"]),
        (3, [3]),
        (["a", "b"], ["a", "b"]),
        (("a",), ["a"]),
    ],
)
def test_as_key_list(keys: object, expected: list[object]) -> None:
    assert as_key_list(keys) == expected  # type: ignore[arg-type]


# End of file: src/dotpath/base/test_keypath.py
