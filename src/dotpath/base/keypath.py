# File: src/dotpath/base/keypath.py
"""
Splitting of dot-separated keypaths into segments.

A keypath such as ``"tool.setuptools.packages"`` addresses a value nested
inside mappings and sequences. The delimiter is fixed; a key that itself
contains a ``.`` can only be reached by an exact top-level match, which the
accessors try before splitting.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Final

from dotpath.base.types import Keypath, Keys


__all__ = [
    "DELIMITER",
    "as_key_list",
    "has_delimiter",
    "normalize_keypath",
    "split_keypath",
]

DELIMITER: Final[str] = "."


def split_keypath(path: str) -> tuple[str, ...]:
    """
    Split a keypath into its segments.

    A path without a delimiter comes back as a single segment, and the empty
    string is a single empty segment (an ordinary key that rarely matches).

    :param path: Dot-separated keypath, e.g. ``"a.b.c"``.
    :return: Ordered segments, e.g. ``("a", "b", "c")``.
    """
    if DELIMITER not in path:
        return (path,)
    return tuple(path.split(DELIMITER))


def normalize_keypath(path: Keypath) -> tuple[str, ...]:
    """Return the segments of a keypath given either as a string or pre-split."""
    if isinstance(path, str):
        return split_keypath(path)
    if isinstance(path, Sequence):
        return tuple(str(segment) for segment in path)
    raise TypeError(f"Keypath must be a str or a sequence of str (got {type(path).__name__})")


def has_delimiter(path: str) -> bool:
    return DELIMITER in path


def as_key_list(keys: Keys | int | None) -> list[Any]:
    """Normalize a single key, a collection of keys, or None into a list."""
    if keys is None:
        return []
    if isinstance(keys, (str, int)):
        return [keys]
    return list(keys)


# End of file: src/dotpath/base/keypath.py
