# File: src/dotpath/base/container_probe.py
"""
Predicates deciding what counts as a container and whether a key is present.

Three kinds of value are containers:

- mappings (``collections.abc.Mapping``),
- sequences other than strings and bytes (``collections.abc.Sequence``),
- any other object implementing ``__contains__`` and ``__getitem__``
  (the ``KeyedAccess`` protocol).

Presence is about the key, not the value: ``{"a": None}`` has ``"a"``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from dotpath.base.types import MISSING, STRING_LIKE_TYPES, KeyedAccess


__all__ = [
    "accessible",
    "exists",
    "is_mapping",
    "is_native_container",
    "is_sequence",
    "resolve_key",
    "sequence_index",
]


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_sequence(value: Any) -> bool:
    """Return True for list-like values; strings and bytes are scalars."""
    return isinstance(value, Sequence) and not isinstance(value, STRING_LIKE_TYPES)


def is_native_container(value: Any) -> bool:
    """Return True for mappings and non-string sequences."""
    return is_mapping(value) or is_sequence(value)


def accessible(value: Any) -> bool:
    """Return True if ``value`` can be descended into by key."""
    if is_native_container(value):
        return True
    if isinstance(value, STRING_LIKE_TYPES):
        return False
    return isinstance(value, KeyedAccess)


def sequence_index(key: Any) -> int | None:
    """
    Interpret a segment as a sequence position.

    Accepts ints (not bools) and strings spelling a base-10 integer.
    Returns None when the key cannot be a position.
    """
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str):
        text = key[1:] if key.startswith("-") else key
        if text.isdigit() and text.isascii():
            return int(key)
    return None


def resolve_key(container: Any, key: Any) -> Any:
    """
    Return the concrete key under which ``key`` is stored in ``container``.

    - Mappings: the key itself if present, else its integer spelling if that
      is present (``"1"`` finds ``{1: ...}``).
    - Sequences: the integer position when ``0 <= i < len(container)``.
    - KeyedAccess: the key itself if ``key in container``.

    :return: The stored key, or ``MISSING`` when absent.
    """
    if is_mapping(container):
        if key in container:
            return key
        index = sequence_index(key) if isinstance(key, str) else None
        if index is not None and index in container:
            return index
        return MISSING
    if is_sequence(container):
        index = sequence_index(key)
        if index is not None and 0 <= index < len(container):
            return index
        return MISSING
    if isinstance(container, KeyedAccess) and not isinstance(container, STRING_LIKE_TYPES):
        return key if key in container else MISSING
    return MISSING


def exists(container: Any, key: Any) -> bool:
    """Return True if ``key`` is present in ``container``."""
    try:
        return resolve_key(container, key) is not MISSING
    except TypeError:
        # unhashable key probed against a mapping
        return False


# End of file: src/dotpath/base/container_probe.py
