# File: src/dotpath/predicates.py
"""
Presence checks for one or more keypaths.
"""

from __future__ import annotations

from typing import Any

from dotpath.base.container_probe import exists
from dotpath.base.keypath import as_key_list, split_keypath
from dotpath.base.types import MISSING, Keys
from dotpath.nested_access import walk_segments


__all__ = [
    "keypath_has",
    "keypath_has_any",
]


def _resolves(container: Any, key: Any) -> bool:
    if exists(container, key):
        return True
    return walk_segments(container, split_keypath(str(key))) is not MISSING


def keypath_has(container: Any, keys: Keys | int) -> bool:
    """
    Return True if every keypath in ``keys`` resolves in ``container``.

    A keypath resolves if it is a top-level key verbatim or if every segment
    exists along the walk. An empty container or an empty key list is False.
    """
    key_list = as_key_list(keys)
    if not container or not key_list:
        return False
    return all(_resolves(container, key) for key in key_list)


def keypath_has_any(container: Any, keys: Keys | int | None) -> bool:
    """Return True if at least one keypath in ``keys`` resolves in ``container``."""
    key_list = as_key_list(keys)
    if not container or not key_list:
        return False
    return any(keypath_has(container, key) for key in key_list)


# End of file: src/dotpath/predicates.py
