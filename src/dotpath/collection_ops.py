# File: src/dotpath/collection_ops.py
"""
Bulk operations over iterables of containers.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from dotpath.base.container_probe import is_mapping, is_native_container
from dotpath.base.types import PLAIN_KEY_TYPES, Keypath
from dotpath.nested_access import keypath_get


__all__ = [
    "collapse",
    "flatten",
    "pluck",
]


def _values(container: Any) -> list[Any]:
    return list(container.values()) if is_mapping(container) else list(container)


def _plain_key(value: Any) -> Any:
    """Use plain scalars as-is; stringify anything else."""
    if isinstance(value, PLAIN_KEY_TYPES):
        return value
    return str(value)


def pluck(
    items: Iterable[Any],
    value_path: Keypath | None,
    key_path: Keypath | None = None,
) -> list[Any] | dict[Any, Any]:
    """
    Collect the value at ``value_path`` from each item.

    Without ``key_path`` the values come back as a list in input order. With
    it, they come back as a dict keyed by the value at ``key_path`` in the
    same item; later items win on duplicate keys.

    >>> rows = [{"id": 1, "name": "a"}, {"id": 2, "name": "b"}]
    >>> pluck(rows, "name")
    ['a', 'b']
    >>> pluck(rows, "name", "id")
    {1: 'a', 2: 'b'}
    """
    if key_path is None:
        return [keypath_get(item, value_path) for item in items]

    results: dict[Any, Any] = {}
    for item in items:
        results[_plain_key(keypath_get(item, key_path))] = keypath_get(item, value_path)
    return results


def flatten(items: Iterable[Any], depth: int) -> list[Any]:
    """
    Flatten nested containers into one list, ``depth`` levels deep.

    Mappings contribute their values. At ``depth == 1`` each nested
    container's values are taken as-is; deeper levels recurse. A depth of
    zero or less never reaches 1 and so flattens completely.

    >>> flatten([[1, 2], [3, [4, 5]]], 1)
    [1, 2, 3, [4, 5]]
    >>> flatten([[1, 2], [3, [4, 5]]], 2)
    [1, 2, 3, 4, 5]
    """
    result: list[Any] = []
    for item in items:
        if not is_native_container(item):
            result.append(item)
        elif depth == 1:
            result.extend(_values(item))
        else:
            result.extend(flatten(_values(item), depth - 1))
    return result


def collapse(items: Iterable[Any]) -> list[Any] | dict[Any, Any]:
    """
    Merge every container in ``items`` into a single container.

    Non-containers are skipped. Sequence elements and integer mapping keys
    are appended and renumbered; string keys overwrite earlier ones. The
    result is a list unless some string key was merged.

    >>> collapse([[1, 2], "skip", [3]])
    [1, 2, 3]
    >>> collapse([{"a": 1}, {"a": 2, "b": 3}])
    {'a': 2, 'b': 3}
    """
    merged: dict[Any, Any] = {}
    next_index = 0
    keyed = False
    for item in items:
        if not is_native_container(item):
            continue
        pairs = item.items() if isinstance(item, Mapping) else enumerate(item)
        for key, value in pairs:
            if isinstance(key, int) and not isinstance(key, bool):
                merged[next_index] = value
                next_index += 1
            else:
                merged[key] = value
                keyed = True
    if not keyed:
        return list(merged.values())
    return merged


# End of file: src/dotpath/collection_ops.py
