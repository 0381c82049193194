# File: src/dotpath/array_helpers.py
"""
Convenience operations over lists and dicts.

None of these functions mutate their input; each returns a new container.
"""

from __future__ import annotations

import copy
import random
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any
from urllib.parse import quote

from dotpath.base.container_probe import is_mapping, is_native_container
from dotpath.base.errors import SampleSizeError
from dotpath.base.keypath import as_key_list
from dotpath.base.lazy_default import value_of
from dotpath.base.types import MISSING, Keys
from dotpath.nested_access import keypath_forget


__all__ = [
    "accept_values",
    "append",
    "contains",
    "except_keys",
    "first",
    "items_of",
    "last",
    "only",
    "prepend",
    "query",
    "random_items",
    "slice_items",
    "wrap",
]


def items_of(array: Any) -> Iterator[tuple[Any, Any]]:
    """Yield ``(key, value)`` pairs: mapping items, or enumerated sequence elements."""
    if is_mapping(array):
        yield from array.items()
    else:
        yield from enumerate(array)


def _rebuild(array: Any, pairs: Iterable[tuple[Any, Any]]) -> Any:
    """Build a result shaped like ``array``: a dict for mappings, else a list."""
    if is_mapping(array):
        return dict(pairs)
    return [value for _, value in pairs]


def first(
    array: Iterable[Any],
    callback: Callable[[Any, Any], bool] | None = None,
    default: Any = None,
) -> Any:
    """
    Return the first value, or the first one for which ``callback(value, key)`` is true.

    The default may be a zero-argument callable; it is only called on a miss.
    """
    pairs = items_of(array) if is_native_container(array) else enumerate(array)
    for key, value in pairs:
        if callback is None or callback(value, key):
            return value
    return value_of(default)


def last(
    array: Any,
    callback: Callable[[Any, Any], bool] | None = None,
    default: Any = None,
) -> Any:
    """Return the last value, or the last one for which ``callback(value, key)`` is true."""
    pairs = list(items_of(array)) if is_native_container(array) else list(enumerate(array))
    for key, value in reversed(pairs):
        if callback is None or callback(value, key):
            return value
    return value_of(default)


def except_keys(array: Any, keys: Keys | int) -> Any:
    """Return a deep copy of ``array`` without the given keypaths."""
    result = copy.deepcopy(array)
    keypath_forget(result, keys)
    return result


def only(array: Mapping[Any, Any], keys: Keys | int) -> dict[Any, Any]:
    """Return the top-level entries whose keys are listed, in the array's order."""
    wanted = set(as_key_list(keys))
    return {key: value for key, value in items_of(array) if key in wanted}


def prepend(array: Any, value: Any, key: Any = MISSING) -> Any:
    """
    Put ``value`` at the front.

    Without ``key`` a list gains a leading element. With ``key`` the result
    is a dict whose first entry is ``key`` (an existing entry under that key
    is replaced).
    """
    if key is MISSING:
        if is_mapping(array):
            return {0: value, **{k: v for k, v in array.items() if k != 0}}
        return [value, *array]
    rest = {k: v for k, v in items_of(array) if k != key}
    return {key: value, **rest}


def append(array: Any, value: Any, key: Any = MISSING) -> Any:
    """
    Put ``value`` at the end.

    Without ``key`` a list gains a trailing element. With ``key`` the result
    is a dict; if ``key`` is already present the existing entry is kept.
    """
    if key is MISSING:
        if is_mapping(array):
            int_keys = [k for k in array if isinstance(k, int) and not isinstance(k, bool)]
            return {**array, (max(int_keys) + 1 if int_keys else 0): value}
        return [*array, value]
    result = dict(items_of(array))
    result.setdefault(key, value)
    return result


def slice_items(
    array: Any,
    offset: int,
    length: int | None = None,
    preserve_keys: bool = False,
) -> Any:
    """
    Return a slice of ``array``.

    A negative ``offset`` counts from the end; a negative ``length`` stops
    that many items before the end. String keys of a mapping are always
    kept; integer keys are renumbered unless ``preserve_keys`` is set.
    """
    pairs = list(items_of(array))
    start = offset if offset >= 0 else max(len(pairs) + offset, 0)
    if length is None:
        stop = None
    elif length < 0:
        stop = length
    else:
        stop = start + length
    window = pairs[start:stop]

    if not is_mapping(array) and not preserve_keys:
        return [value for _, value in window]
    result: dict[Any, Any] = {}
    next_index = 0
    for key, value in window:
        if isinstance(key, int) and not isinstance(key, bool) and not preserve_keys:
            result[next_index] = value
            next_index += 1
        else:
            result[key] = value
    return result


def _query_pairs(value: Any, prefix: str) -> Iterator[tuple[str, str]]:
    if value is None:
        return
    if is_native_container(value):
        for key, item in items_of(value):
            yield from _query_pairs(item, f"{prefix}[{key}]")
    elif isinstance(value, bool):
        yield prefix, "1" if value else "0"
    else:
        yield prefix, str(value)


def query(array: Any) -> str:
    """
    Encode ``array`` as an RFC 3986 query string.

    Nested containers use bracketed keys, ``None`` values are left out and
    booleans become ``1``/``0``.

    >>> query({"a": 1, "b": {"c": "x y"}, "tags": ["p", "q"], "skip": None})
    'a=1&b%5Bc%5D=x%20y&tags%5B0%5D=p&tags%5B1%5D=q'
    """
    parts: list[str] = []
    for key, value in items_of(array):
        for name, text in _query_pairs(value, str(key)):
            parts.append(f"{quote(name, safe='')}={quote(text, safe='')}")
    return "&".join(parts)


def random_items(
    array: Any,
    number: int | None = None,
    preserve_keys: bool = False,
    *,
    rng: random.Random | None = None,
) -> Any:
    """
    Pick random values from ``array``.

    With ``number`` None, return one value. Otherwise return ``number``
    distinct items in their original order, as a list or, with
    ``preserve_keys``, as a dict keyed like the source.

    :raises SampleSizeError: If ``number`` exceeds the number of items.
    """
    pairs = list(items_of(array))
    requested = 1 if number is None else number
    if requested > len(pairs):
        raise SampleSizeError(requested, len(pairs))

    chooser = rng or random
    if number is None:
        return chooser.choice(pairs)[1]
    if number == 0:
        return []

    picked = sorted(chooser.sample(range(len(pairs)), number))
    chosen = [pairs[i] for i in picked]
    if preserve_keys:
        return dict(chosen)
    return [value for _, value in chosen]


def wrap(value: Any) -> Any:
    """Return ``value`` as a list or mapping: None is ``[]``, a scalar becomes ``[value]``."""
    if value is None:
        return []
    if isinstance(value, list) or is_mapping(value):
        return value
    if isinstance(value, tuple):
        return list(value)
    return [value]


def contains(array: Any, item: Any) -> bool:
    """Return True if any value of ``array`` equals ``item``."""
    return any(value == item for _, value in items_of(array))


def accept_values(array: Any, values: Any) -> Any:
    """Keep only the entries whose value appears in ``values``."""
    accepted = wrap(values)
    kept = [(key, value) for key, value in items_of(array) if contains(accepted, value)]
    return _rebuild(array, kept)


# End of file: src/dotpath/array_helpers.py
