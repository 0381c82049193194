# File: src/dotpath/nested_access.py
"""
Read, write and delete values nested inside mappings and sequences using
dot-separated keypaths.

Example:
    >>> config = {"tool": {"ruff": {"line-length": 100}}}
    >>> keypath_get(config, "tool.ruff.line-length")
    100
    >>> keypath_get(config, "tool.black.line-length", 88)
    88
    >>> keypath_set(config, "tool.black.line-length", 99)
    {'tool': {'ruff': {'line-length': 100}, 'black': {'line-length': 99}}}
    >>> keypath_forget(config, "tool.ruff")
    >>> config
    {'tool': {'black': {'line-length': 99}}}

Misses are never errors: ``keypath_get`` returns the default,
``keypath_forget`` does nothing. ``keypath_set`` creates missing intermediate
mappings and replaces intermediate values that are not containers.

All three act on the caller's container directly; nothing is copied and
nothing is retained after the call returns.
"""

from __future__ import annotations

from typing import Any

from dotpath.base.container_probe import (
    accessible,
    is_mapping,
    is_sequence,
    resolve_key,
    sequence_index,
)
from dotpath.base.keypath import (
    DELIMITER,
    as_key_list,
    has_delimiter,
    normalize_keypath,
    split_keypath,
)
from dotpath.base.lazy_default import value_of
from dotpath.base.types import MISSING, Keypath, Keys
from dotpath.xlogging.logger_factory import create_logger


__all__ = [
    "keypath_forget",
    "keypath_get",
    "keypath_set",
    "walk_segments",
]

_LOG = create_logger(__name__)


def _child_key(container: Any, segment: Any) -> Any:
    """Resolve a segment against a container, treating unhashable probes as absent."""
    try:
        return resolve_key(container, segment)
    except TypeError:
        return MISSING


def walk_segments(container: Any, segments: tuple[str, ...]) -> Any:
    """
    Descend through ``container`` one segment at a time.

    :return: The value at the end of the walk, or ``MISSING`` as soon as a
        step meets a non-container or an absent key.
    """
    current = container
    for segment in segments:
        if not accessible(current):
            return MISSING
        key = _child_key(current, segment)
        if key is MISSING:
            return MISSING
        current = current[key]
    return current


def keypath_get(container: Any, path: Keypath | None = None, default: Any = None) -> Any:
    """
    Retrieve a nested value using a dot-separated keypath.

    Resolution order:
      1. A non-container yields the default.
      2. No path yields the container itself.
      3. A top-level key equal to the whole path wins, even if it contains a dot.
      4. Otherwise the path is split and walked segment by segment.

    :param container: Mapping, sequence or KeyedAccess object.
    :param path: Keypath string (``"a.b.0.c"``), pre-split segments, or None.
    :param default: Fallback value, or a zero-argument callable evaluated only on a miss.
        Wrap a callable meant as the value itself: ``lambda: len``.
    :return: The resolved value, or the resolved default.
    """
    if not accessible(container):
        return value_of(default)
    if path is None:
        return container

    if isinstance(path, str):
        key = _child_key(container, path)
        if key is not MISSING:
            return container[key]
        if not has_delimiter(path):
            _LOG.trace("keypath_get(%r) missed; using default", path)
            return value_of(default)
        segments = split_keypath(path)
    else:
        segments = normalize_keypath(path)

    found = walk_segments(container, segments)
    if found is MISSING:
        _LOG.trace("keypath_get(%r) missed; using default", path)
        return value_of(default)
    return found


def _assign(container: Any, segment: str, value: Any) -> None:
    """Store ``value`` under ``segment``, appending when it addresses the end of a sequence."""
    if is_sequence(container):
        index = sequence_index(segment)
        if index is None:
            raise TypeError(
                f"Cannot address {type(container).__name__} with non-integer key {segment!r}"
            )
        if index == len(container):
            container.append(value)
            return
        if not 0 <= index < len(container):
            raise IndexError(
                f"Index {index} out of range for {type(container).__name__}"
                f" of length {len(container)}"
            )
        container[index] = value
        return
    key = _child_key(container, segment) if is_mapping(container) else MISSING
    container[segment if key is MISSING else key] = value


def keypath_set(container: Any, path: Keypath | None, value: Any) -> Any:
    """
    Set a nested value using a dot-separated keypath, creating parents as needed.

    Every segment but the last must lead to a container. A missing one is
    created as an empty dict; an existing value that is not a container is
    replaced by an empty dict (its old value is lost).

    :param container: Mutable mapping, list, or KeyedAccess object supporting item assignment.
    :param path: Keypath string or pre-split segments. None replaces the whole container.
    :param value: Value to store.
    :return: ``container`` after mutation, or ``value`` when the path is None.
        Callers replacing the root must use the return value.
    :raises TypeError: If the container cannot be written to.
    :raises IndexError: If a sequence index lies past the end of the sequence.
    """
    if path is None:
        return value
    if not accessible(container):
        raise TypeError(f"Cannot set keypath {path!r} on {type(container).__name__}")

    segments = normalize_keypath(path)
    if not segments:
        return value
    current = container
    for depth, segment in enumerate(segments[:-1]):
        key = _child_key(current, segment)
        if key is not MISSING and accessible(current[key]):
            current = current[key]
            continue
        if key is not MISSING:
            _LOG.debug(
                "keypath_set(%r) replaced %s at %r with a dict",
                path,
                type(current[key]).__name__,
                DELIMITER.join(segments[: depth + 1]),
            )
        child: dict[str, Any] = {}
        _assign(current, segment, child)
        current = child

    _assign(current, segments[-1], value)
    return container


def _forget_target(container: Any, key: Any) -> tuple[Any, Any] | None:
    """Return ``(parent, stored_key)`` for a keypath to delete, or None if it is absent."""
    top = _child_key(container, key)
    if top is not MISSING:
        return container, top

    segments = split_keypath(str(key))
    parent = walk_segments(container, segments[:-1])
    if parent is MISSING or not accessible(parent):
        _LOG.trace("keypath_forget(%r) skipped; parent not found", key)
        return None
    last = _child_key(parent, segments[-1])
    if last is MISSING:
        return None
    return parent, last


def keypath_forget(container: Any, keys: Keys | int) -> None:
    """
    Remove one or more keypaths from a container in place.

    Every key is resolved against the container as it was on entry:
      - a top-level key equal to the whole key is removed directly;
      - otherwise the key is split and walked; if any parent is absent or not
        a container the key is skipped.

    Only then are the targets deleted. Positions within one list are removed
    from the highest index down, and a position named twice is removed once,
    so ``keypath_forget(["a", "b", "c"], [0, 1])`` leaves ``["c"]``.

    Removing from a list still shifts the following elements down for the
    next call: forgetting ``"items.0"`` in two separate calls removes two
    elements.

    :param container: Mutable mapping, list, or KeyedAccess object supporting deletion.
    :param keys: A keypath or a collection of keypaths.
    """
    targets: list[tuple[Any, Any]] = []
    for key in as_key_list(keys):
        target = _forget_target(container, key)
        if target is not None:
            targets.append(target)

    positions: dict[int, tuple[Any, set[int]]] = {}
    for parent, key in targets:
        if is_sequence(parent):
            positions.setdefault(id(parent), (parent, set()))[1].add(key)
        elif key in parent:
            del parent[key]
    for parent, indexes in positions.values():
        for index in sorted(indexes, reverse=True):
            del parent[index]


# End of file: src/dotpath/nested_access.py
