# File: src/dotpath/base/lazy_default.py
"""
Fallback values that may be computed on demand.

A default is either a concrete value or a zero-argument computation. The
computation only runs when a lookup actually misses, and at most once per
miss, so it may be expensive or have side effects.

Every callable default other than a class is called with no arguments. To
use a function itself as the fallback value, wrap it:

    >>> value_of(lambda: len)
    <built-in function len>

Example:
    >>> value_of(Deferred(lambda: "computed"))
    'computed'
    >>> value_of(lambda: "also computed")
    'also computed'
    >>> value_of(dict)  # classes are values, not computations
    <class 'dict'>
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from dotpath.base.types import DefaultFactory


__all__ = [
    "Deferred",
    "is_deferred",
    "value_of",
]


@dataclass(frozen=True, slots=True)
class Deferred:
    """Explicitly mark a zero-argument callable as a deferred default."""

    factory: DefaultFactory

    def __call__(self) -> Any:
        return self.factory()


def is_deferred(default: Any) -> bool:
    """Return True if ``default`` should be invoked rather than returned."""
    if isinstance(default, Deferred):
        return True
    return callable(default) and not isinstance(default, type)


def value_of(default: Any) -> Any:
    """
    Resolve a default: invoke it if deferred, else return it unchanged.

    A deferred default must accept zero arguments; one that does not (such as
    ``len``) raises TypeError here. Pass ``lambda: len`` to get ``len`` back.
    """
    if is_deferred(default):
        return default()
    return default


# End of file: src/dotpath/base/lazy_default.py
