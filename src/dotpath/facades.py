# File: src/dotpath/facades.py
"""
Chainable wrappers around a list/dict (``Arr``) or a string (``Str``).

Every operation a wrapper exposes is listed in a fixed registry built at
import time. Attribute access looks the name up there (camelCase names are
accepted and converted to snake_case) and calls the registered function with
the wrapped value as its first argument:

    >>> arr = Arr.create_from({"user": {"name": "ada"}})
    >>> arr.get("user.name")
    'ada'
    >>> arr.hasAny(["user.email", "user.name"])
    True
    >>> arr.set("user.email", "ada@example.com").all()
    {'user': {'name': 'ada', 'email': 'ada@example.com'}}
    >>> Str.create_from("fooBar").snake()
    'foo_bar'

Operations that mutate in place (``set``, ``forget``) return the wrapper so
calls can be chained; everything else returns the function's result.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from typing import Any, ClassVar, Final

from dotpath import array_helpers as ah
from dotpath.base import string_helpers as sh
from dotpath.base.container_probe import is_mapping
from dotpath.base.errors import UnknownOperationError
from dotpath.collection_ops import collapse, flatten, pluck
from dotpath.nested_access import keypath_forget, keypath_get, keypath_set
from dotpath.predicates import keypath_has, keypath_has_any


__all__ = [
    "ARR_OPERATIONS",
    "STR_OPERATIONS",
    "Arr",
    "Str",
]


def _keys(array: Any) -> list[Any]:
    return list(array.keys()) if is_mapping(array) else list(range(len(array)))


def _values(array: Any) -> list[Any]:
    return list(array.values()) if is_mapping(array) else list(array)


def _reverse(array: Any) -> Any:
    if is_mapping(array):
        return dict(reversed(list(array.items())))
    return list(reversed(array))


def _unique(array: Any) -> Any:
    seen: list[Any] = []
    kept: list[tuple[Any, Any]] = []
    for key, value in ah.items_of(array):
        if value not in seen:
            seen.append(value)
            kept.append((key, value))
    return dict(kept) if is_mapping(array) else [value for _, value in kept]


ARR_OPERATIONS: Final[Mapping[str, Callable[..., Any]]] = {
    # keypath access
    "get": keypath_get,
    "set": keypath_set,
    "forget": keypath_forget,
    "has": keypath_has,
    "has_any": keypath_has_any,
    # collections
    "pluck": pluck,
    "flatten": flatten,
    "collapse": collapse,
    # helpers
    "accept_values": ah.accept_values,
    "append": ah.append,
    "contains": ah.contains,
    "except": ah.except_keys,
    "first": ah.first,
    "last": ah.last,
    "only": ah.only,
    "prepend": ah.prepend,
    "query": ah.query,
    "random": ah.random_items,
    "slice": ah.slice_items,
    "wrap": ah.wrap,
    # native-style
    "count": len,
    "keys": _keys,
    "reverse": _reverse,
    "sum": lambda array: sum(_values(array)),
    "unique": _unique,
    "values": _values,
}

STR_OPERATIONS: Final[Mapping[str, Callable[..., Any]]] = {
    **sh.CASE_CONVERTERS,
    "case_convert": sh.case_convert,
    "contains": sh.contains_all,
    "contains_any": sh.contains_any,
    "end_with": sh.end_with,
    "ends_with": sh.ends_with,
    "length": len,
    "start_with": sh.start_with,
    "starts_with": sh.starts_with,
    "wrap_with": sh.wrap_with,
}


class _Facade:
    """Dispatches unknown attributes through the class's operation registry."""

    OPERATIONS: ClassVar[Mapping[str, Callable[..., Any]]] = {}
    IN_PLACE: ClassVar[frozenset[str]] = frozenset()

    _storage: Any

    def all(self) -> Any:
        """Return the wrapped value."""
        return self._storage

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        key = name if name in self.OPERATIONS else sh.to_snake_case(name)
        try:
            operation = self.OPERATIONS[key]
        except KeyError:
            raise UnknownOperationError(type(self).__name__, name) from None

        def bound(*args: Any, **kwargs: Any) -> Any:
            result = operation(self._storage, *args, **kwargs)
            if key in self.IN_PLACE:
                if result is not None:
                    self._storage = result
                return self
            return result

        bound.__name__ = key
        return bound

    def __dir__(self) -> list[str]:
        return sorted({*super().__dir__(), *self.OPERATIONS})


class Arr(_Facade):
    """Wrap a list or dict so registry operations can be called on it."""

    OPERATIONS = ARR_OPERATIONS
    IN_PLACE = frozenset({"set", "forget"})

    def __init__(self, storage: Any = None) -> None:
        self._storage = [] if storage is None else storage

    @classmethod
    def create_from(cls, array: Any) -> Arr:
        return cls(array)

    def __str__(self) -> str:
        return json.dumps(self._storage, default=str)

    def __repr__(self) -> str:
        return f"Arr({self._storage!r})"


class Str(_Facade):
    """Wrap a string so registry operations can be called on it."""

    OPERATIONS = STR_OPERATIONS

    def __init__(self, text: str | None = None) -> None:
        self._storage = text or ""

    @classmethod
    def create_from(cls, text: str | None) -> Str:
        return cls(text)

    def __str__(self) -> str:
        return self._storage

    def __repr__(self) -> str:
        return f"Str({self._storage!r})"


# End of file: src/dotpath/facades.py
