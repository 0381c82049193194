# File: src/dotpath/base/types.py
"""
Type aliases and protocols shared by the dot-path accessors.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any, Final, Protocol, TypeAlias, runtime_checkable


# ---------- Protocols ----------


@runtime_checkable
class KeyedAccess(Protocol):
    """Any object that can report key existence and return a value by key."""

    def __contains__(self, key: object, /) -> bool: ...

    def __getitem__(self, key: Any, /) -> Any: ...


# ---------- Static typing aliases (for annotations) ----------

Container: TypeAlias = Mapping[Any, Any] | Sequence[Any] | KeyedAccess
MutableContainer: TypeAlias = MutableMapping[Any, Any] | MutableSequence[Any]
Keypath: TypeAlias = str | Sequence[str]
Keys: TypeAlias = str | Sequence[str]
DefaultFactory: TypeAlias = Callable[[], Any]

# ---------- Runtime tuples (for isinstance) ----------

STRING_LIKE_TYPES: Final[tuple[type, ...]] = (str, bytes, bytearray)
PLAIN_KEY_TYPES: Final[tuple[type, ...]] = (str, int, float, bool, type(None))


class _Missing:
    """Sentinel type for "argument not supplied" and "key not present"."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final[Any] = _Missing()


# End of file: src/dotpath/base/types.py
