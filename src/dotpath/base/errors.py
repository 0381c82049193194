# File: src/dotpath/base/errors.py
"""
Exceptions raised by dotpath.

Lookups that miss are never errors: they resolve to a default, to False, or
to a no-op. The classes below cover the few places where a caller asked for
something that cannot be done.
"""


class DotPathError(Exception):
    """Base class for dotpath errors."""


class SampleSizeError(DotPathError, ValueError):
    """More random items were requested than the array holds."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            f"You requested {requested} items, but there are only {available} items available."
        )
        self.requested = requested
        self.available = available


class UnknownOperationError(DotPathError, AttributeError):
    """An operation name is not present in a facade registry."""

    def __init__(self, owner: str, name: str) -> None:
        super().__init__(f"{owner}.{name} doesn't exist")
        self.owner = owner
        self.name = name


# End of file: src/dotpath/base/errors.py
