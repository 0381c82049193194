# File: src/dotpath/base/string_helpers.py
"""
Case conversion and affix helpers for strings.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import Final

from dotpath.base.errors import UnknownOperationError


__all__ = [
    "CASE_CONVERTERS",
    "case_convert",
    "contains_all",
    "contains_any",
    "end_with",
    "ends_with",
    "start_with",
    "starts_with",
    "to_camel_case",
    "to_kabob_case",
    "to_lower",
    "to_pascal_case",
    "to_snake_case",
    "to_title_text",
    "to_upper",
    "to_words",
    "wrap_with",
]

_WORD_PART_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9]+")
_WORD_SPLIT_RE: Final[re.Pattern[str]] = re.compile(
    r"[A-Z]{2,}(?=[A-Z][a-z0-9])|[A-Z]{2,}(?![a-z])|[A-Z][a-z0-9]*|[a-z0-9]+"
)


def _needles(needles: str | Iterable[str] | None) -> list[str]:
    if needles is None:
        return []
    if isinstance(needles, str):
        return [needles]
    return [str(needle) for needle in needles]


def to_words(*args: str) -> list[str]:
    """Split text into words without changing case.

    Words break on non-alphanumeric characters and at lower-to-upper
    transitions; runs of capitals stay together as acronyms.

    >>> to_words("parseHTTPResponse_v2")
    ['parse', 'HTTP', 'Response', 'v2']
    """
    words: list[str] = []
    for text in args:
        for part in _WORD_PART_RE.findall(text):
            words.extend(_WORD_SPLIT_RE.findall(part))
    return words


def to_snake_case(text: str) -> str:
    """Convert text into a "snake_case_text" string."""
    return "_".join(to_words(text)).lower()


def to_kabob_case(text: str) -> str:
    """Convert text into a "kabob-case-text" string."""
    return "-".join(to_words(text)).lower()


def to_pascal_case(text: str) -> str:
    """Convert text into a "PascalCaseText" string."""
    return "".join(word.capitalize() for word in to_words(text))


def to_camel_case(text: str) -> str:
    """Convert text into a "camelCaseText" string."""
    pascal = to_pascal_case(text)
    return pascal[:1].lower() + pascal[1:]


def to_title_text(text: str) -> str:
    """Convert text into a space separated "Title Case Text" string."""
    return " ".join(word.capitalize() for word in to_words(text))


def to_upper(text: str) -> str:
    return text.upper()


def to_lower(text: str) -> str:
    return text.lower()


CASE_CONVERTERS: Final[dict[str, Callable[[str], str]]] = {
    "camel": to_camel_case,
    "kebab": to_kabob_case,
    "lower": to_lower,
    "pascal": to_pascal_case,
    "snake": to_snake_case,
    "title": to_title_text,
    "upper": to_upper,
}


def case_convert(text: str, case: str = "snake") -> str:
    """
    Convert text to the named case.

    :param case: One of the keys of CASE_CONVERTERS.
    :raises UnknownOperationError: If ``case`` is not registered.
    """
    try:
        converter = CASE_CONVERTERS[case]
    except KeyError:
        raise UnknownOperationError("Str", case) from None
    return converter(text)


def starts_with(haystack: str, needles: str | Iterable[str]) -> bool:
    """Return True if ``haystack`` starts with any non-empty needle."""
    return any(needle and haystack.startswith(needle) for needle in _needles(needles))


def ends_with(haystack: str, needles: str | Iterable[str]) -> bool:
    """Return True if ``haystack`` ends with any non-empty needle."""
    return any(needle and haystack.endswith(needle) for needle in _needles(needles))


def contains_any(text: str, needles: str | Iterable[str]) -> bool:
    """Return True if ``text`` contains any non-empty needle."""
    return any(needle and needle in text for needle in _needles(needles))


def contains_all(text: str, needles: str | Iterable[str]) -> bool:
    """Return True if ``text`` contains every needle."""
    return all(needle in text for needle in _needles(needles))


def start_with(text: str | None, prefix: str) -> str:
    """Make sure ``text`` starts with exactly one ``prefix``.

    >>> start_with("//path", "/")
    '/path'
    """
    if not prefix:
        return text or ""
    return prefix + re.sub(f"^(?:{re.escape(prefix)})+", "", text or "")


def end_with(text: str | None, suffix: str) -> str:
    """Make sure ``text`` ends with exactly one ``suffix``."""
    if not suffix:
        return text or ""
    return re.sub(f"(?:{re.escape(suffix)})+$", "", text or "") + suffix


def wrap_with(text: str | None, affix: str) -> str:
    """Make sure ``text`` starts and ends with exactly one ``affix``."""
    return start_with(end_with(text, affix), affix)


# End of file: src/dotpath/base/string_helpers.py
