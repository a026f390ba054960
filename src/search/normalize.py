"""Value cleaning for search arguments."""

from __future__ import annotations

from collections.abc import Callable, Sequence

VALUE_SEPARATOR = ";"

_QUOTES = ('"', "'")

ValueCleaner = Callable[[Sequence[str]], list[str]]


def clean_value(raw: str) -> str:
    """Normalize a single value fragment.

    Cleaning is intentionally conservative:
        - Strip surrounding whitespace.
        - Strip one pair of matching surrounding quotes (`"a;b"` style quoting is not supported,
          quotes only protect leading/trailing whitespace).
        - Strip whitespace again.
    """

    value = (raw or "").strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        value = value[1:-1]
    return value.strip()


def clean_values(fragments: Sequence[str]) -> list[str]:
    """Clean every fragment and drop the ones that end up empty (order is kept)."""

    cleaned = (clean_value(fragment) for fragment in fragments)
    return [value for value in cleaned if value]


def split_values(text: str) -> list[str]:
    """Split raw argument text on the value separator (`a;b` -> `["a", "b"]`)."""

    return text.split(VALUE_SEPARATOR)
