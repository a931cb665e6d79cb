"""String predicates shared by the id and list helpers."""

from __future__ import annotations


def is_null_or_empty(value: str | None) -> bool:
    """True for ``None`` and ``""``. Whitespace-only strings are not empty.

    Examples::

        is_null_or_empty(None)   # True
        is_null_or_empty("")     # True
        is_null_or_empty(" ")    # False
    """
    return value is None or len(value) == 0
