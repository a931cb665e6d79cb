"""Helpers for lists of IdNamePair records.

Membership checks by id, projections to ids / document ids, and
de-duplicated insertion. Id comparisons are exact string equality, with no
case folding or normalisation.

Query helpers treat ``None`` like an empty list. The insertion helpers
mutate the target list in place (append only) and reject ``None`` with
``ValueError``.

Examples::

    from idpairs.utils.lists import add_range_if_not_exists, contains_id, to_list_of_ids

    pairs = [IdNamePair(id="t:a", name="A"), IdNamePair(id="t:b", name="B")]
    contains_id(pairs, "t:b")                  # True
    to_list_of_ids(pairs)                      # ['t:a', 't:b']
    to_list_of_document_ids(pairs)             # ['a', 'b']

    add_range_if_not_exists(pairs, [IdNamePair(id="t:b", name="B2"),
                                    IdNamePair(id="t:c", name="C")])
    to_list_of_ids(pairs)                      # ['t:a', 't:b', 't:c']
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, MutableSequence, Sequence
from typing import Generic, TypeVar

from idpairs.ontology.base import IdNamePair
from idpairs.settings import get_settings
from idpairs.utils.ids import to_split_id
from idpairs.utils.strings import is_null_or_empty

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=IdNamePair)
R = TypeVar("R")


class LazyProjection(Generic[R]):
    """Restartable lazy view over a list.

    Nothing is computed up front. Each ``iter()`` walks the source list from
    the start as it is *at that moment*, so appending to the list between two
    iterations is reflected in the second one. Mutating the list during an
    iteration is the caller's problem, same as iterating a list directly.
    """

    __slots__ = ("_items", "_project")

    def __init__(self, items: Sequence[IdNamePair] | None, project: Callable[[IdNamePair], R]):
        self._items = items
        self._project = project

    def __iter__(self) -> Iterator[R]:
        if self._items is None:
            return
        for item in self._items:
            yield self._project(item)

    def __repr__(self) -> str:
        size = 0 if self._items is None else len(self._items)
        return f"{type(self).__name__}(source_len={size})"


def _id_of(item: IdNamePair) -> str:
    return item.id


def _document_id_of(item: IdNamePair) -> str:
    return to_split_id(item.id).document_id


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


def contains_id(items: Sequence[T] | None, id: str | None) -> bool:
    """True if any element's ``id`` equals *id* exactly. Linear scan.

    Returns ``False`` for a ``None``/empty list or a ``None``/empty id.
    """
    if not items:
        return False
    if is_null_or_empty(id):
        return False

    for item in items:
        if item.id == id:
            return True
    return False


def to_list_of_ids(items: Sequence[T] | None) -> list[str]:
    """New list of ids in source order; ``[]`` for ``None``/empty input."""
    if not items:
        return []
    return [item.id for item in items]


def iter_ids(items: Sequence[T] | None) -> LazyProjection[str]:
    """Lazy, restartable version of ``to_list_of_ids``. ``None`` yields nothing."""
    return LazyProjection(items, _id_of)


def to_list_of_document_ids(items: Sequence[T] | None) -> list[str]:
    """New list of document ids derived from each element's id.

    ``[]`` for ``None``/empty input. Every id must be splittable;
    ``MalformedIdError`` from ``to_split_id`` propagates unchanged.
    """
    if not items:
        return []
    return [_document_id_of(item) for item in items]


def iter_document_ids(items: Sequence[T]) -> LazyProjection[str]:
    """Lazy, restartable version of ``to_list_of_document_ids``.

    Unlike the eager variant, ``None`` is rejected immediately with
    ``ValueError``. Parse errors surface only when the offending element is
    reached during iteration.
    """
    if items is None:
        raise ValueError("items must not be None")
    return LazyProjection(items, _document_id_of)


# ---------------------------------------------------------------------------
# Insertion
# ---------------------------------------------------------------------------


def add_if_not_exists(items: MutableSequence[T], item: T) -> None:
    """Append *item* unless an element with the same id is already present."""
    if items is None:
        raise ValueError("items must not be None")
    if item is None:
        raise ValueError("item must not be None")

    new_id = item.id
    for existing in items:
        if existing.id == new_id:
            return
    items.append(item)


def add_range_if_not_exists(
    items: MutableSequence[T],
    to_add: Iterable[T],
    *,
    threshold: int | None = None,
) -> None:
    """Append every element of *to_add* whose id is not already present.

    Candidates are considered in order and each one accepted is visible to
    the ones after it, so duplicates within *to_add* are dropped too (first
    occurrence wins).

    Args:
        items: Target list, mutated in place.
        to_add: Candidates.
        threshold: Combined size at or below which plain linear scans are
            used; above it a set of existing ids is built first. Defaults to
            ``Settings.hash_set_threshold``. Both paths give the same result.
    """
    if items is None:
        raise ValueError("items must not be None")
    if to_add is None:
        raise ValueError("to_add must not be None")

    # Snapshot so that passing the target list as its own source is safe
    candidates = list(to_add)
    if not candidates:
        return
    if any(candidate is None for candidate in candidates):
        raise ValueError("to_add must not contain None")

    if threshold is None:
        threshold = get_settings().hash_set_threshold

    start = len(items)
    if start + len(candidates) <= threshold:
        for candidate in candidates:
            add_if_not_exists(items, candidate)
        strategy = "scan"
    else:
        existing_ids = {existing.id for existing in items}
        for candidate in candidates:
            if candidate.id in existing_ids:
                continue
            existing_ids.add(candidate.id)
            items.append(candidate)
        strategy = "set"

    logger.debug(
        "add_range_if_not_exists: strategy=%s candidates=%d appended=%d",
        strategy,
        len(candidates),
        len(items) - start,
    )
