"""Split-id parsing — ``"<partition_key>:<document_id>"`` ids.

Ids stored on IdNamePair records are composite: a partition key and a
document id joined by a separator (``:`` unless ``IDPAIRS_ID_SEPARATOR``
says otherwise). The split happens on the *first* separator, so document
ids may themselves contain it.

Examples::

    from idpairs.utils.ids import to_split_id, to_combined_id

    to_split_id("tenant-1:doc-42").document_id   # 'doc-42'
    to_split_id("tenant-1:a:b").document_id      # 'a:b'
    to_combined_id("tenant-1", "doc-42")         # 'tenant-1:doc-42'
    to_split_id("doc-42")                        # raises MalformedIdError
"""

from __future__ import annotations

from dataclasses import dataclass

from idpairs.settings import get_settings
from idpairs.utils.strings import is_null_or_empty


class MalformedIdError(ValueError):
    """Raised when an id cannot be decomposed into partition key + document id."""

    def __init__(self, message: str, *, value: str | None = None):
        super().__init__(message)
        self.value = value


@dataclass(frozen=True)
class SplitId:
    """The two components of a composite id."""

    partition_key: str
    document_id: str
    separator: str = ":"

    @property
    def combined(self) -> str:
        return f"{self.partition_key}{self.separator}{self.document_id}"


def _resolve_separator(separator: str | None) -> str:
    sep = separator if separator is not None else get_settings().id_separator
    if not sep:
        raise ValueError("id separator must be a non-empty string")
    return sep


def to_split_id(value: str | None, separator: str | None = None) -> SplitId:
    """Split a composite id on the first separator.

    Args:
        value: The composite id, e.g. ``"tenant-1:doc-42"``.
        separator: Override for the configured ``id_separator``.

    Returns:
        ``SplitId`` with ``partition_key`` and ``document_id``.

    Raises:
        MalformedIdError: ``value`` is empty, has no separator, or either
            component is empty.
    """
    sep = _resolve_separator(separator)
    if is_null_or_empty(value):
        raise MalformedIdError("Cannot split an empty id", value=value)

    partition_key, found, document_id = value.partition(sep)
    if not found:
        raise MalformedIdError(f"Id {value!r} has no {sep!r} separator", value=value)
    if not partition_key or not document_id:
        raise MalformedIdError(
            f"Id {value!r} must have a non-empty partition key and document id",
            value=value,
        )
    return SplitId(partition_key=partition_key, document_id=document_id, separator=sep)


def to_combined_id(
    partition_key: str, document_id: str, separator: str | None = None
) -> str:
    """Join a partition key and document id into a composite id.

    Inverse of ``to_split_id``: ``to_split_id(to_combined_id(p, d)) == (p, d)``.
    The partition key may not contain the separator, otherwise the first split
    would land inside it.
    """
    sep = _resolve_separator(separator)
    if is_null_or_empty(partition_key) or is_null_or_empty(document_id):
        raise MalformedIdError("Partition key and document id must both be non-empty")
    if sep in partition_key:
        raise MalformedIdError(
            f"Partition key {partition_key!r} contains the {sep!r} separator",
            value=partition_key,
        )
    return f"{partition_key}{sep}{document_id}"
