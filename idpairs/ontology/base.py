"""IdNamePair — base pydantic model for records keyed by a composite id."""

from __future__ import annotations

from pydantic import BaseModel

from idpairs.utils.ids import SplitId, to_combined_id, to_split_id


class IdNamePair(BaseModel):
    """A record carrying an ``id`` and a display ``name``.

    Subclass it to attach extra fields; the list helpers in
    ``idpairs.utils.lists`` only ever read ``id``. Nothing here enforces
    uniqueness; that is up to ``add_if_not_exists`` and friends.

    The id is usually composite (``"<partition_key>:<document_id>"``) but
    that is only checked when something asks for ``split_id``.
    """

    id: str
    name: str

    model_config = {"from_attributes": True}

    @classmethod
    def from_split(cls, partition_key: str, document_id: str, name: str, **extra):
        """Build an instance whose id combines ``partition_key`` and ``document_id``."""
        return cls(id=to_combined_id(partition_key, document_id), name=name, **extra)

    @property
    def split_id(self) -> SplitId:
        return to_split_id(self.id)
