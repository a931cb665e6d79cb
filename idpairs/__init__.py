"""idpairs — helpers for lists of IdNamePair records."""

from idpairs.ontology.base import IdNamePair
from idpairs.settings import Settings, get_settings
from idpairs.utils.ids import MalformedIdError, SplitId, to_combined_id, to_split_id
from idpairs.utils.lists import (
    LazyProjection,
    add_if_not_exists,
    add_range_if_not_exists,
    contains_id,
    iter_document_ids,
    iter_ids,
    to_list_of_document_ids,
    to_list_of_ids,
)
from idpairs.utils.strings import is_null_or_empty

__all__ = [
    "IdNamePair",
    "LazyProjection",
    "MalformedIdError",
    "Settings",
    "SplitId",
    "add_if_not_exists",
    "add_range_if_not_exists",
    "contains_id",
    "get_settings",
    "is_null_or_empty",
    "iter_document_ids",
    "iter_ids",
    "to_combined_id",
    "to_list_of_document_ids",
    "to_list_of_ids",
    "to_split_id",
]
