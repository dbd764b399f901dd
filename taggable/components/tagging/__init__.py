"""
Tagging package.
"""

from .tag_collection_comp import (
    FLAT_TAGS_FIELD,
    LOCALIZED_TAGS_FIELD,
    FlatTagCollection,
    LocalizedTagCollection,
    TagCollection,
    should_reindex,
)
from .tag_index_comp import (
    aggregate_tag_counts,
    build_index_entries,
    rank_tags_by_weight,
    sorted_tag_names,
)
from .tag_parsing_comp import flatten_tag_args, join_tag_list, parse_tag_list
from .tag_query_comp import (
    FlatTagQueryBuilder,
    LocalizedTagQueryBuilder,
    TagQuery,
    TagQueryBuilder,
)

__all__ = [
    "FLAT_TAGS_FIELD",
    "LOCALIZED_TAGS_FIELD",
    "FlatTagCollection",
    "FlatTagQueryBuilder",
    "LocalizedTagCollection",
    "LocalizedTagQueryBuilder",
    "TagCollection",
    "TagQuery",
    "TagQueryBuilder",
    "aggregate_tag_counts",
    "build_index_entries",
    "flatten_tag_args",
    "join_tag_list",
    "parse_tag_list",
    "rank_tags_by_weight",
    "should_reindex",
    "sorted_tag_names",
]
