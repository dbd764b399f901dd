"""
Config domain DTOs.

Rules:
- Import only stdlib and typing (no taggable.* imports)
- Pure data structures only (no I/O, no DB access, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TaggableConfig:
    """Per-collection tagging configuration. Immutable after setup.

    Attributes:
        collection_name: Document collection holding the taggable documents
        enable_index: Whether the tag frequency index is maintained at all
        separator: Single character used to split and join display strings
        tags_index_collection_name: Collection holding the index entries
        localized: True selects the locale-keyed variant (localized_tags field)

    """

    collection_name: str
    enable_index: bool = True
    separator: str = ","
    tags_index_collection_name: str = ""
    localized: bool = False

    def __post_init__(self) -> None:
        """Derive the index collection name from the collection name when not given."""
        if not self.tags_index_collection_name:
            object.__setattr__(self, "tags_index_collection_name", f"{self.collection_name}_tags_index")
