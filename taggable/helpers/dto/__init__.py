"""
Data transfer objects shared across layers.
"""

from .config_dto import TaggableConfig
from .tags_dto import IndexEntry, LocalizedTagSet, TagSet, TagWeight

__all__ = [
    "IndexEntry",
    "LocalizedTagSet",
    "TagSet",
    "TagWeight",
    "TaggableConfig",
]
