"""
Database operations package.
"""

from .documents_aql import DocumentOperations
from .tags_index_aql import TagsIndexOperations

__all__ = [
    "DocumentOperations",
    "TagsIndexOperations",
]
