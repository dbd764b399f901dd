"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class TaggableConfigError(Exception):
    """Raised at setup time when taggable options are unknown or invalid."""


class DocumentNotFoundError(Exception):
    """Raised when a document key does not exist in the collection."""

    def __init__(self, collection_name: str, key: str) -> None:
        super().__init__(f"Document '{key}' not found in '{collection_name}'")
        self.collection_name = collection_name
        self.key = key
