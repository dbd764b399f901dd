"""Tag DTOs - tag sets and tag index records.

This module defines:
- TagSet: one document's tags in one context (global or one locale)
- LocalizedTagSet: locale -> TagSet
- IndexEntry: one persisted (tag[, locale]) -> count aggregate
- TagWeight: (tag, count) pair returned by index reads

Usage:
    from taggable.helpers.dto.tags_dto import IndexEntry, TagSet

    entry = IndexEntry.from_document({"tag": "food", "count": 3})
    db.tags_index.replace_all([entry])
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Ordered, duplicates allowed, every element trimmed and non-empty
TagSet = tuple[str, ...]

LocalizedTagSet = dict[str, TagSet]

TagWeight = tuple[str, int]


@dataclass(frozen=True)
class IndexEntry:
    """Single tag index record.

    locale is None for the flat variant. For the localized variant the
    composite (tag, locale) is the key.
    """

    tag: str
    count: int
    locale: str | None = None

    def to_document(self) -> dict[str, Any]:
        """Convert to the stored record shape."""
        doc: dict[str, Any] = {"tag": self.tag, "count": self.count}
        if self.locale is not None:
            doc["locale"] = self.locale
        return doc

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> IndexEntry:
        """Create from a stored record (extra Arango system fields are ignored)."""
        return cls(tag=doc["tag"], count=int(doc["count"]), locale=doc.get("locale"))

    def to_weight(self) -> TagWeight:
        return (self.tag, self.count)
