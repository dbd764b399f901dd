"""
Tag index component - in-process map/reduce and ranking.

Map: each document emits one key per tag occurrence (tag, or (tag, locale)).
Reduce: keys are summed. Summation is order-independent, so the result does
not depend on scan order.

Ranking for tag clouds: count descending, then tag ascending.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any

from taggable.helpers.dto.tags_dto import IndexEntry, TagWeight

logger = logging.getLogger(__name__)

KeyEmitter = Callable[[Mapping[str, Any]], Iterator[Any]]


def aggregate_tag_counts(documents: Iterable[Mapping[str, Any]], emit: KeyEmitter) -> Counter[Any]:
    """
    Count tag occurrences across documents.

    Args:
        documents: Lazy document scan (e.g. an Arango cursor)
        emit: Map function yielding index keys for one document

    Returns:
        Counter of key -> number of emitted occurrences
    """
    counts: Counter[Any] = Counter()
    scanned = 0
    for document in documents:
        counts.update(emit(document))
        scanned += 1
    logger.debug(f"[TagsIndex] Aggregated {len(counts)} keys from {scanned} documents")
    return counts


def build_index_entries(counts: Mapping[Any, int]) -> list[IndexEntry]:
    """Convert aggregated counts into IndexEntry records (str keys flat, tuple keys localized)."""
    entries: list[IndexEntry] = []
    for key, count in counts.items():
        if isinstance(key, tuple):
            tag, locale = key
            entries.append(IndexEntry(tag=tag, count=count, locale=locale))
        else:
            entries.append(IndexEntry(tag=key, count=count))
    return entries


def rank_tags_by_weight(entries: Iterable[IndexEntry]) -> list[TagWeight]:
    """Rank (tag, count) pairs: count descending, ties by tag ascending."""
    return sorted((entry.to_weight() for entry in entries), key=lambda weight: (-weight[1], weight[0]))


def sorted_tag_names(entries: Iterable[IndexEntry]) -> list[str]:
    """Distinct tag names, ascending."""
    return sorted({entry.tag for entry in entries})
