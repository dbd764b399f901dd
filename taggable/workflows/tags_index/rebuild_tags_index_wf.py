"""Rebuild tags index workflow - full recomputation of the tag frequency index.

Workflow: scan every document (unscoped) -> emit tag keys -> sum -> replace
the index collection in one transaction.

Concurrent rebuilds of the same collection are last-writer-wins.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from taggable.components.tagging.tag_collection_comp import TagCollection
from taggable.components.tagging.tag_index_comp import aggregate_tag_counts, build_index_entries

if TYPE_CHECKING:
    from taggable.persistence.db import Database

logger = logging.getLogger(__name__)


def rebuild_tags_index_workflow(db: Database) -> int | None:
    """Rebuild the tags index for the collection configured on db.

    A disabled configuration is a no-op: the existing index (if any) is left
    untouched.

    Args:
        db: Database facade (carries the TaggableConfig)

    Returns:
        Number of index entries written, or None when indexing is disabled

    Raises:
        arango.exceptions.ArangoError: Scan or replace failed. The previous
            index is still in place.
    """
    config = db.config
    if not config.enable_index:
        logger.debug(f"[TagsIndex] Indexing disabled for {config.collection_name}, skipping rebuild")
        return None

    collection_cls = TagCollection.for_config(config)
    logger.info(f"[TagsIndex] Rebuilding {config.tags_index_collection_name} from {config.collection_name}")

    try:
        documents = db.documents.iter_all(fields=[collection_cls.field_name])
        counts = aggregate_tag_counts(documents, collection_cls.emit_index_keys)
        written = db.tags_index.replace_all(build_index_entries(counts))
    except Exception as e:
        logger.error(f"[TagsIndex] Rebuild of {config.tags_index_collection_name} failed: {e}", exc_info=True)
        raise

    logger.info(f"[TagsIndex] Rebuild complete: {written} entries in {config.tags_index_collection_name}")
    return written
