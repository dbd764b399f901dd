"""ArangoDB schema bootstrap component.

Creates the document collection and tag index collection for one taggable
configuration, plus their indexes. All operations are idempotent (safe to run
on every startup).

ARCHITECTURAL NOTE:
This component lives in components/platform, NOT persistence/.
Persistence layer is "AQL only" - no schema management.
"""

from __future__ import annotations

import logging

from arango.exceptions import CollectionCreateError, IndexCreateError

from taggable.components.tagging.tag_collection_comp import FLAT_TAGS_FIELD
from taggable.helpers.dto.config_dto import TaggableConfig
from taggable.persistence.arango_client import DatabaseLike

logger = logging.getLogger(__name__)


def ensure_taggable_schema(db: DatabaseLike, config: TaggableConfig) -> None:
    """Ensure collections and indexes exist for a taggable collection.

    Creates missing collections/indexes but does NOT alter existing ones.

    Args:
        db: ArangoDB database handle
        config: Taggable configuration naming both collections
    """
    _ensure_collection(db, config.collection_name)
    _ensure_collection(db, config.tags_index_collection_name)

    if not config.localized:
        # Array index so tagged_with* filters do not scan the collection
        _ensure_index(db, config.collection_name, [f"{FLAT_TAGS_FIELD}[*]"])

    index_key = ["tag", "locale"] if config.localized else ["tag"]
    _ensure_index(db, config.tags_index_collection_name, index_key, unique=True)


def _ensure_collection(db: DatabaseLike, name: str) -> None:
    if db.has_collection(name):
        return
    try:
        db.create_collection(name)
        logger.info(f"[Bootstrap] Created collection {name}")
    except CollectionCreateError:
        pass  # Collection already exists (race condition)


def _ensure_index(db: DatabaseLike, collection: str, fields: list[str], unique: bool = False) -> None:
    """Create a persistent index if it doesn't exist."""
    try:
        db.collection(collection).add_persistent_index(fields=fields, unique=unique, sparse=False)
    except IndexCreateError:
        pass  # Index already exists
