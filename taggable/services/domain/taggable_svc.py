"""Taggable service - tag writes, tag queries and tag index reads for one collection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from taggable.components.platform.arango_bootstrap_comp import ensure_taggable_schema
from taggable.components.tagging.tag_collection_comp import TagCollection, should_reindex
from taggable.components.tagging.tag_index_comp import rank_tags_by_weight, sorted_tag_names
from taggable.helpers.exceptions import DocumentNotFoundError
from taggable.helpers.locale_helper import LocaleProvider, get_current_locale
from taggable.workflows.tags_index.rebuild_tags_index_wf import rebuild_tags_index_workflow

if TYPE_CHECKING:
    from taggable.components.tagging.tag_query_comp import TagQuery, TagQueryBuilder
    from taggable.helpers.dto.config_dto import TaggableConfig
    from taggable.helpers.dto.tags_dto import TagWeight
    from taggable.persistence.db import Database


logger = logging.getLogger(__name__)


class TaggableService:
    """Service for one taggable document collection.

    Write path: new()/load() -> collection.set_tags() -> save(). save() runs the
    change gate once and rebuilds the index only if the tag field changed.

    Read path: tags()/tags_with_weight() read the index collection;
    tagged_with*() build filters against the primary collection and find()
    runs them.
    """

    def __init__(self, database: Database, locale_provider: LocaleProvider = get_current_locale) -> None:
        """Initialize the service and ensure both collections exist.

        Args:
            database: Database facade for the configured collection
            locale_provider: Current-locale accessor for the localized variant

        """
        self.db = database
        self.locale_provider = locale_provider
        self.collection_cls = TagCollection.for_config(database.config)
        ensure_taggable_schema(database.db, database.config)

    @property
    def config(self) -> TaggableConfig:
        return self.db.config

    @property
    def query_builder(self) -> TagQueryBuilder:
        return self.collection_cls.query_builder(self.locale_provider)

    # -- documents --

    def new(self, fields: dict[str, Any] | None = None) -> TagCollection:
        """Wrap a not-yet-persisted document.

        Its snapshot is the empty tag field, so tags preset in fields trigger
        a rebuild on the first save.
        """
        return self.collection_cls(
            dict(fields or {}), separator=self.config.separator, locale_provider=self.locale_provider
        )

    def load(self, key: str) -> TagCollection:
        """Load a persisted document and snapshot its tag field.

        Raises:
            DocumentNotFoundError: If no document has this key

        """
        document = self.db.documents.get(key)
        if document is None:
            raise DocumentNotFoundError(self.config.collection_name, key)
        return self.collection_cls(
            document, separator=self.config.separator, persisted=True, locale_provider=self.locale_provider
        )

    def save(self, collection: TagCollection) -> TagCollection:
        """Persist a document, then rebuild the index if its tags changed.

        Store errors propagate. If the rebuild fails the document write stands
        and the snapshot is NOT advanced, so the next save retries the rebuild.
        """
        document = collection.document
        if collection.key is None:
            meta = self.db.documents.insert(document)
            document.update(meta)
        else:
            fields = {k: v for k, v in document.items() if not k.startswith("_")}
            self.db.documents.update(collection.key, fields)

        if should_reindex(collection):
            logger.debug(f"[TaggableService] Tags changed on {collection.key}, rebuilding index")
            self.rebuild_tags_index()

        collection.mark_persisted()
        return collection

    def delete(self, collection: TagCollection) -> None:
        """Delete a document and rebuild the index if it carried any tags."""
        if collection.key is None:
            return
        self.db.documents.delete(collection.key)
        if any(self.collection_cls.emit_index_keys(collection.document)):
            self.rebuild_tags_index()

    # -- queries --

    def tagged_with(self, tag: str) -> TagQuery:
        return self.query_builder.tagged_with(tag)

    def tagged_with_all(self, *tags: Any) -> TagQuery:
        return self.query_builder.tagged_with_all(*tags)

    def tagged_with_any(self, *tags: Any) -> TagQuery:
        return self.query_builder.tagged_with_any(*tags)

    def find(self, query: TagQuery, limit: int | None = None) -> list[dict[str, Any]]:
        """Run a tag filter against the primary collection."""
        return self.db.documents.find(query, limit=limit)

    # -- index --

    def rebuild_tags_index(self) -> int | None:
        """Rebuild the tags index now. None when indexing is disabled."""
        return rebuild_tags_index_workflow(self.db)

    def tags(self, locale: str | None = None) -> list[str]:
        """Distinct indexed tags, ascending. Localized: one locale (current by default)."""
        return sorted_tag_names(self.db.tags_index.list_entries(self._index_locale(locale)))

    def tags_with_weight(self, locale: str | None = None) -> list[TagWeight]:
        """(tag, count) pairs ranked by count descending, then tag ascending."""
        return rank_tags_by_weight(self.db.tags_index.list_entries(self._index_locale(locale)))

    def tag_count(self, tag: str, locale: str | None = None) -> int:
        """Indexed document count for one tag, 0 when not indexed."""
        return self.db.tags_index.get_count(tag, self._index_locale(locale))

    def _index_locale(self, locale: str | None) -> str | None:
        if not self.config.localized:
            return None
        return locale or self.locale_provider()
