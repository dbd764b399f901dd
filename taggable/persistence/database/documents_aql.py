"""Taggable document operations for ArangoDB.

The document collection name comes from TaggableConfig and is always passed
as a collection bind parameter (@@collection), never interpolated.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, cast

from taggable.persistence.arango_client import _jsonify_for_arango

if TYPE_CHECKING:
    from arango.cursor import Cursor

    from taggable.components.tagging.tag_query_comp import TagQuery
    from taggable.persistence.arango_client import DatabaseLike

logger = logging.getLogger(__name__)

# Cursor batch size for full-collection scans (rebuilds)
SCAN_BATCH_SIZE = 1000


class DocumentOperations:
    """Operations for one taggable document collection."""

    def __init__(self, db: DatabaseLike, collection_name: str) -> None:
        self.db = db
        self.collection_name = collection_name
        self.collection = db.collection(collection_name)

    def get(self, key: str) -> dict[str, Any] | None:
        """Get document by _key. Returns None if missing."""
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
                FOR doc IN @@collection
                    FILTER doc._key == @key
                    LIMIT 1
                    RETURN doc
                """,
                bind_vars={"@collection": self.collection_name, "key": key},
            ),
        )
        return next(cursor, None)

    def insert(self, document: dict[str, Any]) -> dict[str, Any]:
        """Insert a new document. Returns Arango metadata {_id, _key, _rev}."""
        return cast("dict[str, Any]", self.collection.insert(_jsonify_for_arango(document)))

    def update(self, key: str, fields: dict[str, Any]) -> None:
        """Patch fields on an existing document. Objects are replaced, not merged."""
        self.db.aql.execute(
            """
            UPDATE { _key: @key } WITH @fields IN @@collection
                OPTIONS { mergeObjects: false }
            """,
            bind_vars={"@collection": self.collection_name, "key": key, "fields": fields},
        )

    def delete(self, key: str) -> None:
        """Delete a document by _key."""
        self.db.aql.execute(
            """
            REMOVE { _key: @key } IN @@collection
            """,
            bind_vars={"@collection": self.collection_name, "key": key},
        )

    def find(self, query: TagQuery, limit: int | None = None) -> list[dict[str, Any]]:
        """Return documents matching a tag filter.

        Args:
            query: Filter built by a TagQueryBuilder
            limit: Optional max number of documents

        Returns:
            Matching documents in collection order

        """
        bind_vars: dict[str, Any] = {**query.bind_vars, "@collection": self.collection_name}
        limit_clause = ""
        if limit is not None:
            limit_clause = "LIMIT @limit"
            bind_vars["limit"] = limit

        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                f"""
                FOR doc IN @@collection
                    {query.filter_clause}
                    {limit_clause}
                    RETURN doc
                """,
                bind_vars=bind_vars,
            ),
        )
        return list(cursor)

    def iter_all(self, fields: list[str] | None = None) -> Iterator[dict[str, Any]]:
        """Stream every document in the collection, unscoped.

        Args:
            fields: Restrict returned attributes (KEEP); None returns whole documents

        Yields:
            Documents, fetched from the server in batches

        """
        bind_vars: dict[str, Any] = {"@collection": self.collection_name}
        if fields:
            query = "FOR doc IN @@collection RETURN KEEP(doc, @fields)"
            bind_vars["fields"] = fields
        else:
            query = "FOR doc IN @@collection RETURN doc"

        cursor = cast(
            "Cursor",
            self.db.aql.execute(query, bind_vars=bind_vars, batch_size=SCAN_BATCH_SIZE, stream=True),
        )
        yield from cursor

    def count(self) -> int:
        """Number of documents in the collection."""
        return cast("int", self.collection.count())
