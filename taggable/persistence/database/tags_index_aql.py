"""Tag index operations for ArangoDB.

Schema:
    flat:      { tag: str, count: int }                 unique on [tag]
    localized: { tag: str, locale: str, count: int }    unique on [tag, locale]

The index is only ever written as a whole. replace_all() swaps the complete
contents inside one stream transaction: on any failure the transaction is
aborted and the previous contents stay visible.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, cast

from taggable.helpers.dto.tags_dto import IndexEntry
from taggable.persistence.arango_client import _jsonify_for_arango

if TYPE_CHECKING:
    from arango.cursor import Cursor

    from taggable.persistence.arango_client import DatabaseLike

logger = logging.getLogger(__name__)


class TagsIndexOperations:
    """Operations for one tags index collection."""

    def __init__(self, db: DatabaseLike, collection_name: str) -> None:
        self.db = db
        self.collection_name = collection_name

    def replace_all(self, entries: Iterable[IndexEntry]) -> int:
        """Replace the whole index with entries (full overwrite, not a merge).

        Args:
            entries: Complete new index contents

        Returns:
            Number of entries written

        Raises:
            arango.exceptions.ArangoError: Propagated after the transaction is aborted,
                including the first entry insert_many rejected

        """
        documents = [_jsonify_for_arango(entry.to_document()) for entry in entries]

        txn_db = self.db.begin_transaction(write=self.collection_name)
        try:
            txn_db.aql.execute(
                """
                FOR entry IN @@index
                    REMOVE entry IN @@index
                """,
                bind_vars={"@index": self.collection_name},
            )
            if documents:
                results = txn_db.collection(self.collection_name).insert_many(documents)
                # insert_many reports rejected documents in its result list instead of raising
                failed = [result for result in results if isinstance(result, Exception)]
                if failed:
                    logger.warning(f"[TagsIndex] {len(failed)} of {len(documents)} entries rejected")
                    raise failed[0]
            txn_db.commit_transaction()
        except Exception:
            logger.warning(f"[TagsIndex] Aborting replace of {self.collection_name}; previous index kept")
            txn_db.abort_transaction()
            raise

        logger.info(f"[TagsIndex] Replaced {self.collection_name} with {len(documents)} entries")
        return len(documents)

    def list_entries(self, locale: str | None = None) -> list[IndexEntry]:
        """Read index entries, optionally only those of one locale.

        Unordered; ranking happens in tag_index_comp. A collection that was
        never created (indexing disabled) reads as empty.
        """
        if not self.db.has_collection(self.collection_name):
            return []

        bind_vars: dict[str, Any] = {"@index": self.collection_name}
        filter_clause = ""
        if locale is not None:
            filter_clause = "FILTER entry.locale == @locale"
            bind_vars["locale"] = locale

        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                f"""
                FOR entry IN @@index
                    {filter_clause}
                    RETURN KEEP(entry, "tag", "count", "locale")
                """,
                bind_vars=bind_vars,
            ),
        )
        return [IndexEntry.from_document(row) for row in cursor]

    def get_count(self, tag: str, locale: str | None = None) -> int:
        """Indexed document count for one tag (0 if not indexed)."""
        if not self.db.has_collection(self.collection_name):
            return 0

        bind_vars: dict[str, Any] = {"@index": self.collection_name, "tag": tag}
        locale_clause = ""
        if locale is not None:
            locale_clause = "AND entry.locale == @locale"
            bind_vars["locale"] = locale

        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                f"""
                FOR entry IN @@index
                    FILTER entry.tag == @tag {locale_clause}
                    LIMIT 1
                    RETURN entry.count
                """,
                bind_vars=bind_vars,
            ),
        )
        return int(next(cursor, 0))
