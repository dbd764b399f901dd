"""Database facade for one taggable collection.

Groups the operation classes that share a database handle and configuration:
    db.documents    -> DocumentOperations (primary collection)
    db.tags_index   -> TagsIndexOperations (derived index collection)
"""

from __future__ import annotations

from taggable.helpers.dto.config_dto import TaggableConfig
from taggable.persistence.arango_client import DatabaseLike, create_arango_client
from taggable.persistence.database.documents_aql import DocumentOperations
from taggable.persistence.database.tags_index_aql import TagsIndexOperations


class Database:
    """Persistence entry point for one TaggableConfig."""

    def __init__(self, db: DatabaseLike, config: TaggableConfig) -> None:
        self.db = db
        self.config = config
        self.documents = DocumentOperations(db, config.collection_name)
        self.tags_index = TagsIndexOperations(db, config.tags_index_collection_name)

    @classmethod
    def connect(
        cls,
        config: TaggableConfig,
        hosts: str,
        username: str,
        password: str,
        db_name: str,
    ) -> Database:
        """Open a connection and build the facade."""
        return cls(create_arango_client(hosts=hosts, username=username, password=password, db_name=db_name), config)
