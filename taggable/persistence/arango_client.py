"""ArangoDB connection for taggable.

python-arango pools connections per client; one client per process.

Everything that leaves this package for ArangoDB (AQL bind vars, inserted
documents) crosses a single JSON boundary, ``_jsonify_for_arango``. TagSets are
tuples in Python and arrays in ArangoDB; the boundary does that conversion and
rejects anything that is not plain JSON data.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from arango import ArangoClient
from arango.aql import AQL
from arango.collection import StandardCollection
from arango.database import StandardDatabase, TransactionDatabase

_JSON_PRIMITIVES = (str, int, float, bool, type(None))


def _jsonify_for_arango(obj: Any, *, _path: str = "$") -> Any:
    """Convert bind vars or a document into plain JSON data.

    dict keys become strings and tuples become lists. DTOs are not converted
    implicitly: callers pass ``entry.to_document()``, never the entry.

    Raises:
        TypeError: On any other type, naming where it was found (e.g. "$.entries[0]")
    """
    if isinstance(obj, _JSON_PRIMITIVES):
        return obj
    if isinstance(obj, dict):
        return {str(k): _jsonify_for_arango(v, _path=f"{_path}.{k}") for k, v in obj.items()}
    if isinstance(obj, list | tuple):
        return [_jsonify_for_arango(v, _path=f"{_path}[{i}]") for i, v in enumerate(obj)]
    raise TypeError(f"Cannot send {type(obj).__name__} at {_path} to ArangoDB; convert it to JSON data first")


class _SafeAQL:
    """AQL handle whose execute() sanitizes bind_vars."""

    def __init__(self, aql: AQL) -> None:
        self._aql = aql

    def execute(self, query: str, bind_vars: dict[str, Any] | None = None, **kwargs: Any) -> Any:
        return self._aql.execute(query, bind_vars=_jsonify_for_arango(bind_vars or {}), **kwargs)

    def __getattr__(self, name: str) -> Any:
        return getattr(self._aql, name)


class _SafeCollection:
    """Collection handle whose insert()/insert_many() sanitize documents."""

    def __init__(self, collection: StandardCollection) -> None:
        self._collection = collection

    def insert(self, document: dict[str, Any], **kwargs: Any) -> Any:
        return self._collection.insert(_jsonify_for_arango(document), **kwargs)

    def insert_many(self, documents: Iterable[dict[str, Any]], **kwargs: Any) -> Any:
        return self._collection.insert_many([_jsonify_for_arango(doc) for doc in documents], **kwargs)

    def __getattr__(self, name: str) -> Any:
        return getattr(self._collection, name)


class SafeDatabase:
    """Database handle that routes AQL, inserts and stream transactions through the JSON boundary.

    Anything not overridden here proxies to the wrapped python-arango database.
    """

    def __init__(self, db: StandardDatabase | TransactionDatabase) -> None:
        self._db = db
        self._safe_aql = _SafeAQL(db.aql)

    @property
    def aql(self) -> _SafeAQL:
        return self._safe_aql

    def collection(self, name: str) -> _SafeCollection:
        return _SafeCollection(self._db.collection(name))  # type: ignore[arg-type]

    def begin_transaction(self, **kwargs: Any) -> SafeDatabase:
        """Start a stream transaction; its handle is wrapped too."""
        return SafeDatabase(self._db.begin_transaction(**kwargs))  # type: ignore[union-attr]

    def __getattr__(self, name: str) -> Any:
        return getattr(self._db, name)


DatabaseLike = StandardDatabase | SafeDatabase


def create_arango_client(
    hosts: str = "http://localhost:8529",
    username: str = "root",
    password: str = "",
    db_name: str = "taggable",
) -> SafeDatabase:
    """Connect to ArangoDB and return a SafeDatabase for db_name.

    Raises:
        ServerConnectionError: ArangoDB unreachable
    """
    client = ArangoClient(hosts=hosts)
    return SafeDatabase(client.db(db_name, username=username, password=password))
