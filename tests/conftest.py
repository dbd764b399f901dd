"""
Pytest fixtures and configuration for the test suite.

Mocking strategy:
- Persistence classes are tested against a MagicMock Arango handle (assert AQL + bind vars)
- Services and workflows run against an in-memory Database with the same interface
"""

from __future__ import annotations

import copy
import itertools
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

# Add project root to path so tests can import taggable package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from taggable.helpers.dto.config_dto import TaggableConfig  # noqa: E402
from taggable.helpers.dto.tags_dto import IndexEntry  # noqa: E402
from taggable.helpers.locale_helper import DEFAULT_LOCALE, set_default_locale  # noqa: E402


# === IN-MEMORY PERSISTENCE ===
class InMemoryDocuments:
    """DocumentOperations stand-in backed by a dict."""

    def __init__(self, collection_name: str) -> None:
        self.collection_name = collection_name
        self.rows: dict[str, dict[str, Any]] = {}
        self._keys = itertools.count(1)
        self.fail_scan = False

    def get(self, key: str) -> dict[str, Any] | None:
        row = self.rows.get(key)
        return copy.deepcopy(row) if row is not None else None

    def insert(self, document: dict[str, Any]) -> dict[str, Any]:
        key = str(next(self._keys))
        meta = {"_key": key, "_id": f"{self.collection_name}/{key}", "_rev": "1"}
        self.rows[key] = {**copy.deepcopy(document), **meta}
        return meta

    def update(self, key: str, fields: dict[str, Any]) -> None:
        self.rows[key].update(copy.deepcopy(fields))

    def delete(self, key: str) -> None:
        self.rows.pop(key, None)

    def find(self, query, limit: int | None = None) -> list[dict[str, Any]]:
        matches = [copy.deepcopy(doc) for doc in self.rows.values() if query.matches(doc)]
        return matches if limit is None else matches[:limit]

    def iter_all(self, fields: list[str] | None = None) -> Iterator[dict[str, Any]]:
        if self.fail_scan:
            raise RuntimeError("scan failed")
        for doc in list(self.rows.values()):
            if fields:
                yield {k: copy.deepcopy(v) for k, v in doc.items() if k in fields}
            else:
                yield copy.deepcopy(doc)

    def count(self) -> int:
        return len(self.rows)


class InMemoryTagsIndex:
    """TagsIndexOperations stand-in that records replace calls."""

    def __init__(self, collection_name: str) -> None:
        self.collection_name = collection_name
        self.entries: list[IndexEntry] = []
        self.replace_calls = 0

    def replace_all(self, entries) -> int:
        self.replace_calls += 1
        self.entries = list(entries)
        return len(self.entries)

    def list_entries(self, locale: str | None = None) -> list[IndexEntry]:
        if locale is None:
            return list(self.entries)
        return [entry for entry in self.entries if entry.locale == locale]

    def get_count(self, tag: str, locale: str | None = None) -> int:
        for entry in self.entries:
            if entry.tag == tag and (locale is None or entry.locale == locale):
                return entry.count
        return 0


class InMemoryDatabase:
    """Database facade stand-in."""

    def __init__(self, config: TaggableConfig) -> None:
        self.db = MagicMock()
        self.config = config
        self.documents = InMemoryDocuments(config.collection_name)
        self.tags_index = InMemoryTagsIndex(config.tags_index_collection_name)


# === FIXTURES ===
@pytest.fixture(autouse=True)
def reset_default_locale() -> Iterator[None]:
    """Every test starts with the built-in default locale."""
    set_default_locale(DEFAULT_LOCALE)
    yield
    set_default_locale(DEFAULT_LOCALE)


@pytest.fixture
def mock_db():
    """Provide mock ArangoDB."""
    db = MagicMock()
    db.name = "test_db"
    db.has_collection.return_value = True
    return db


@pytest.fixture
def flat_config() -> TaggableConfig:
    return TaggableConfig(collection_name="my_models")


@pytest.fixture
def localized_config() -> TaggableConfig:
    return TaggableConfig(collection_name="localized_models", localized=True)


@pytest.fixture
def flat_db(flat_config) -> InMemoryDatabase:
    return InMemoryDatabase(flat_config)


@pytest.fixture
def localized_db(localized_config) -> InMemoryDatabase:
    return InMemoryDatabase(localized_config)


@pytest.fixture
def make_db():
    """Factory for an in-memory Database with a custom TaggableConfig."""

    def _make(**config_kwargs: Any) -> InMemoryDatabase:
        return InMemoryDatabase(TaggableConfig(**config_kwargs))

    return _make
