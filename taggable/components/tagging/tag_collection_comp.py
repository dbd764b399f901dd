"""
Tag collection component - per-document tag state.

Wraps a document dict and owns its tag field:
- FlatTagCollection: one TagSet in ``tags_array``
- LocalizedTagCollection: locale -> TagSet in ``localized_tags``

Each collection keeps a snapshot of its last-persisted tag field: the stored
value for a loaded document, the empty value for a new one (so tags preset on
a new document count as a change). has_changed() compares the current field
against that snapshot, which is what the change gate uses to decide whether a
save warrants a full index rebuild.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping, Sequence
from typing import Any, ClassVar

from taggable.components.tagging.tag_parsing_comp import join_tag_list, parse_tag_list
from taggable.components.tagging.tag_query_comp import (
    FlatTagQueryBuilder,
    LocalizedTagQueryBuilder,
    TagQueryBuilder,
)
from taggable.helpers.dto.config_dto import TaggableConfig
from taggable.helpers.dto.tags_dto import LocalizedTagSet, TagSet
from taggable.helpers.locale_helper import LocaleProvider, get_current_locale

FLAT_TAGS_FIELD = "tags_array"
LOCALIZED_TAGS_FIELD = "localized_tags"


class TagCollection(ABC):
    """Common base for the flat and localized tag collections."""

    field_name: ClassVar[str]

    def __init__(
        self,
        document: dict[str, Any],
        separator: str = ",",
        persisted: bool = False,
        locale_provider: LocaleProvider = get_current_locale,
    ) -> None:
        """
        Wrap a document dict.

        Args:
            document: Document to own the tag field of (mutated in place)
            separator: Display-string separator
            persisted: True when document was read from the store; False snapshots
                       the empty value so any preset tags are a pending change
            locale_provider: Current-locale accessor for locale-less reads
        """
        self.document = document
        self.separator = separator
        self.locale_provider = locale_provider
        if self.document.get(self.field_name) is None:
            self.document[self.field_name] = self._empty_value()
        self._snapshot = copy.deepcopy(self.document[self.field_name]) if persisted else self._empty_value()

    @classmethod
    def for_config(cls, config: TaggableConfig) -> type[TagCollection]:
        """Select the collection class configured for a document collection."""
        return LocalizedTagCollection if config.localized else FlatTagCollection

    @property
    def key(self) -> str | None:
        """Arango document key, None until first insert."""
        return self.document.get("_key")

    def has_changed(self) -> bool:
        """True iff the tag field differs from its last-persisted value."""
        return bool(self.document.get(self.field_name) != self._snapshot)

    def mark_persisted(self) -> None:
        """Take a new snapshot after a successful write."""
        self._snapshot = copy.deepcopy(self.document[self.field_name])

    @classmethod
    @abstractmethod
    def emit_index_keys(cls, document: Mapping[str, Any]) -> Iterator[Any]:
        """Map step of the index rebuild: yield one key per tag occurrence."""

    @classmethod
    @abstractmethod
    def query_builder(cls, locale_provider: LocaleProvider = get_current_locale) -> TagQueryBuilder:
        """Return the query builder matching this collection's storage shape."""

    @abstractmethod
    def _empty_value(self) -> Any: ...


class FlatTagCollection(TagCollection):
    """One TagSet per document, stored as an array."""

    field_name = FLAT_TAGS_FIELD

    def _empty_value(self) -> list[str]:
        return []

    @property
    def tag_set(self) -> TagSet:
        return tuple(self.document.get(self.field_name) or ())

    def set_tag_set(self, tags: Sequence[str]) -> None:
        """Assign an already-split tag array as given."""
        self.document[self.field_name] = list(tags)

    def set_tags(self, raw: str | None) -> None:
        """Replace the TagSet from a display string. None or blank clears it."""
        self.document[self.field_name] = list(parse_tag_list(raw, self.separator))

    def get_tags(self) -> str:
        """Render the TagSet as a display string."""
        return join_tag_list(self.tag_set, self.separator)

    @classmethod
    def emit_index_keys(cls, document: Mapping[str, Any]) -> Iterator[str]:
        yield from document.get(cls.field_name) or ()

    @classmethod
    def query_builder(cls, locale_provider: LocaleProvider = get_current_locale) -> TagQueryBuilder:
        return FlatTagQueryBuilder(cls.field_name)


class LocalizedTagCollection(TagCollection):
    """A TagSet per locale, stored as an object of arrays.

    Assignment merges per locale, but clearing empties every locale at once.
    """

    field_name = LOCALIZED_TAGS_FIELD

    def _empty_value(self) -> dict[str, list[str]]:
        return {}

    @property
    def localized_tag_set(self) -> LocalizedTagSet:
        stored = self.document.get(self.field_name) or {}
        return {locale: tuple(tags or ()) for locale, tags in stored.items()}

    def locales(self) -> list[str]:
        return list(self.document.get(self.field_name) or {})

    def set_tags(self, by_locale: Mapping[str, str | None] | str | None) -> None:
        """
        Assign tags per locale.

        None, an empty mapping or a blank string clears ALL locales. A non-blank
        string has no locale to go to and raises TypeError. Otherwise
        only the supplied locales are replaced, in the order given; locales not
        present in by_locale keep their previous tags.
        """
        if isinstance(by_locale, str):
            if by_locale.strip():
                raise TypeError("Localized tags must be a mapping of locale to tag string")
            by_locale = None
        if not by_locale:
            self.document[self.field_name] = {}
            return

        merged = dict(self.document.get(self.field_name) or {})
        for locale, raw in by_locale.items():
            merged[locale] = list(parse_tag_list(raw, self.separator))
        self.document[self.field_name] = merged

    def get_tag_set(self, locale: str | None = None) -> TagSet:
        """Return the TagSet for a locale (current locale by default), empty if absent."""
        locale = locale or self.locale_provider()
        stored = self.document.get(self.field_name) or {}
        return tuple(stored.get(locale) or ())

    def get_tags(self, locale: str | None = None) -> str:
        """Return the display string for a locale, empty string if absent."""
        return join_tag_list(self.get_tag_set(locale), self.separator)

    @classmethod
    def emit_index_keys(cls, document: Mapping[str, Any]) -> Iterator[tuple[str, str]]:
        stored = document.get(cls.field_name) or {}
        for locale, tags in stored.items():
            for tag in tags or ():
                yield (tag, locale)

    @classmethod
    def query_builder(cls, locale_provider: LocaleProvider = get_current_locale) -> TagQueryBuilder:
        return LocalizedTagQueryBuilder(cls.field_name, locale_provider)


def should_reindex(collection: TagCollection) -> bool:
    """Change gate: rebuild the index only when this save changed the tag field."""
    return collection.has_changed()
