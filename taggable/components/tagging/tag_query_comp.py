"""
Tag query component - membership filters over the primary collection.

Builders return TagQuery filter objects, never results. A TagQuery carries:
- an AQL FILTER clause over the loop variable ``doc``
- the bind vars it needs
- an in-process predicate with the same semantics (``matches``)

Semantics:
- tagged_with(tag): exact membership
- tagged_with_all(*tags): document tags are a superset of tags
- tagged_with_any(*tags): document tags intersect tags
An empty tag list matches no documents for both all and any.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from taggable.components.tagging.tag_parsing_comp import flatten_tag_args
from taggable.helpers.dto.tags_dto import TagSet
from taggable.helpers.locale_helper import LocaleProvider, get_current_locale

DocumentPredicate = Callable[[Mapping[str, Any]], bool]


@dataclass(frozen=True)
class TagQuery:
    """Filter object for DocumentOperations.find()."""

    filter_clause: str
    bind_vars: dict[str, Any]
    predicate: DocumentPredicate = field(compare=False, repr=False)

    def matches(self, document: Mapping[str, Any]) -> bool:
        """Evaluate the filter against a document in process."""
        return self.predicate(document)


class TagQueryBuilder(ABC):
    """Builds tagged_with / tagged_with_all / tagged_with_any filters."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name

    def tagged_with(self, tag: str) -> TagQuery:
        target, bind_vars, read_tags = self._target()
        bind_vars["tag"] = tag
        return TagQuery(
            filter_clause=f"FILTER @tag IN {target}",
            bind_vars=bind_vars,
            predicate=lambda doc: tag in read_tags(doc),
        )

    def tagged_with_all(self, *tags: Any) -> TagQuery:
        wanted = flatten_tag_args(*tags)
        target, bind_vars, read_tags = self._target()
        bind_vars["tags"] = wanted
        return TagQuery(
            # [] ALL IN x is vacuously true in AQL
            filter_clause=f"FILTER LENGTH(@tags) > 0 AND @tags ALL IN {target}",
            bind_vars=bind_vars,
            predicate=lambda doc: bool(wanted) and set(wanted).issubset(read_tags(doc)),
        )

    def tagged_with_any(self, *tags: Any) -> TagQuery:
        wanted = flatten_tag_args(*tags)
        target, bind_vars, read_tags = self._target()
        bind_vars["tags"] = wanted
        return TagQuery(
            filter_clause=f"FILTER @tags ANY IN {target}",
            bind_vars=bind_vars,
            predicate=lambda doc: not set(wanted).isdisjoint(read_tags(doc)),
        )

    @abstractmethod
    def _target(self) -> tuple[str, dict[str, Any], Callable[[Mapping[str, Any]], TagSet]]:
        """Return (AQL array expression, bind vars, in-process reader) for the tag array."""


class FlatTagQueryBuilder(TagQueryBuilder):
    """Filters on the single tag array field."""

    def _target(self) -> tuple[str, dict[str, Any], Callable[[Mapping[str, Any]], TagSet]]:
        def read_tags(doc: Mapping[str, Any]) -> TagSet:
            return tuple(doc.get(self.field_name) or ())

        return f"(doc.{self.field_name} || [])", {}, read_tags


class LocalizedTagQueryBuilder(TagQueryBuilder):
    """Filters on the current locale's tag array.

    The locale is resolved when a query is built and travels only as a bind var.
    """

    def __init__(self, field_name: str, locale_provider: LocaleProvider = get_current_locale) -> None:
        super().__init__(field_name)
        self.locale_provider = locale_provider

    def _target(self) -> tuple[str, dict[str, Any], Callable[[Mapping[str, Any]], TagSet]]:
        locale = self.locale_provider()

        def read_tags(doc: Mapping[str, Any]) -> TagSet:
            by_locale = doc.get(self.field_name) or {}
            return tuple(by_locale.get(locale) or ())

        return f"(doc.{self.field_name}[@locale] || [])", {"locale": locale}, read_tags
