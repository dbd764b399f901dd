"""
Unit tests for tag index component (aggregation and ranking).
"""

from taggable.components.tagging.tag_collection_comp import FlatTagCollection, LocalizedTagCollection
from taggable.components.tagging.tag_index_comp import (
    aggregate_tag_counts,
    build_index_entries,
    rank_tags_by_weight,
    sorted_tag_names,
)
from taggable.helpers.dto.tags_dto import IndexEntry

DOCUMENTS = [
    {"tags_array": ["food", "ant", "bee"]},
    {"tags_array": ["juice", "food", "bee", "zip"]},
    {"tags_array": ["honey", "strip", "food"]},
]


class TestAggregateTagCounts:
    def test_flat_counts(self):
        counts = aggregate_tag_counts(DOCUMENTS, FlatTagCollection.emit_index_keys)

        assert counts == {"food": 3, "bee": 2, "ant": 1, "juice": 1, "zip": 1, "honey": 1, "strip": 1}

    def test_independent_of_scan_order(self):
        forward = aggregate_tag_counts(DOCUMENTS, FlatTagCollection.emit_index_keys)
        backward = aggregate_tag_counts(reversed(DOCUMENTS), FlatTagCollection.emit_index_keys)

        assert forward == backward

    def test_consumes_lazy_iterables(self):
        counts = aggregate_tag_counts(iter(DOCUMENTS), FlatTagCollection.emit_index_keys)

        assert counts["food"] == 3

    def test_documents_without_tags(self):
        counts = aggregate_tag_counts([{}, {"tags_array": None}], FlatTagCollection.emit_index_keys)

        assert counts == {}

    def test_localized_counts_are_composite(self):
        documents = [
            {"localized_tags": {"en": ["food", "bee"], "pt-BR": ["comida"]}},
            {"localized_tags": {"en": ["food"], "pt-BR": ["comida", "food"]}},
        ]

        counts = aggregate_tag_counts(documents, LocalizedTagCollection.emit_index_keys)

        assert counts == {("food", "en"): 2, ("bee", "en"): 1, ("comida", "pt-BR"): 2, ("food", "pt-BR"): 1}


class TestBuildIndexEntries:
    def test_flat_entries(self):
        entries = build_index_entries({"food": 3})

        assert entries == [IndexEntry(tag="food", count=3)]

    def test_localized_entries(self):
        entries = build_index_entries({("food", "en"): 2})

        assert entries == [IndexEntry(tag="food", count=2, locale="en")]


class TestRanking:
    def test_rank_by_count_then_tag(self):
        counts = aggregate_tag_counts(DOCUMENTS, FlatTagCollection.emit_index_keys)

        ranked = rank_tags_by_weight(build_index_entries(counts))

        assert ranked == [
            ("food", 3),
            ("bee", 2),
            ("ant", 1),
            ("honey", 1),
            ("juice", 1),
            ("strip", 1),
            ("zip", 1),
        ]

    def test_sorted_tag_names(self):
        counts = aggregate_tag_counts(DOCUMENTS, FlatTagCollection.emit_index_keys)

        assert sorted_tag_names(build_index_entries(counts)) == ["ant", "bee", "food", "honey", "juice", "strip", "zip"]

    def test_sorted_tag_names_distinct_across_locales(self):
        entries = [
            IndexEntry(tag="food", count=1, locale="en"),
            IndexEntry(tag="food", count=2, locale="pt-BR"),
            IndexEntry(tag="ant", count=1, locale="en"),
        ]

        assert sorted_tag_names(entries) == ["ant", "food"]

    def test_codepoint_order(self):
        entries = [IndexEntry(tag="b", count=1), IndexEntry(tag="B", count=1), IndexEntry(tag="a", count=1)]

        assert rank_tags_by_weight(entries) == [("B", 1), ("a", 1), ("b", 1)]

    def test_empty(self):
        assert rank_tags_by_weight([]) == []
        assert sorted_tag_names([]) == []
