"""
Unit tests for tag query component.

Checks both halves of a TagQuery: the AQL filter/bind vars and the
in-process predicate.
"""

import pytest

from taggable.components.tagging.tag_query_comp import FlatTagQueryBuilder, LocalizedTagQueryBuilder

TAGGED = {"_key": "1", "tags_array": ["interesting", "stuff", "good", "bad"]}
LOCALIZED = {
    "_key": "2",
    "localized_tags": {
        "pt-BR": ["samba", "spfc", "rio"],
        "en": ["interesting", "stuff", "good", "bad"],
    },
}


@pytest.fixture
def flat():
    return FlatTagQueryBuilder("tags_array")


class TestFlatTaggedWith:
    def test_filter_and_bind_vars(self, flat):
        query = flat.tagged_with("interesting")

        assert query.filter_clause == "FILTER @tag IN (doc.tags_array || [])"
        assert query.bind_vars == {"tag": "interesting"}

    def test_matches(self, flat):
        assert flat.tagged_with("interesting").matches(TAGGED)
        assert not flat.tagged_with("mcdonalds").matches(TAGGED)

    def test_exact_match_only(self, flat):
        assert not flat.tagged_with("Interesting").matches(TAGGED)
        assert not flat.tagged_with("interest").matches(TAGGED)

    def test_document_without_tags(self, flat):
        assert not flat.tagged_with("a").matches({"_key": "x"})


class TestFlatTaggedWithAll:
    def test_filter_guards_empty_list(self, flat):
        query = flat.tagged_with_all("interesting", "good")

        assert "LENGTH(@tags) > 0" in query.filter_clause
        assert "@tags ALL IN (doc.tags_array || [])" in query.filter_clause
        assert query.bind_vars == {"tags": ["interesting", "good"]}

    def test_array_and_varargs_are_equivalent(self, flat):
        assert flat.tagged_with_all(["interesting", "good"]).bind_vars == flat.tagged_with_all("interesting", "good").bind_vars

    def test_superset_matches(self, flat):
        assert flat.tagged_with_all(["interesting", "good"]).matches(TAGGED)

    def test_missing_tag_excludes(self, flat):
        assert not flat.tagged_with_all(["interesting", "good", "wrong"]).matches(TAGGED)
        assert not flat.tagged_with_all("interesting", "good", "mcdonalds").matches(TAGGED)

    def test_empty_matches_nothing(self, flat):
        assert not flat.tagged_with_all([]).matches(TAGGED)
        assert not flat.tagged_with_all().matches(TAGGED)


class TestFlatTaggedWithAny:
    def test_filter(self, flat):
        query = flat.tagged_with_any(["interesting", "mcdonalds"])

        assert query.filter_clause == "FILTER @tags ANY IN (doc.tags_array || [])"
        assert query.bind_vars == {"tags": ["interesting", "mcdonalds"]}

    def test_intersection_matches(self, flat):
        assert flat.tagged_with_any(["interesting", "good", "wrong"]).matches(TAGGED)
        assert flat.tagged_with_any("interesting", "mcdonalds").matches(TAGGED)

    def test_disjoint_excludes(self, flat):
        assert not flat.tagged_with_any("hardees", "wendys", "mcdonalds").matches(TAGGED)

    def test_empty_matches_nothing(self, flat):
        assert not flat.tagged_with_any([]).matches(TAGGED)


class TestLocalizedQueries:
    def test_locale_is_a_bind_var(self):
        builder = LocalizedTagQueryBuilder("localized_tags", lambda: "pt-BR")

        query = builder.tagged_with("spfc")

        assert query.filter_clause == "FILTER @tag IN (doc.localized_tags[@locale] || [])"
        assert query.bind_vars == {"tag": "spfc", "locale": "pt-BR"}

    def test_scoped_to_current_locale(self):
        en = LocalizedTagQueryBuilder("localized_tags", lambda: "en")
        pt = LocalizedTagQueryBuilder("localized_tags", lambda: "pt-BR")

        assert en.tagged_with("interesting").matches(LOCALIZED)
        assert not en.tagged_with("spfc").matches(LOCALIZED)
        assert pt.tagged_with("spfc").matches(LOCALIZED)

    def test_locale_resolved_per_call(self):
        current = {"locale": "en"}
        builder = LocalizedTagQueryBuilder("localized_tags", lambda: current["locale"])

        en_query = builder.tagged_with_any("samba")
        current["locale"] = "pt-BR"
        pt_query = builder.tagged_with_any("samba")

        assert not en_query.matches(LOCALIZED)
        assert pt_query.matches(LOCALIZED)
        assert en_query.bind_vars["locale"] == "en"

    def test_all_and_any(self):
        builder = LocalizedTagQueryBuilder("localized_tags", lambda: "en")

        assert builder.tagged_with_all("interesting", "good").matches(LOCALIZED)
        assert not builder.tagged_with_all("interesting", "samba").matches(LOCALIZED)
        assert builder.tagged_with_any("samba", "good").matches(LOCALIZED)

    def test_unknown_locale_matches_nothing(self):
        builder = LocalizedTagQueryBuilder("localized_tags", lambda: "fr")

        assert not builder.tagged_with_any("interesting", "samba").matches(LOCALIZED)
