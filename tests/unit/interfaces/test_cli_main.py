"""Unit tests for the taggable CLI."""

from unittest.mock import MagicMock, patch

import pytest

from taggable.helpers.locale_helper import get_current_locale
from taggable.interfaces.cli.cli_main import build_parser, main


@pytest.fixture
def service():
    svc = MagicMock()
    svc.config.collection_name = "articles"
    svc.config.tags_index_collection_name = "articles_tags_index"
    svc.collection_cls.field_name = "tags_array"
    return svc


def _patch_service(module, service):
    return patch(f"taggable.interfaces.cli.commands.{module}.get_taggable_service", return_value=service)


class TestParser:
    def test_find_defaults(self):
        args = build_parser().parse_args(["find", "articles", "food", "bee"])

        assert args.collection == "articles"
        assert args.tags == ["food", "bee"]
        assert args.match == "any"
        assert args.limit is None
        assert args.locale is None

    def test_find_rejects_unknown_match(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["find", "articles", "a", "--match", "some"])

    def test_tags_flags(self):
        args = build_parser().parse_args(["tags", "articles", "--weights", "--locale", "pt-BR"])

        assert args.weights is True
        assert args.locale == "pt-BR"

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "rebuild-index" in capsys.readouterr().out


class TestRebuildIndexCommand:
    def test_success(self, service):
        service.rebuild_tags_index.return_value = 7

        with _patch_service("rebuild_index", service) as get_service:
            assert main(["rebuild-index", "articles"]) == 0

        get_service.assert_called_once_with("articles")
        service.rebuild_tags_index.assert_called_once()

    def test_disabled(self, service):
        service.rebuild_tags_index.return_value = None

        with _patch_service("rebuild_index", service):
            assert main(["rebuild-index", "articles"]) == 0

    def test_failure_returns_1(self, service):
        service.rebuild_tags_index.side_effect = RuntimeError("arango down")

        with _patch_service("rebuild_index", service):
            assert main(["rebuild-index", "articles"]) == 1


class TestTagsCommand:
    def test_plain_list(self, service):
        service.tags.return_value = ["ant", "bee"]

        with _patch_service("list_tags", service):
            assert main(["tags", "articles"]) == 0

        service.tags.assert_called_once_with()
        service.tags_with_weight.assert_not_called()

    def test_weights_under_locale(self, service):
        seen = []
        service.tags_with_weight.side_effect = lambda: seen.append(get_current_locale()) or [("food", 3)]

        with _patch_service("list_tags", service):
            assert main(["tags", "articles", "--weights", "--locale", "pt-BR"]) == 0

        assert seen == ["pt-BR"]
        assert get_current_locale() == "en"

    def test_config_error_returns_1(self):
        with patch(
            "taggable.interfaces.cli.commands.list_tags.get_taggable_service",
            side_effect=ValueError("bad option"),
        ):
            assert main(["tags", "articles"]) == 1


class TestFindCommand:
    def test_any_by_default(self, service):
        service.find.return_value = [{"_key": "1", "tags_array": ["food"]}]

        with _patch_service("find", service):
            assert main(["find", "articles", "food", "bee", "--limit", "5"]) == 0

        service.tagged_with_any.assert_called_once_with(["food", "bee"])
        service.find.assert_called_once_with(service.tagged_with_any.return_value, limit=5)

    def test_match_all(self, service):
        service.find.return_value = []

        with _patch_service("find", service):
            assert main(["find", "articles", "food", "--match", "all"]) == 0

        service.tagged_with_all.assert_called_once_with(["food"])
