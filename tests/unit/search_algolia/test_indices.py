"""Tests for index name resolution and the settings template."""

from __future__ import annotations

import pytest

from answer_plugins.models.search import SearchOrder
from answer_plugins.plugin.exceptions import ConfigurationError
from answer_plugins.search_algolia.index_settings import (
    DEFAULT_INDEX_SETTINGS,
    REPLICA_CUSTOM_RANKING,
    build_index_settings,
)
from answer_plugins.search_algolia.indices import replica_index_names, resolve_index_name


class TestResolveIndexName:
    @pytest.mark.parametrize("order", ["newest", "active", "score"])
    def test_replica_orders(self, order: str) -> None:
        assert resolve_index_name("q", order) == f"q_{order}"

    def test_empty_is_base(self) -> None:
        assert resolve_index_name("q", "") == "q"
        assert resolve_index_name("q") == "q"

    def test_unknown_is_identity(self) -> None:
        assert resolve_index_name("q", "relevance") == "q"
        assert resolve_index_name("q", "oldest") == "q"

    def test_accepts_enum(self) -> None:
        assert resolve_index_name("q", SearchOrder.NEWEST) == "q_newest"
        assert resolve_index_name("q", SearchOrder.RELEVANCE) == "q"

    def test_replica_names_fixed_order(self) -> None:
        assert replica_index_names("q") == ["q_newest", "q_active", "q_score"]


class TestIndexSettings:
    def test_replicas_injected(self) -> None:
        settings = build_index_settings("answer")
        assert settings["replicas"] == [
            "virtual(answer_newest)",
            "virtual(answer_active)",
            "virtual(answer_score)",
        ]

    def test_template_fields_kept(self) -> None:
        settings = build_index_settings("answer")
        assert settings["searchableAttributes"] == ["title", "content"]
        assert "filterOnly(tags)" in settings["attributesForFaceting"]

    def test_fresh_copy_each_call(self) -> None:
        first = build_index_settings("a")
        first["replicas"].append("virtual(x)")
        assert build_index_settings("a")["replicas"] == replica_index_names_virtual("a")
        assert "replicas" not in DEFAULT_INDEX_SETTINGS

    def test_invalid_template(self) -> None:
        with pytest.raises(ConfigurationError, match="Invalid Algolia index settings"):
            build_index_settings("a", template="{not json")

    def test_non_object_template(self) -> None:
        with pytest.raises(ConfigurationError, match="JSON object"):
            build_index_settings("a", template="[1, 2]")

    def test_replica_ranking_heads(self) -> None:
        heads = [ranking[0] for ranking in REPLICA_CUSTOM_RANKING.values()]
        assert heads == ["desc(created)", "desc(active)", "desc(score)"]
        for ranking in REPLICA_CUSTOM_RANKING.values():
            assert ranking[1:] == ["desc(content)", "desc(title)"]


def replica_index_names_virtual(base: str) -> list[str]:
    return [f"virtual({name})" for name in replica_index_names(base)]
