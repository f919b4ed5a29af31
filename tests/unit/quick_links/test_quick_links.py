"""Tests for the quick links sidebar plugin."""

from __future__ import annotations

import pytest

from answer_plugins.models.plugin import ConfigType
from answer_plugins.models.sidebar import SidebarConfig, SidebarTag
from answer_plugins.plugin.exceptions import ConfigurationError
from answer_plugins.quick_links import QuickLinks


@pytest.fixture
def plugin() -> QuickLinks:
    return QuickLinks(
        config=SidebarConfig(
            tags=[SidebarTag(id="1", slug_name="python", display_name="Python")],
            links_text="Docs, https://answer.apache.org/docs",
        )
    )


class TestQuickLinksProperties:
    def test_info(self, plugin: QuickLinks) -> None:
        info = plugin.info()
        assert info.slug_name == "quick_links"
        assert info.description == "plugin.quick_links.backend.info.description"

    def test_default_config_empty(self) -> None:
        config = QuickLinks().get_sidebar_config()
        assert config.tags == []
        assert config.links_text == ""


class TestQuickLinksConfiguration:
    def test_config_fields(self, plugin: QuickLinks) -> None:
        tags, links = plugin.config_fields()
        assert tags.name == "tags"
        assert tags.type == ConfigType.TAG_SELECTOR
        assert tags.value[0]["slug_name"] == "python"
        assert links.name == "links_text"
        assert links.type == ConfigType.TEXTAREA
        assert links.value == "Docs, https://answer.apache.org/docs"
        assert links.ui_options.rows == "5"
        assert links.ui_options.class_name == "small font-monospace"

    def test_config_receiver_replaces_config(self, plugin: QuickLinks) -> None:
        plugin.config_receiver(b'{"tags": [{"id": "2", "slug_name": "go"}], "links_text": "Blog, /blog"}')
        config = plugin.get_sidebar_config()
        assert [t.slug_name for t in config.tags] == ["go"]
        assert config.links_text == "Blog, /blog"

    def test_config_receiver_partial_resets_missing(self, plugin: QuickLinks) -> None:
        plugin.config_receiver('{"links_text": "Only links"}')
        assert plugin.get_sidebar_config().tags == []

    def test_config_receiver_invalid(self, plugin: QuickLinks) -> None:
        with pytest.raises(ConfigurationError, match="Invalid quick links configuration"):
            plugin.config_receiver(b"not json")
        assert plugin.get_sidebar_config().links_text == "Docs, https://answer.apache.org/docs"
