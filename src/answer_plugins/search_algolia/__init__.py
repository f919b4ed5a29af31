"""Algolia search plugin — Hosted search with per-sort-order virtual replicas."""

from __future__ import annotations

from answer_plugins.plugin.registry import PluginRegistry
from answer_plugins.search_algolia.adapter import SearchAlgolia
from answer_plugins.search_algolia.config import AlgoliaSearchConfig

__all__ = ["AlgoliaSearchConfig", "SearchAlgolia", "register"]


def register(registry: PluginRegistry, config: AlgoliaSearchConfig | None = None) -> SearchAlgolia:
    """Create the Algolia plugin and register it with ``registry``."""
    plugin = SearchAlgolia(config=config)
    registry.register(plugin)
    return plugin
