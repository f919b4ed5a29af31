"""Quick links plugin — Sidebar widget with pinned tags and custom links."""

from __future__ import annotations

from answer_plugins.models.sidebar import SidebarConfig
from answer_plugins.plugin.registry import PluginRegistry
from answer_plugins.quick_links.plugin import QuickLinks

__all__ = ["QuickLinks", "register"]


def register(registry: PluginRegistry, config: SidebarConfig | None = None) -> QuickLinks:
    """Create the quick links plugin and register it with ``registry``."""
    plugin = QuickLinks(config=config)
    registry.register(plugin)
    return plugin
