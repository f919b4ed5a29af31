"""Plugin host contract — Abstract plugin kinds and the plugin registry."""

from answer_plugins.plugin.base import (
    ConfigurablePlugin,
    Plugin,
    SearchPlugin,
    SearchSyncer,
    SidebarPlugin,
)
from answer_plugins.plugin.registry import PluginRegistry

__all__ = [
    "ConfigurablePlugin",
    "Plugin",
    "PluginRegistry",
    "SearchPlugin",
    "SearchSyncer",
    "SidebarPlugin",
]
