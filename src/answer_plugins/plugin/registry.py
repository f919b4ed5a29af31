"""Plugin Registry — Explicit registration and lookup of plugin instances.

Plugins never register themselves on import.  An application entry point
creates a ``PluginRegistry`` and hands it to each plugin package's
``register()`` function, which keeps the registration order and the set of
active plugins under the caller's control.
"""

from __future__ import annotations

import logging

from answer_plugins.plugin.base import ConfigurablePlugin, Plugin, SearchPlugin, SidebarPlugin
from answer_plugins.plugin.exceptions import ConfigurationError, PluginNotFoundError

logger = logging.getLogger(__name__)


class PluginRegistry:
    """Registry of plugin instances keyed by slug name.

    Example:
        >>> registry = PluginRegistry()
        >>> registry.register(QuickLinks())
        >>> registry.configure("quick_links", b'{"links_text": "..."}')
        >>> plugin = registry.get("quick_links")
    """

    def __init__(self) -> None:
        self._plugins: dict[str, Plugin] = {}

    def register(self, plugin: Plugin) -> None:
        """Register a plugin instance under its slug name."""
        slug = plugin.info().slug_name
        if slug in self._plugins:
            logger.warning("Overwriting existing plugin registration: %s", slug)
        self._plugins[slug] = plugin
        logger.info("Registered plugin: %s", slug)

    def get(self, slug_name: str) -> Plugin:
        """Get a registered plugin by slug name.

        Raises:
            PluginNotFoundError: If no plugin is registered under this name.
        """
        if slug_name not in self._plugins:
            raise PluginNotFoundError(
                f"No plugin registered with name '{slug_name}'. "
                f"Available plugins: {list(self._plugins.keys())}"
            )
        return self._plugins[slug_name]

    def configure(self, slug_name: str, config: bytes | str) -> None:
        """Forward a saved settings blob to a plugin's config receiver.

        Raises:
            PluginNotFoundError: If the plugin is not registered.
            ConfigurationError: If the plugin takes no configuration or rejects it.
        """
        plugin = self.get(slug_name)
        if not isinstance(plugin, ConfigurablePlugin):
            raise ConfigurationError(f"Plugin '{slug_name}' does not accept configuration.")
        plugin.config_receiver(config)
        logger.info("Applied configuration to plugin: %s", slug_name)

    @property
    def search_plugins(self) -> list[SearchPlugin]:
        """Registered search providers, in registration order."""
        return [p for p in self._plugins.values() if isinstance(p, SearchPlugin)]

    @property
    def sidebar_plugins(self) -> list[SidebarPlugin]:
        """Registered sidebar plugins, in registration order."""
        return [p for p in self._plugins.values() if isinstance(p, SidebarPlugin)]

    async def shutdown_all(self) -> None:
        """Shut down every registered plugin, continuing past failures."""
        for slug, plugin in self._plugins.items():
            try:
                await plugin.shutdown()
                logger.info("Shut down plugin: %s", slug)
            except Exception:
                logger.warning("Error shutting down plugin: %s", slug, exc_info=True)
        self._plugins.clear()

    @property
    def registered_plugins(self) -> list[str]:
        """List all registered plugin slug names."""
        return list(self._plugins.keys())
