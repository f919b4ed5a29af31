"""Application entry point — Build a plugin registry from settings.

The host process calls ``create_registry()`` once at startup instead of
relying on import-time registration::

    registry = create_registry()
    for plugin in registry.search_plugins:
        await plugin.register_syncer(syncer)
"""

from __future__ import annotations

import logging
from pathlib import Path

from answer_plugins import __version__, quick_links, search_algolia
from answer_plugins.config.settings import Settings
from answer_plugins.models.sidebar import SidebarConfig
from answer_plugins.observability.logging import setup_logging
from answer_plugins.plugin.registry import PluginRegistry
from answer_plugins.search_algolia.config import AlgoliaSearchConfig

logger = logging.getLogger(__name__)


def create_registry(settings: Settings | None = None) -> PluginRegistry:
    """Configure logging and register every enabled plugin.

    Args:
        settings: Application settings. If None, loads
            ``answer-plugins.yaml`` when present, else the environment.

    Returns:
        A registry holding the enabled plugins.
    """
    if settings is None:
        yaml_path = Path("answer-plugins.yaml")
        settings = Settings.from_yaml(yaml_path) if yaml_path.exists() else Settings()

    setup_logging(settings.observability)
    logger.info("Starting answer-plugins v%s", __version__)

    registry = PluginRegistry()

    if settings.quick_links.enabled:
        quick_links.register(registry, SidebarConfig(links_text=settings.quick_links.links_text))

    if settings.algolia.enabled:
        algolia = settings.algolia
        if not algolia.configured:
            logger.warning("Algolia credentials not set; configure them from the admin settings page")
        search_algolia.register(
            registry,
            AlgoliaSearchConfig(
                app_id=algolia.app_id,
                api_key=algolia.api_key,
                index=algolia.index,
                show_logo=algolia.show_logo,
                answer_scope_separator=algolia.answer_scope_separator,
            ),
        )

    logger.info("Registered plugins: %s", ", ".join(registry.registered_plugins) or "none")
    return registry
