"""Base plugin interfaces — Abstract classes for the plugin kinds the host knows.

Every plugin implements ``Plugin``.  Depending on what it contributes it also
implements one or more of:
  1. ``ConfigurablePlugin``: exposes a settings form and receives saved settings
  2. ``SearchPlugin``: serves search queries and mirrors content changes
  3. ``SidebarPlugin``: supplies the sidebar widget configuration
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from importlib import resources
from typing import Protocol, runtime_checkable

import yaml  # type: ignore[import-untyped]

from answer_plugins.models.plugin import ConfigField, PluginInfo
from answer_plugins.models.search import (
    SearchBasicCond,
    SearchContent,
    SearchDesc,
    SearchResult,
)
from answer_plugins.models.sidebar import SidebarConfig
from answer_plugins.plugin.exceptions import ConfigurationError


def load_info(package: str, name: str, description: str, filename: str = "info.yaml") -> PluginInfo:
    """Build ``PluginInfo`` from the ``info.yaml`` bundled with a plugin package.

    Args:
        package: Dotted name of the plugin package holding the file.
        name: i18n key of the plugin display name.
        description: i18n key of the plugin description.
        filename: Metadata file name inside the package.

    Raises:
        ConfigurationError: If the file is missing or has no ``slug_name``.
    """
    try:
        raw = resources.files(package).joinpath(filename).read_text(encoding="utf-8")
    except (FileNotFoundError, ModuleNotFoundError) as e:
        raise ConfigurationError(f"Plugin metadata not found: {package}/{filename}") from e

    data = yaml.safe_load(raw) or {}
    if not data.get("slug_name"):
        raise ConfigurationError(f"Plugin metadata {package}/{filename} has no slug_name")

    return PluginInfo(
        name=name,
        slug_name=data["slug_name"],
        description=description,
        version=str(data.get("version", "")),
        author=data.get("author", ""),
        link=data.get("link", ""),
    )


class Plugin(ABC):
    """Abstract base class for every plugin."""

    @abstractmethod
    def info(self) -> PluginInfo:
        """Return the plugin metadata."""

    async def shutdown(self) -> None:
        """Release resources held by the plugin. No-op by default."""


class ConfigurablePlugin(Plugin):
    """A plugin with an administrator-editable settings form."""

    @abstractmethod
    def config_fields(self) -> list[ConfigField]:
        """Describe the settings form, filled with the current values."""

    @abstractmethod
    def config_receiver(self, config: bytes | str) -> None:
        """Apply a JSON settings blob saved by an administrator.

        Raises:
            ConfigurationError: If the blob cannot be parsed.
        """


@runtime_checkable
class SearchSyncer(Protocol):
    """Host-side source of paged platform content for a full re-index."""

    async def get_questions_page(self, page: int, page_size: int) -> list[SearchContent]: ...

    async def get_answers_page(self, page: int, page_size: int) -> list[SearchContent]: ...


class SearchPlugin(Plugin):
    """A search provider replacing the host's built-in search.

    All search methods return ``(results, total)`` where ``total`` is the
    number of hits across all pages.
    """

    @abstractmethod
    def description(self) -> SearchDesc:
        """Branding shown next to the search box."""

    @abstractmethod
    async def register_syncer(self, syncer: SearchSyncer) -> None:
        """Receive the host syncer once at startup and start a full sync."""

    @abstractmethod
    async def search_contents(self, cond: SearchBasicCond) -> tuple[list[SearchResult], int]:
        """Search questions and answers together."""

    @abstractmethod
    async def search_questions(self, cond: SearchBasicCond) -> tuple[list[SearchResult], int]:
        """Search questions only."""

    @abstractmethod
    async def search_answers(self, cond: SearchBasicCond) -> tuple[list[SearchResult], int]:
        """Search answers only."""

    @abstractmethod
    async def update_content(self, content: SearchContent) -> None:
        """Insert or replace one content record in the search backend."""

    @abstractmethod
    async def delete_content(self, content_id: str) -> None:
        """Remove one content record from the search backend."""


class SidebarPlugin(Plugin):
    """A plugin supplying the sidebar widget."""

    @abstractmethod
    def get_sidebar_config(self) -> SidebarConfig:
        """Return the current sidebar configuration."""
