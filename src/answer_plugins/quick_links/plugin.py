"""Quick links sidebar plugin."""

from __future__ import annotations

from pydantic import ValidationError

from answer_plugins.models.plugin import ConfigField, ConfigFieldUIOptions, ConfigType, PluginInfo
from answer_plugins.models.sidebar import SidebarConfig
from answer_plugins.plugin.base import ConfigurablePlugin, SidebarPlugin, load_info
from answer_plugins.plugin.exceptions import ConfigurationError

I18N_PREFIX = "plugin.quick_links.backend"


class QuickLinks(SidebarPlugin, ConfigurablePlugin):
    """Holds the sidebar configuration edited in the admin settings form."""

    def __init__(self, config: SidebarConfig | None = None) -> None:
        self.config = config or SidebarConfig()

    def info(self) -> PluginInfo:
        return load_info(
            __package__ or "answer_plugins.quick_links",
            name=f"{I18N_PREFIX}.info.name",
            description=f"{I18N_PREFIX}.info.description",
        )

    def config_fields(self) -> list[ConfigField]:
        return [
            ConfigField(
                name="tags",
                type=ConfigType.TAG_SELECTOR,
                title=f"{I18N_PREFIX}.config.tags.title",
                description=f"{I18N_PREFIX}.config.tags.description",
                value=[tag.model_dump() for tag in self.config.tags],
            ),
            ConfigField(
                name="links_text",
                type=ConfigType.TEXTAREA,
                title=f"{I18N_PREFIX}.config.links.title",
                description=f"{I18N_PREFIX}.config.links.description",
                value=self.config.links_text,
                ui_options=ConfigFieldUIOptions(rows="5", class_name="small font-monospace"),
            ),
        ]

    def config_receiver(self, config: bytes | str) -> None:
        try:
            self.config = SidebarConfig.model_validate_json(config)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid quick links configuration: {e}") from e

    def get_sidebar_config(self) -> SidebarConfig:
        return self.config
