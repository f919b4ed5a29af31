"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. YAML config file (if specified)
  2. Environment variables (ANSWER_PLUGINS_ prefix)
  3. Default values

These settings seed the plugins at startup.  Settings saved later through the
host's admin form arrive via each plugin's ``config_receiver``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class AlgoliaSettings(BaseModel):
    """Initial configuration for the Algolia search plugin."""

    enabled: bool = Field(default=True, description="Whether to register the Algolia plugin")
    app_id: str = Field(default="", description="Algolia application ID")
    api_key: str = Field(default="", description="Algolia admin API key")
    index: str = Field(default="answer", description="Base index name")
    show_logo: bool = Field(default=False, description="Show the Algolia logo beside the search box")
    answer_scope_separator: str = Field(
        default=" AND ",
        description="Joins the questionID scope onto answer filters",
    )

    @property
    def configured(self) -> bool:
        return bool(self.app_id and self.api_key)


class QuickLinksSettings(BaseModel):
    """Initial configuration for the quick links sidebar plugin."""

    enabled: bool = Field(default=True, description="Whether to register the quick links plugin")
    links_text: str = Field(default="", description="Initial sidebar links, one per line")


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Nested settings use double underscores:

    Example:
        ANSWER_PLUGINS_ALGOLIA__APP_ID=ABC123
        ANSWER_PLUGINS_ALGOLIA__API_KEY=...
        ANSWER_PLUGINS_OBSERVABILITY__LOG_FORMAT=console
    """

    model_config = {
        "env_prefix": "ANSWER_PLUGINS_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    algolia: AlgoliaSettings = Field(default_factory=AlgoliaSettings)
    quick_links: QuickLinksSettings = Field(default_factory=QuickLinksSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Keys set in the YAML file win over environment variables; keys it
        leaves out still fall back to the environment.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
