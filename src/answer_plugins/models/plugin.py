"""Plugin host models — Plugin metadata and settings-form descriptors."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ConfigType(StrEnum):
    """Widget the host renders for a config field."""

    INPUT = "input"
    TEXTAREA = "textarea"
    SWITCH = "switch"
    TAG_SELECTOR = "tag_selector"


class InputType(StrEnum):
    TEXT = "text"
    PASSWORD = "password"


class ConfigFieldUIOptions(BaseModel):
    """Rendering hints for a config field."""

    input_type: InputType | None = None
    rows: str | None = None
    class_name: str | None = None
    label: str | None = Field(default=None, description="i18n key of the switch label")


class ConfigField(BaseModel):
    """A single field of a plugin's settings form.

    ``title`` and ``description`` are i18n keys resolved by the host.
    """

    name: str
    type: ConfigType
    title: str
    description: str = ""
    required: bool = False
    value: Any = None
    ui_options: ConfigFieldUIOptions = Field(default_factory=ConfigFieldUIOptions)


class PluginInfo(BaseModel):
    """Plugin metadata shown in the host's plugin list."""

    name: str = Field(description="i18n key of the display name")
    slug_name: str = Field(description="Unique plugin identifier")
    description: str = Field(default="", description="i18n key of the description")
    version: str = ""
    author: str = ""
    link: str = ""
