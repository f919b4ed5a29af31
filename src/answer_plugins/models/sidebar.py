"""Sidebar models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SidebarTag(BaseModel):
    """A tag pinned to the sidebar."""

    id: str = ""
    slug_name: str = ""
    display_name: str = ""
    recommend: bool = False
    reserved: bool = False


class SidebarConfig(BaseModel):
    """Sidebar widget configuration: pinned tags and free-text links."""

    tags: list[SidebarTag] = Field(default_factory=list)
    links_text: str = Field(default="", description="One link per line")
