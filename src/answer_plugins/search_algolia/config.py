"""Algolia plugin configuration saved by the administrator."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AlgoliaSearchConfig(BaseModel):
    """Settings blob received from the host's plugin settings form."""

    app_id: str = Field(default="", description="Algolia application ID")
    api_key: str = Field(default="", description="Algolia admin API key")
    index: str = Field(default="answer", description="Base index name")
    show_logo: bool = Field(default=False, description="Show the Algolia logo beside the search box")
    answer_scope_separator: str = Field(
        default=" AND ",
        description="Joins the questionID scope onto answer filters; empty reproduces legacy filters",
    )

    def credentials(self) -> tuple[str, str]:
        return self.app_id, self.api_key
