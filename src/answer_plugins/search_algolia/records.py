"""Index records — The exact shape of a content object stored in Algolia."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from answer_plugins.models.search import SearchContent


class IndexRecord(BaseModel):
    """A question or answer as stored in the Algolia index.

    Field aliases are the attribute names used by the index settings and the
    filter builders (``objectID``, ``questionID``, ``userID``, ``hasAccepted``).
    """

    model_config = ConfigDict(populate_by_name=True)

    object_id: str = Field(alias="objectID")
    title: str
    type: str
    content: str
    answers: int
    status: int
    tags: list[str]
    question_id: str = Field(alias="questionID")
    user_id: str = Field(alias="userID")
    views: int
    created: int
    active: int
    score: int
    has_accepted: bool = Field(alias="hasAccepted")

    @classmethod
    def from_content(cls, content: SearchContent) -> IndexRecord:
        return cls(
            object_id=content.object_id,
            title=content.title,
            type=content.type,
            content=content.content,
            answers=content.answers,
            status=content.status,
            tags=list(content.tags),
            question_id=content.question_id,
            user_id=content.user_id,
            views=content.views,
            created=content.created,
            active=content.active,
            score=content.score,
            has_accepted=content.has_accepted,
        )

    def to_algolia(self) -> dict[str, Any]:
        """Dump with Algolia attribute names."""
        return self.model_dump(by_alias=True)
