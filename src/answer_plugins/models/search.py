"""Search models — Conditions, results and content records exchanged with the host.

The host builds a ``SearchBasicCond`` for every user query and hands platform
content to search plugins as ``SearchContent``.  Plugins answer with a page of
``SearchResult`` records plus a total hit count.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum

from pydantic import BaseModel, ConfigDict, Field


class SearchOrder(StrEnum):
    """Sort order requested by the host."""

    NEWEST = "newest"
    ACTIVE = "active"
    SCORE = "score"
    RELEVANCE = "relevance"


class AcceptedCond(IntEnum):
    """Tri-state filter on whether a question/answer has an accepted answer."""

    ALL = 0
    TRUE = 1
    FALSE = 2


class SearchBasicCond(BaseModel):
    """Search condition built by the host from a user query.

    Threshold fields (``vote_amount``, ``view_amount``, ``answer_amount``)
    use ``-1`` as the "unset" sentinel.
    """

    page: int = Field(default=1, ge=1, description="1-based page number")
    page_size: int = Field(default=20, ge=1, description="Results per page")
    words: list[str] = Field(default_factory=list, description="Free-text query words")
    tag_ids: list[list[str]] = Field(
        default_factory=list,
        description="Tag groups: OR within a group, AND across groups",
    )
    user_id: str = Field(default="", description="Restrict to content by this user")
    order: SearchOrder | str = Field(default=SearchOrder.RELEVANCE, description="Sort order")
    question_id: str = Field(default="", description="Restrict answers to one question")
    vote_amount: int = Field(default=-1, description="Minimum votes (0 means exactly zero)")
    view_amount: int = Field(default=-1, description="Minimum views")
    answer_amount: int = Field(default=-1, description="Minimum answers (0 means exactly zero)")
    question_accepted: AcceptedCond = Field(default=AcceptedCond.ALL)
    answer_accepted: AcceptedCond = Field(default=AcceptedCond.ALL)


class SearchResult(BaseModel):
    """One hit returned to the host."""

    id: str = Field(description="Content object ID")
    type: str = Field(description="Content type: question or answer")


class SearchContent(BaseModel):
    """A question or answer handed to search plugins for indexing."""

    model_config = ConfigDict(populate_by_name=True)

    object_id: str = Field(alias="objectID", description="Content object ID")
    title: str = ""
    type: str = Field(default="question", description="question or answer")
    content: str = ""
    answers: int = 0
    status: int = 0
    tags: list[str] = Field(default_factory=list)
    question_id: str = Field(default="", alias="questionID")
    user_id: str = Field(default="", alias="userID")
    views: int = 0
    created: int = Field(default=0, description="Creation time (unix seconds)")
    active: int = Field(default=0, description="Last activity time (unix seconds)")
    score: int = 0
    has_accepted: bool = Field(default=False, alias="hasAccepted")


class SearchDesc(BaseModel):
    """Branding shown next to the search box."""

    icon: str = ""
    link: str = ""
