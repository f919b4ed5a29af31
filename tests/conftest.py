"""Shared test fixtures and configuration."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from algoliasearch.search.client import SearchClient

from answer_plugins.config.settings import Settings
from answer_plugins.models.search import SearchBasicCond, SearchContent
from answer_plugins.search_algolia.adapter import SearchAlgolia
from answer_plugins.search_algolia.config import AlgoliaSearchConfig


class FakeSyncer:
    """In-memory host syncer serving fixed question and answer lists."""

    def __init__(
        self,
        questions: list[SearchContent] | None = None,
        answers: list[SearchContent] | None = None,
        fail_questions_on_page: int | None = None,
    ) -> None:
        self.questions = questions or []
        self.answers = answers or []
        self.fail_questions_on_page = fail_questions_on_page
        self.question_pages: list[int] = []
        self.answer_pages: list[int] = []

    async def get_questions_page(self, page: int, page_size: int) -> list[SearchContent]:
        self.question_pages.append(page)
        if page == self.fail_questions_on_page:
            raise RuntimeError("database unavailable")
        start = (page - 1) * page_size
        return self.questions[start : start + page_size]

    async def get_answers_page(self, page: int, page_size: int) -> list[SearchContent]:
        self.answer_pages.append(page)
        start = (page - 1) * page_size
        return self.answers[start : start + page_size]


def make_content(object_id: str, type_: str = "question", **kwargs: object) -> SearchContent:
    return SearchContent(object_id=object_id, type=type_, title=f"Title {object_id}", **kwargs)


def make_response(*object_ids: str, nb_hits: int | None = None) -> SimpleNamespace:
    """Stand-in for an Algolia ``SearchResponse``."""
    return SimpleNamespace(
        hits=[SimpleNamespace(object_id=oid) for oid in object_ids],
        nb_hits=len(object_ids) if nb_hits is None else nb_hits,
    )


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        algolia={"app_id": "TESTAPP", "api_key": "test-key", "index": "answer"},
        observability={"log_format": "console"},
    )


@pytest.fixture
def algolia_config() -> AlgoliaSearchConfig:
    return AlgoliaSearchConfig(app_id="TESTAPP", api_key="test-key", index="answer")


@pytest.fixture
def mock_client() -> AsyncMock:
    client = AsyncMock(spec=SearchClient)
    client.search_single_index.return_value = make_response()
    return client


@pytest.fixture
def adapter(algolia_config: AlgoliaSearchConfig, mock_client: AsyncMock) -> SearchAlgolia:
    """Algolia plugin wired to a mocked client."""
    plugin = SearchAlgolia(config=algolia_config)
    plugin._client = mock_client
    return plugin


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def content_factory():
    return make_content


@pytest.fixture
def cond() -> SearchBasicCond:
    return SearchBasicCond(page=1, page_size=20)


@pytest.fixture
def syncer_factory():
    return FakeSyncer
