"""Algolia search plugin — Hosted search provider for the Answer platform.

Content is mirrored into one Algolia base index with three virtual replicas,
one per sort order (newest, active, score).  Queries are translated into
Algolia's filter grammar and sent to the index matching the requested order.
All ranking and query execution happens inside Algolia.

Usage::

    plugin = SearchAlgolia()
    plugin.config_receiver(b'{"app_id": "...", "api_key": "...", "index": "answer"}')
    await plugin.register_syncer(syncer)
    results, total = await plugin.search_questions(cond)
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import threading
from collections.abc import Awaitable, Callable
from typing import Any

from algoliasearch.search.client import SearchClient
from pydantic import ValidationError

from answer_plugins.models.plugin import (
    ConfigField,
    ConfigFieldUIOptions,
    ConfigType,
    InputType,
    PluginInfo,
)
from answer_plugins.models.search import (
    SearchBasicCond,
    SearchContent,
    SearchDesc,
    SearchResult,
)
from answer_plugins.plugin.base import ConfigurablePlugin, SearchPlugin, SearchSyncer, load_info
from answer_plugins.plugin.exceptions import ConfigurationError, ConnectionError
from answer_plugins.search_algolia.config import AlgoliaSearchConfig
from answer_plugins.search_algolia.filters import (
    build_answer_filters,
    build_content_filters,
    build_query,
    build_question_filters,
)
from answer_plugins.search_algolia.index_settings import REPLICA_CUSTOM_RANKING, build_index_settings
from answer_plugins.search_algolia.indices import REPLICA_ORDERS, resolve_index_name
from answer_plugins.search_algolia.records import IndexRecord

logger = logging.getLogger(__name__)

I18N_PREFIX = "plugin.algolia_search.backend"
ALGOLIA_LINK = "https://www.algolia.com/"
ALGOLIA_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="16" height="16" viewBox="0 0 16 16">'
    '<circle cx="7" cy="7" r="5" fill="none" stroke="#003dff" stroke-width="2"/>'
    '<path d="M11 11l4 4" stroke="#003dff" stroke-width="2" stroke-linecap="round"/>'
    "</svg>"
)

ATTRIBUTES_TO_RETRIEVE = ["objectID", "type"]
SYNC_PAGE_SIZE = 100


class SearchAlgolia(SearchPlugin, ConfigurablePlugin):
    """Search plugin backed by an Algolia index.

    The Algolia client is created on first use and shared for the life of
    the plugin.  Construction happens under a lock, so concurrent first
    calls from several threads or tasks still build a single client.

    Args:
        config: Initial configuration. Usually replaced by ``config_receiver``.
        sync_page_size: Page size used when pulling content from the host syncer.
    """

    def __init__(
        self,
        config: AlgoliaSearchConfig | None = None,
        sync_page_size: int = SYNC_PAGE_SIZE,
    ) -> None:
        self.config = config or AlgoliaSearchConfig()
        self._sync_page_size = sync_page_size
        self._client: SearchClient | None = None
        self._client_lock = threading.Lock()
        self._retired_clients: list[SearchClient] = []
        self._closing_tasks: set[asyncio.Task[None]] = set()
        self._syncer: SearchSyncer | None = None
        self._sync_task: asyncio.Task[None] | None = None
        self._settings_initialized = False
        self._settings_stale = False

    def info(self) -> PluginInfo:
        return load_info(
            __package__ or "answer_plugins.search_algolia",
            name=f"{I18N_PREFIX}.info.name",
            description=f"{I18N_PREFIX}.info.description",
        )

    def description(self) -> SearchDesc:
        if self.config.show_logo:
            return SearchDesc(icon=ALGOLIA_ICON, link=ALGOLIA_LINK)
        return SearchDesc()

    # ── Configuration ────────────────────────────────────────────────────

    def config_fields(self) -> list[ConfigField]:
        return [
            ConfigField(
                name="app_id",
                type=ConfigType.INPUT,
                title=f"{I18N_PREFIX}.config.app_id.title",
                description=f"{I18N_PREFIX}.config.app_id.description",
                required=True,
                value=self.config.app_id,
                ui_options=ConfigFieldUIOptions(input_type=InputType.TEXT),
            ),
            ConfigField(
                name="api_key",
                type=ConfigType.INPUT,
                title=f"{I18N_PREFIX}.config.api_key.title",
                description=f"{I18N_PREFIX}.config.api_key.description",
                required=True,
                value=self.config.api_key,
                ui_options=ConfigFieldUIOptions(input_type=InputType.PASSWORD),
            ),
            ConfigField(
                name="index",
                type=ConfigType.INPUT,
                title=f"{I18N_PREFIX}.config.index.title",
                description=f"{I18N_PREFIX}.config.index.description",
                required=True,
                value=self.config.index,
                ui_options=ConfigFieldUIOptions(input_type=InputType.TEXT),
            ),
            ConfigField(
                name="show_logo",
                type=ConfigType.SWITCH,
                title=f"{I18N_PREFIX}.config.show_logo.title",
                value=self.config.show_logo,
                ui_options=ConfigFieldUIOptions(label=f"{I18N_PREFIX}.config.show_logo.label"),
            ),
        ]

    def config_receiver(self, config: bytes | str) -> None:
        """Apply saved settings.

        A change of credentials retires the current client; the next call
        builds a new one.  A change of index name re-arms the settings
        bootstrap, which then runs again before the next search.
        """
        try:
            new_config = AlgoliaSearchConfig.model_validate_json(config)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid Algolia configuration: {e}") from e

        with self._client_lock:
            if self._client is not None and new_config.credentials() != self.config.credentials():
                self._retire_client(self._client)
                self._client = None
                logger.info("Algolia credentials changed, client will be recreated")
            if new_config.index != self.config.index:
                self._settings_stale = self._settings_stale or self._settings_initialized
                self._settings_initialized = False
            self.config = new_config

    # ── Client ───────────────────────────────────────────────────────────

    def _get_client(self) -> SearchClient:
        """Return the shared client, creating it on first use."""
        client = self._client
        if client is not None:
            return client

        with self._client_lock:
            if self._client is None:
                app_id, api_key = self.config.credentials()
                if not app_id or not api_key:
                    raise ConfigurationError("Algolia application ID and API key are required.")
                try:
                    self._client = SearchClient(app_id, api_key)
                except Exception as e:
                    logger.error("Failed to connect to Algolia: %s", e)
                    raise ConnectionError(f"Failed to connect to Algolia: {e}") from e
                logger.info("Connected to Algolia (app: %s, index: %s)", app_id, self.config.index)
            return self._client

    def _retire_client(self, client: SearchClient) -> None:
        """Close a replaced client in the background, or at shutdown without a running loop."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._retired_clients.append(client)
            return
        task = loop.create_task(client.close())
        self._closing_tasks.add(task)
        task.add_done_callback(self._closing_tasks.discard)

    async def _cancel_sync(self) -> None:
        if self._sync_task is not None and not self._sync_task.done():
            self._sync_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._sync_task

    async def shutdown(self) -> None:
        """Stop a running sync and close every client created so far."""
        await self._cancel_sync()

        if self._closing_tasks:
            await asyncio.gather(*self._closing_tasks, return_exceptions=True)

        with self._client_lock:
            clients = [*self._retired_clients, *([self._client] if self._client is not None else [])]
            self._retired_clients.clear()
            self._client = None

        for client in clients:
            await client.close()

    # ── Search ───────────────────────────────────────────────────────────

    async def search_contents(self, cond: SearchBasicCond) -> tuple[list[SearchResult], int]:
        return await self._search(cond, build_content_filters(cond), "question")

    async def search_questions(self, cond: SearchBasicCond) -> tuple[list[SearchResult], int]:
        return await self._search(cond, build_question_filters(cond), "question")

    async def search_answers(self, cond: SearchBasicCond) -> tuple[list[SearchResult], int]:
        filters = build_answer_filters(cond, scope_separator=self.config.answer_scope_separator)
        return await self._search(cond, filters, "answer")

    async def _search(
        self,
        cond: SearchBasicCond,
        filters: str,
        result_type: str,
    ) -> tuple[list[SearchResult], int]:
        """Run one paginated query and map its hits to ``result_type`` results.

        Algolia errors propagate unchanged.
        """
        if self._settings_stale:
            await self.init_settings()

        client = self._get_client()
        index_name = resolve_index_name(self.config.index, cond.order)
        logger.debug("Algolia search on %s with filters: %s", index_name, filters)

        response = await client.search_single_index(
            index_name=index_name,
            search_params={
                "query": build_query(cond.words),
                "attributesToRetrieve": ATTRIBUTES_TO_RETRIEVE,
                "filters": filters,
                "page": cond.page - 1,
                "hitsPerPage": cond.page_size,
            },
        )
        if response is None:
            return [], 0

        results = [SearchResult(id=hit.object_id, type=result_type) for hit in response.hits]
        return results, int(response.nb_hits or 0)

    # ── Content mirroring ────────────────────────────────────────────────

    async def update_content(self, content: SearchContent) -> None:
        """Upsert one content record into the base index."""
        client = self._get_client()
        record = IndexRecord.from_content(content)
        await client.save_object(index_name=self.config.index, body=record.to_algolia())

    async def delete_content(self, content_id: str) -> None:
        """Delete one content record from the base index."""
        client = self._get_client()
        await client.delete_object(index_name=self.config.index, object_id=content_id)

    # ── Bootstrap & sync ─────────────────────────────────────────────────

    async def register_syncer(self, syncer: SearchSyncer) -> None:
        """Store the host syncer, configure the indices and start a full sync.

        The sync runs as a background task; settings errors propagate before
        it starts.  A sync still running from an earlier registration is
        cancelled first.

        Raises:
            ConfigurationError: If ``syncer`` does not provide the paging methods.
        """
        if not isinstance(syncer, SearchSyncer):
            raise ConfigurationError(f"{type(syncer).__name__} is not a search syncer.")

        await self._cancel_sync()
        self._syncer = syncer
        await self.init_settings()
        self._sync_task = asyncio.create_task(self.sync())

    async def init_settings(self) -> None:
        """Push index settings to the base index and ranking to each replica.

        The first failing call aborts the remaining ones; settings already
        applied stay in place.
        """
        if self._settings_initialized:
            return

        client = self._get_client()
        base = self.config.index
        await client.set_settings(
            index_name=base,
            index_settings=build_index_settings(base),
            forward_to_replicas=True,
        )
        for order in REPLICA_ORDERS:
            await client.set_settings(
                index_name=resolve_index_name(base, order),
                index_settings={"customRanking": REPLICA_CUSTOM_RANKING[order]},
            )

        self._settings_initialized = True
        self._settings_stale = False
        logger.info("Initialized Algolia settings for %s and %d replicas", base, len(REPLICA_ORDERS))

    async def sync(self) -> None:
        """Mirror every question, then every answer, from the host syncer."""
        if self._syncer is None:
            logger.warning("No search syncer registered, skipping Algolia sync")
            return

        logger.info("Starting Algolia full sync")
        questions = await self._sync_pages("questions", self._syncer.get_questions_page)
        answers = await self._sync_pages("answers", self._syncer.get_answers_page)
        logger.info("Algolia full sync finished: %d questions, %d answers", questions, answers)

    async def _sync_pages(
        self,
        kind: str,
        fetch_page: Callable[[int, int], Awaitable[list[SearchContent]]],
    ) -> int:
        """Page through one corpus until a short page; stop at the first error."""
        page = 1
        synced = 0
        while True:
            try:
                contents = await fetch_page(page, self._sync_page_size)
                for content in contents:
                    await self.update_content(content)
                    synced += 1
            except Exception:
                logger.error("Algolia sync of %s failed on page %d", kind, page, exc_info=True)
                return synced

            if len(contents) < self._sync_page_size:
                return synced
            page += 1

    @property
    def sync_task(self) -> asyncio.Task[Any] | None:
        """The background sync started by ``register_syncer``, if any."""
        return self._sync_task
