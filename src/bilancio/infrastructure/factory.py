"""Wiring of session, cache and API client for one process."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bilancio.application.cache import QueryCache
from bilancio.application.context import SessionContext
from bilancio.infrastructure.api import BilancioApiClient
from bilancio.infrastructure.session import JsonFileSessionStore

if TYPE_CHECKING:
    import httpx
    from bilancio_config import Settings


class ApiClientFactory:
    """Concrete ``ClientFactory`` backed by the REST client.

    The session is persisted in the settings' state directory unless a
    session is passed in. Logging out clears the cache.
    """

    def __init__(
        self,
        settings: Settings,
        session: SessionContext | None = None,
        cache: QueryCache | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._settings = settings
        self._session = session or SessionContext(
            store=JsonFileSessionStore(settings.session_file),
        )
        self._cache = cache or QueryCache()
        self._transport = transport
        self._client: BilancioApiClient | None = None
        self._session.on_logout(self._cache.clear)

    @property
    def session(self) -> SessionContext:
        return self._session

    @property
    def cache(self) -> QueryCache:
        return self._cache

    @property
    def page_size(self) -> int:
        return self._settings.page_size

    def ledger_api(self) -> BilancioApiClient:
        if self._client is None:
            self._client = BilancioApiClient(
                base_url=self._settings.api_base_url,
                session=self._session,
                timeout=self._settings.api_timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
