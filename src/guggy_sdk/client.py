"""High-level Guggy client composing the HTTP layer and the search API."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
import pydantic

from guggy_sdk.api.search import SearchAPI
from guggy_sdk.config import API_KEY_ENV, DEFAULT_BASE_URL, DEFAULT_TIMEOUT, Settings
from guggy_sdk.errors import GuggyConfigurationError
from guggy_sdk.http import HTTPClient
from guggy_sdk.models.search import SearchRequest, SearchResponse


def _require_key(api_key: str | None) -> str:
    key = (api_key or "").strip()
    if not key:
        raise GuggyConfigurationError("expecting a non-blank apiKey")
    return key


class Client:
    """Top-level SDK client.

    Usage::

        async with Client.from_env() as client:
            res = await client.search(SearchRequest(query="What is the weather up there?"))
            for gif in res.gifs:
                print(gif.gif.high_resolution.url)

    A single instance can be shared by concurrent callers; ``set_api_key``
    and ``set_transport`` only affect requests built after they return.
    """

    def __init__(
        self,
        api_key: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.http = HTTPClient(base_url, _require_key(api_key), transport=transport, timeout=timeout)
        self.search_api = SearchAPI(self.http)

    @classmethod
    def from_env(
        cls,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        settings: Settings | None = None,
    ) -> Client:
        """Build a client from ``GUGGY_API_KEY`` (and optional ``GUGGY_BASE_URL``/``GUGGY_TIMEOUT``)."""
        if settings is None:
            try:
                settings = Settings()
            except pydantic.ValidationError as exc:
                raise GuggyConfigurationError(f"invalid Guggy settings in environment: {exc}") from exc
        if not settings.api_key:
            raise GuggyConfigurationError(f"expected {API_KEY_ENV!r} to have been set in your environment")
        return cls(
            settings.api_key,
            transport=transport,
            base_url=settings.base_url,
            timeout=settings.timeout,
        )

    @property
    def api_key(self) -> str:
        return self.http.api_key

    def set_api_key(self, api_key: str) -> None:
        self.http.api_key = _require_key(api_key)

    def set_transport(self, transport: httpx.AsyncBaseTransport | None) -> None:
        """Replace the transport used for subsequent requests; None restores the default."""
        self.http.transport = transport

    async def search(
        self,
        request: SearchRequest | str | None,
        *,
        cancel: asyncio.Event | None = None,
        deadline: float | None = None,
    ) -> SearchResponse:
        """Search for GIFs and stickers matching ``request``.

        Set ``cancel`` or pass ``deadline`` (seconds) to abort the call;
        either one raises :class:`~guggy_sdk.errors.GuggyCancelledError`.
        """
        return await self.search_api.guggify(request, cancel=cancel, deadline=deadline)

    # --- Context manager ---

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
