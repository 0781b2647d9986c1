"""HTTP client wrapping an httpx transport with API-key auth and cancellation."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Coroutine
from typing import Any

import httpx

from guggy_sdk.errors import GuggyCancelledError, GuggyHTTPError, GuggyNetworkError

log = logging.getLogger(__name__)

_API_KEY_HEADER = "apiKey"


class HTTPClient:
    """Async HTTP client for the Guggy REST API.

    The API key and the transport are the only mutable state. Both are read
    under a lock each time a request is built, so rotating either one never
    affects a request that is already in flight.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._timeout = httpx.Timeout(timeout)
        self._lock = threading.Lock()
        self._api_key = api_key
        self._transport = transport
        self._default_transport: httpx.AsyncHTTPTransport | None = None

    @property
    def api_key(self) -> str:
        with self._lock:
            return self._api_key

    @api_key.setter
    def api_key(self, value: str) -> None:
        with self._lock:
            self._api_key = value

    @property
    def transport(self) -> httpx.AsyncBaseTransport | None:
        """The caller-supplied transport, or None when the default is in use."""
        with self._lock:
            return self._transport

    @transport.setter
    def transport(self, value: httpx.AsyncBaseTransport | None) -> None:
        with self._lock:
            self._transport = value

    def _snapshot(self) -> tuple[str, httpx.AsyncBaseTransport]:
        with self._lock:
            transport = self._transport
            if transport is None:
                if self._default_transport is None:
                    self._default_transport = httpx.AsyncHTTPTransport()
                transport = self._default_transport
            return self._api_key, transport

    def _build_request(
        self,
        method: str,
        path: str,
        api_key: str,
        *,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Request:
        merged_headers = {
            "Content-Type": "application/json",
            _API_KEY_HEADER: api_key,
        }
        if headers:
            merged_headers.update(headers)
        return httpx.Request(
            method,
            f"{self.base_url}{path}",
            json=json,
            headers=merged_headers,
            extensions={"timeout": self._timeout.as_dict()},
        )

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        headers: dict[str, str] | None = None,
        cancel: asyncio.Event | None = None,
        deadline: float | None = None,
    ) -> httpx.Response:
        """Send one request and return the fully read response.

        Raises GuggyHTTPError on a non-2xx status without reading the body,
        GuggyNetworkError when the transport fails, and GuggyCancelledError
        when ``cancel`` is set or ``deadline`` seconds pass first.
        """
        api_key, transport = self._snapshot()
        request = self._build_request(method, path, api_key, json=json, headers=headers)
        if cancel is None and deadline is None:
            return await self._send(transport, request)
        return await self._race_cancellation(self._send(transport, request), cancel, deadline)

    async def _send(self, transport: httpx.AsyncBaseTransport, request: httpx.Request) -> httpx.Response:
        log.debug("%s %s", request.method, request.url)
        try:
            response = await transport.handle_async_request(request)
        except httpx.TransportError as exc:
            raise GuggyNetworkError(str(exc)) from exc

        response.request = request
        try:
            log.debug("%s %s -> %d", request.method, request.url, response.status_code)
            if not response.is_success:
                raise GuggyHTTPError.from_response(response)
            try:
                await response.aread()
            except httpx.TransportError as exc:
                raise GuggyNetworkError(str(exc)) from exc
        finally:
            await response.aclose()
        return response

    async def _race_cancellation(
        self,
        send: Coroutine[Any, Any, httpx.Response],
        cancel: asyncio.Event | None,
        deadline: float | None,
    ) -> httpx.Response:
        if cancel is not None and cancel.is_set():
            send.close()
            raise GuggyCancelledError("request cancelled before it was sent")

        task = asyncio.create_task(send)
        watcher = asyncio.create_task(cancel.wait()) if cancel is not None else None
        waiters = {task} if watcher is None else {task, watcher}
        try:
            done, _ = await asyncio.wait(waiters, timeout=deadline, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for waiter in waiters:
                if not waiter.done():
                    waiter.cancel()
            # Let the aborted request unwind so its response gets closed.
            await asyncio.gather(*waiters, return_exceptions=True)

        if task in done:
            return task.result()
        if watcher is not None and watcher in done:
            log.debug("request cancelled by caller")
            raise GuggyCancelledError("request cancelled by caller")
        log.debug("request deadline of %.3fs exceeded", deadline)
        raise GuggyCancelledError(f"request deadline of {deadline}s exceeded")

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", path, **kwargs)

    async def close(self) -> None:
        with self._lock:
            transport, self._default_transport = self._default_transport, None
        if transport is not None:
            await transport.aclose()
