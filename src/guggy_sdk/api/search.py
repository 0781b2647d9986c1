"""Text-to-GIF search API methods."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import pydantic

from guggy_sdk.errors import GuggyDecodeError, GuggyEmptyResponseError, GuggyValidationError
from guggy_sdk.models.search import SearchRequest, SearchResponse, WireRequest

if TYPE_CHECKING:
    from guggy_sdk.http import HTTPClient

GUGGIFY_PATH = "/guggify"


class SearchAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def guggify(
        self,
        request: SearchRequest | str | None,
        *,
        cancel: asyncio.Event | None = None,
        deadline: float | None = None,
    ) -> SearchResponse:
        """Turn a sentence into animated GIFs and stickers.

        ``request`` may be a :class:`SearchRequest` or a bare query string.
        A missing request or a blank query is rejected before anything is
        sent. A response with no request id and no media is treated as an
        error rather than returned.
        """
        if isinstance(request, str):
            request = SearchRequest(query=request)
        if request is None:
            raise GuggyValidationError("expecting a non-blank request")
        if not request.query.strip():
            raise GuggyValidationError("expecting a non-blank query")

        wire = WireRequest.from_request(request)
        r = await self._http.post(
            GUGGIFY_PATH,
            json=wire.model_dump(),
            cancel=cancel,
            deadline=deadline,
        )
        try:
            response = SearchResponse.model_validate_json(r.content)
        except pydantic.ValidationError as exc:
            raise GuggyDecodeError(f"could not decode search response: {exc}") from exc

        if response.is_empty():
            raise GuggyEmptyResponseError()
        return response
