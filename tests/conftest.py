"""Shared test fixtures for SDK tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import httpx
import pytest

from guggy_sdk.client import Client
from guggy_sdk.http import HTTPClient

TEST_API_KEY_1 = "test-api-key-1"
TEST_API_KEY_2 = "test-api-key-2"

TESTDATA = Path(__file__).parent / "testdata"


@pytest.fixture
def search_payload() -> dict[str, Any]:
    return json.loads((TESTDATA / "search-0.json").read_text())


@pytest.fixture
def mock_transport():
    """Returns an httpx mock transport that records requests."""
    calls: list[dict[str, Any]] = []
    default_response = httpx.Response(200, json={})

    class RecordingTransport(httpx.AsyncBaseTransport):
        def __init__(self):
            self.response = default_response

        async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
            body = None
            if request.content:
                try:
                    body = json.loads(request.content)
                except Exception:
                    body = request.content
            calls.append({
                "method": request.method,
                "url": str(request.url),
                "path": request.url.path,
                "headers": dict(request.headers),
                "body": body,
            })
            return self.response

    transport = RecordingTransport()
    return transport, calls


@pytest.fixture
def http_client(mock_transport):
    """HTTPClient wired to the recording transport."""
    transport, calls = mock_transport
    client = HTTPClient("https://guggy.test/v2", TEST_API_KEY_1, transport=transport)
    return client, transport, calls


@pytest.fixture
def client(mock_transport):
    """Client wired to the recording transport."""
    transport, calls = mock_transport
    return Client(TEST_API_KEY_1, transport=transport, base_url="https://guggy.test/v2"), transport, calls
