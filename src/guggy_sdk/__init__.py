"""Guggy Client SDK — Python client for the Guggy text-to-GIF API."""

from guggy_sdk.client import Client
from guggy_sdk.errors import (
    GuggyCancelledError,
    GuggyConfigurationError,
    GuggyDecodeError,
    GuggyEmptyResponseError,
    GuggyError,
    GuggyHTTPError,
    GuggyNetworkError,
    GuggyTransportError,
    GuggyValidationError,
)
from guggy_sdk.models import Language, SearchRequest, SearchResponse

__all__ = [
    "Client",
    "GuggyCancelledError",
    "GuggyConfigurationError",
    "GuggyDecodeError",
    "GuggyEmptyResponseError",
    "GuggyError",
    "GuggyHTTPError",
    "GuggyNetworkError",
    "GuggyTransportError",
    "GuggyValidationError",
    "Language",
    "SearchRequest",
    "SearchResponse",
]
