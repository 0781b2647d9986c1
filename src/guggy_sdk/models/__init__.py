"""SDK request and response models."""

from guggy_sdk.models.base import GuggyModel
from guggy_sdk.models.enums import Language
from guggy_sdk.models.search import (
    Dimensions,
    Image,
    MediaCollection,
    MediaSizeSet,
    SearchRequest,
    SearchResponse,
    WireRequest,
)

__all__ = [
    "Dimensions",
    "GuggyModel",
    "Image",
    "Language",
    "MediaCollection",
    "MediaSizeSet",
    "SearchRequest",
    "SearchResponse",
    "WireRequest",
]
