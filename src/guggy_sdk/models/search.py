"""Text-to-GIF search models."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from guggy_sdk.models.base import GuggyModel
from guggy_sdk.models.enums import Language


class Dimensions(GuggyModel):
    width: int = 0
    height: int = 0


class Image(GuggyModel):
    url: str | None = Field(None, alias="secureUrl")
    dimensions: Dimensions | None = None

    @field_validator("url", mode="before")
    @classmethod
    def _blank_url_is_absent(cls, value: Any) -> Any:
        return value or None


class MediaSizeSet(GuggyModel):
    original: Image | None = None
    preview: Image | None = None
    low_quality: Image | None = Field(None, alias="lowQuality")
    high_resolution: Image | None = Field(None, alias="hires")


class MediaCollection(GuggyModel):
    gif: MediaSizeSet | None = None
    mp4: MediaSizeSet | None = None
    png: MediaSizeSet | None = None
    webp: MediaSizeSet | None = None
    original: MediaSizeSet | None = None
    thumbnail: MediaSizeSet | None = None


class SearchRequest(GuggyModel):
    query: str
    language: Language | None = None


class WireRequest(GuggyModel):
    """Body actually POSTed to the service."""

    sentence: str
    lang: str = ""

    @classmethod
    def from_request(cls, request: SearchRequest) -> WireRequest:
        lang = request.language.value if request.language is not None else ""
        return cls(sentence=request.query, lang=lang)


class SearchResponse(GuggyModel):
    request_id: str = Field("", alias="reqId")
    stickers: list[MediaCollection] = []
    gifs: list[MediaCollection] = Field(default_factory=list, alias="animated")

    @field_validator("request_id", mode="before")
    @classmethod
    def _null_request_id(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("stickers", "gifs", mode="before")
    @classmethod
    def _null_sequence(cls, value: Any) -> Any:
        return [] if value is None else value

    def is_empty(self) -> bool:
        """True when the server returned no request id and no media at all."""
        return not self.request_id and not self.stickers and not self.gifs
