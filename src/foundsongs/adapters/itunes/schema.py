"""Pydantic models describing the iTunes Search API payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _text_or_blank(value: object) -> str:
    if isinstance(value, str):
        return value
    return ""


def _text_or_none(value: object) -> str | None:
    if isinstance(value, str):
        return value
    return None


class ITunesBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class SearchResultItem(ITunesBaseModel):
    """One entry of ``results``; every field falls back to a default when unusable."""

    artist_id: str = Field(default="", alias="artistId")
    collection_id: str = Field(default="", alias="collectionId")
    track_id: str = Field(default="", alias="trackId")
    artist_name: str = Field(default="", alias="artistName")
    collection_name: str = Field(default="", alias="collectionName")
    track_name: str = Field(default="", alias="trackName")
    collection_censored_name: str | None = Field(default=None, alias="collectionCensoredName")
    track_censored_name: str | None = Field(default=None, alias="trackCensoredName")
    is_streamable: bool = Field(default=False, alias="isStreamable")

    # Identifiers are only taken as-is when they arrive as strings.
    _normalize_text = field_validator(
        "artist_id",
        "collection_id",
        "track_id",
        "artist_name",
        "collection_name",
        "track_name",
        mode="before",
    )(_text_or_blank)
    _normalize_censored = field_validator(
        "collection_censored_name", "track_censored_name", mode="before"
    )(_text_or_none)

    @field_validator("is_streamable", mode="before")
    @classmethod
    def _strict_flag(cls, value: object) -> bool:
        return value if isinstance(value, bool) else False


class SearchResponse(ITunesBaseModel):
    """Response envelope; every entry of ``results`` must be a JSON object."""

    results: list[dict[str, Any]]
