"""Public interface for the iTunes catalog adapter."""

from __future__ import annotations

from .client import ITunesSearchClient, should_cache_search_payload
from .schema import SearchResponse, SearchResultItem
from .translator import decode_record, filter_records

__all__ = [
    "ITunesSearchClient",
    "SearchResponse",
    "SearchResultItem",
    "decode_record",
    "filter_records",
    "should_cache_search_payload",
]
