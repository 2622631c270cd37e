"""Translate iTunes search payloads into domain records."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from foundsongs.domain.filtering import blank_non_matching
from foundsongs.domain.records import Record

from .schema import SearchResultItem

if TYPE_CHECKING:
    from collections.abc import Iterable

    from foundsongs.domain.ports.fetching import RawItem

log = getLogger(__name__)


def decode_record(raw: RawItem) -> Record:
    """Decode one raw result, substituting defaults for missing or mistyped fields."""

    item = SearchResultItem.model_validate(dict(raw))
    return Record(
        artist_id=item.artist_id,
        collection_id=item.collection_id,
        track_id=item.track_id,
        artist_name=item.artist_name,
        collection_name=item.collection_name,
        track_name=item.track_name,
        collection_censored_name=item.collection_censored_name,
        track_censored_name=item.track_censored_name,
        is_streamable=item.is_streamable,
    )


def filter_records(raw_items: Iterable[RawItem], *, artist_substring: str) -> list[Record]:
    """Decode ``raw_items`` and blank every record whose artist does not match."""

    records = blank_non_matching(
        (decode_record(raw) for raw in raw_items),
        artist_substring=artist_substring,
    )
    kept = sum(1 for record in records if not record.is_blank)
    log.info("Filtered %s catalog results, %s matched %r", len(records), kept, artist_substring)
    return records
