"""Artist-substring selection over decoded records.

Non-matching records are blanked rather than dropped, so the filtered sequence
always has the same length and order as its input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .records import Record

if TYPE_CHECKING:
    from collections.abc import Iterable


def matches_artist(record: Record, artist_substring: str) -> bool:
    """Case-sensitive substring match on the record's artist name."""
    return artist_substring in record.artist_name


def keep_or_blank(record: Record, *, artist_substring: str) -> Record:
    if matches_artist(record, artist_substring):
        return record
    return Record.blank()


def blank_non_matching(records: Iterable[Record], *, artist_substring: str) -> list[Record]:
    return [keep_or_blank(record, artist_substring=artist_substring) for record in records]
