from __future__ import annotations

import json

import pytest

from foundsongs.domain.errors import EncodingFailedError, PersistError, SnapshotDecodeError
from foundsongs.domain.records import Record
from foundsongs.domain.snapshot import decode_records, encode_records
from tests.helpers.records import make_record


def test_encode_records_uses_catalog_field_names() -> None:
    payload = json.loads(encode_records([make_record(track_censored_name=None)]))

    assert payload == [
        {
            "artistId": "1442331213",
            "collectionId": "1589317112",
            "trackId": "1589317115",
            "artistName": "Ryan Dempsey",
            "collectionName": "Breakpoints",
            "trackName": "Song A",
            "collectionCensoredName": "Breakpoints",
            "trackCensoredName": None,
            "isStreamable": True,
        }
    ]


def test_snapshot_round_trip_preserves_every_field() -> None:
    records = [
        make_record(),
        Record.blank(),
        make_record(collection_censored_name=None, is_streamable=False, track_name="B"),
    ]

    assert decode_records(encode_records(records)) == records


def test_encode_empty_sequence() -> None:
    assert encode_records([]) == b"[]"
    assert decode_records(b"[]") == []


def test_encode_rejects_unserialisable_fields() -> None:
    broken = make_record(artist_name=object())

    with pytest.raises(EncodingFailedError) as excinfo:
        encode_records([make_record(), broken])

    assert isinstance(excinfo.value, PersistError)


def test_decode_rejects_corrupt_snapshot() -> None:
    with pytest.raises(SnapshotDecodeError):
        decode_records(b"{not json")
