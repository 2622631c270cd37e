"""JSON snapshot codec for record sequences."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from .errors import EncodingFailedError, SnapshotDecodeError
from .records import Record

if TYPE_CHECKING:
    from collections.abc import Sequence


class RecordSnapshot(BaseModel):
    """Stored form of a record, keyed by the catalog's camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    artist_id: str = ""
    collection_id: str = ""
    track_id: str = ""
    artist_name: str = ""
    collection_name: str = ""
    track_name: str = ""
    collection_censored_name: str | None = None
    track_censored_name: str | None = None
    is_streamable: bool = False

    @classmethod
    def from_record(cls, record: Record) -> RecordSnapshot:
        return cls.model_validate(asdict(record), strict=True)

    def to_record(self) -> Record:
        return Record(**self.model_dump())


_SNAPSHOT_ADAPTER = TypeAdapter(list[RecordSnapshot])


def encode_records(records: Sequence[Record]) -> bytes:
    """Serialise ``records`` to a JSON array, failing on any unserialisable field."""

    try:
        snapshots = [RecordSnapshot.from_record(record) for record in records]
        return _SNAPSHOT_ADAPTER.dump_json(snapshots, by_alias=True)
    except ValidationError as exc:
        raise EncodingFailedError(f"Cannot encode record snapshot: {exc}") from exc


def decode_records(data: bytes) -> list[Record]:
    try:
        snapshots = _SNAPSHOT_ADAPTER.validate_json(data)
    except ValidationError as exc:
        raise SnapshotDecodeError(f"Cannot decode record snapshot: {exc}") from exc
    return [snapshot.to_record() for snapshot in snapshots]
