"""Persistence of the filtered record sequence under a fixed key."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from .snapshot import decode_records, encode_records

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from .ports.unit_of_work import SnapshotUnitOfWork
    from .records import Record

log = getLogger(__name__)


@dataclass(slots=True)
class ResultStore:
    """Write-through store for the latest filtered records.

    Each save replaces the stored snapshot wholesale; no history is kept.
    """

    unit_of_work_factory: Callable[[], SnapshotUnitOfWork]
    key: str

    def save(self, records: Sequence[Record]) -> None:
        payload = encode_records(records)
        with self.unit_of_work_factory() as uow:
            uow.repositories.values.put(self.key, payload)
            uow.commit()
        log.debug("Stored %s records under %r (%s bytes)", len(records), self.key, len(payload))

    def load(self) -> list[Record] | None:
        """Return the stored records, or ``None`` when nothing has been saved yet."""

        with self.unit_of_work_factory() as uow:
            payload = uow.repositories.values.get(self.key)
        if payload is None:
            return None
        return decode_records(payload)
