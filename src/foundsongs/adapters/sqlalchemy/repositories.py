"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from foundsongs.adapters.sqlalchemy.mappings import stored_value_table
from foundsongs.domain.errors import StorageWriteError

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


class SqlAlchemyKeyValueRepository:
    """Key/value store over the ``stored_value`` table; one row per key."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def put(self, key: str, value: bytes) -> None:
        table = stored_value_table
        try:
            result = self.session.execute(
                update(table).where(table.c.key == key).values(value=value)
            )
            if result.rowcount == 0:
                self.session.execute(insert(table).values(key=key, value=value))
        except SQLAlchemyError as exc:
            raise StorageWriteError(f"Cannot store value under {key!r}: {exc}") from exc

    def get(self, key: str) -> bytes | None:
        stmt = select(stored_value_table.c.value).where(stored_value_table.c.key == key)
        return self.session.execute(stmt).scalar_one_or_none()
