"""Catalog search records as shown on the found songs screen."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Record:
    """One decoded catalog search result.

    Every field carries a default so a record can always be built, even from an
    empty or badly typed payload item.
    """

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
    def blank(cls) -> Record:
        """Return the record with every field at its default."""
        return cls()

    @property
    def is_blank(self) -> bool:
        return self == Record()
