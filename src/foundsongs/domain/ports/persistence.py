"""Ports for persisting serialised snapshots."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueRepository(Protocol):
    """Byte values stored under string keys, one value per key."""

    def put(self, key: str, value: bytes) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    def get(self, key: str) -> bytes | None: ...
