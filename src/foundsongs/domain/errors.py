"""Error taxonomy for fetching and persisting catalog records."""

from __future__ import annotations


class FetchError(RuntimeError):
    """Base class for failures while fetching the catalog search results."""


class CatalogTransportError(FetchError):
    """Raised when the HTTP request fails or returns an error status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedPayloadError(FetchError):
    """Raised when the response body is not an object with a ``results`` array."""


class PersistError(RuntimeError):
    """Base class for failures while persisting the filtered records."""


class EncodingFailedError(PersistError):
    """Raised when the record sequence cannot be serialised."""


class StorageWriteError(PersistError):
    """Raised when the serialised snapshot cannot be written to storage."""


class SnapshotDecodeError(PersistError):
    """Raised when a stored snapshot cannot be read back into records."""


class StorageUnavailableError(PersistError):
    """Raised when the snapshot storage cannot be opened or initialised."""
