"""Exception hierarchy raised by bucket_sync.

Every error carries the object key it concerns and the underlying cause.
Read-style accessor calls turn StorageNotFoundError into None or False;
sync operations add LocalIOError for filesystem failures.
"""


class StorageError(Exception):
    """Base exception for all storage operations."""

    def __init__(self, message: str, key: str | None = None, cause: Exception | None = None):
        self.key = key
        self.cause = cause
        super().__init__(message)


class StorageNotFoundError(StorageError):
    """Raised when a requested key does not exist."""


class StoragePermissionError(StorageError):
    """Raised when credentials are invalid or access is denied."""


class StorageConnectionError(StorageError):
    """Raised when the storage backend is unreachable."""


class SerializationError(StorageError):
    """Raised when a value cannot be encoded or stored bytes cannot be decoded."""


class LocalIOError(StorageError):
    """Raised when a local filesystem operation fails during a sync."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        key: str | None = None,
        cause: Exception | None = None,
    ):
        self.path = path
        super().__init__(message, key=key, cause=cause)
