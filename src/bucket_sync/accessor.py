"""Byte-level object operations against a single bucket."""

import logging
from typing import BinaryIO

from .exceptions import SerializationError
from .outcomes import NotFound, unwrap, unwrap_or_none
from .transport.base import ObjectSummary, ObjectTransport, StorageObject

log = logging.getLogger(__name__)


class ObjectAccessor:
    """Read, write, delete, head and list objects by key.

    Read-style calls report a missing key as ``None``/``False`` and raise
    :class:`~bucket_sync.exceptions.StorageError` for every other failure.
    Nothing is retried here; retry policy belongs to the transport.
    """

    def __init__(self, transport: ObjectTransport):
        self._transport = transport

    @property
    def bucket(self) -> str:
        return self._transport.bucket

    def get(self, key: str) -> StorageObject:
        """Download an object. Raises StorageNotFoundError if missing."""
        return unwrap(self._transport.get(key))

    def read(self, key: str) -> StorageObject | None:
        """Download an object, or return ``None`` if the key does not exist."""
        return unwrap_or_none(self._transport.get(key))

    def read_text(self, key: str, encoding: str = "utf-8") -> str | None:
        obj = self.read(key)
        if obj is None:
            return None
        try:
            return obj.content.decode(encoding)
        except UnicodeDecodeError as e:
            raise SerializationError(f"Object is not valid {encoding} text: {e}", key=key, cause=e) from e

    def write(
        self,
        key: str,
        body: bytes | BinaryIO,
        content_type: str | None = None,
        metadata: dict[str, str] | None = None,
    ) -> str:
        """Create or overwrite *key* and return it. *body* is consumed once."""
        self._transport.put(key, body, content_type=content_type, metadata=metadata)
        log.debug("Wrote s3://%s/%s (content_type=%s)", self.bucket, key, content_type)
        return key

    def delete(self, key: str) -> None:
        """Delete a single object. No-op if the key doesn't exist."""
        outcome = self._transport.delete(key)
        if isinstance(outcome, NotFound):
            log.debug("Delete of absent key s3://%s/%s ignored", self.bucket, key)
            return
        unwrap(outcome)
        log.debug("Deleted s3://%s/%s", self.bucket, key)

    def head(self, key: str) -> bool:
        """Return whether *key* exists without transferring its body."""
        outcome = self._transport.head(key)
        if isinstance(outcome, NotFound):
            return False
        unwrap(outcome)
        return True

    def list_objects(self, prefix: str = "") -> list[ObjectSummary]:
        """Return every object under *prefix*, following continuation tokens."""
        result: list[ObjectSummary] = []
        token: str | None = None
        while True:
            page = self._transport.list_page(prefix, continuation_token=token)
            result.extend(page.objects)
            token = page.next_token
            if not token:
                return result

    def list_keys(self, prefix: str = "") -> list[str]:
        return [obj.key for obj in self.list_objects(prefix)]
