"""High-level bucket client combining every bucket_sync component."""

import os
from collections.abc import Mapping
from datetime import timedelta
from pathlib import Path
from typing import Any, BinaryIO

from .accessor import ObjectAccessor
from .content_types import ContentTypeMap
from .persistence import StructuredStore
from .serialization import JsonCodec
from .sync import DirectorySynchronizer
from .transport.base import ObjectSummary, ObjectTransport, StorageObject


class BucketClient:
    """Uniform access to one bucket: structured values, raw content and directory trees.

    The client holds only its transport; independent clients can be created
    side by side, and a single client can be shared across threads working
    on different keys.
    """

    def __init__(
        self,
        transport: ObjectTransport,
        codec: JsonCodec | None = None,
        content_types: Mapping[str, str] | ContentTypeMap | None = None,
    ):
        if not isinstance(content_types, ContentTypeMap):
            content_types = ContentTypeMap(content_types)
        self._transport = transport
        self._accessor = ObjectAccessor(transport)
        self._store = StructuredStore(self._accessor, codec)
        self._sync = DirectorySynchronizer(self._accessor, content_types.resolve)
        self.content_types = content_types

    @property
    def bucket(self) -> str:
        return self._transport.bucket

    @property
    def region(self) -> str | None:
        return getattr(self._transport, "region", None)

    @property
    def accessor(self) -> ObjectAccessor:
        return self._accessor

    # Structured values

    def get_object(self, key: str, model: Any = None) -> tuple[bool, Any]:
        """Return ``(found, value)`` for the JSON value stored at *key*."""
        return self._store.get(key, model)

    def put_object(self, key: str, value: Any) -> str:
        return self._store.put(key, value)

    # Raw content

    def get_string(self, key: str, encoding: str = "utf-8") -> str | None:
        """Return the object decoded as text, or ``None`` if it does not exist."""
        return self._accessor.read_text(key, encoding)

    def get_content(self, key: str) -> StorageObject | None:
        return self._accessor.read(key)

    def put_content(self, key: str, body: bytes | BinaryIO, content_type: str | None = None) -> str:
        """Write raw bytes or a readable stream. Streams are consumed once, from their current position."""
        return self._accessor.write(key, body, content_type=content_type)

    def delete_object(self, key: str) -> None:
        self._accessor.delete(key)

    def list_objects(self, prefix: str = "") -> list[ObjectSummary]:
        return self._accessor.list_objects(prefix)

    def list_keys(self, prefix: str = "") -> list[str]:
        return self._accessor.list_keys(prefix)

    def key_exists(self, key: str) -> bool:
        return self._accessor.head(key)

    # Directory sync

    def upload_directory(self, prefix: str, root: str | os.PathLike) -> list[str]:
        return self._sync.upload_directory(prefix, root)

    def upload_file(self, prefix: str, root: str | os.PathLike, path: str | os.PathLike) -> str:
        return self._sync.upload_file(prefix, root, path)

    def download_file(self, key: str, dest_root: str | os.PathLike) -> Path:
        return self._sync.download_file(key, dest_root)

    # Presigned access

    def get_presigned_url(self, key: str, expires_in: timedelta | int | float = 3600) -> str:
        """Return a time-limited GET URL for *key*.

        The key is not checked for existence.

        Args:
            key: Object key.
            expires_in: Validity as a ``timedelta`` or a number of seconds.

        Raises:
            ValueError: If *expires_in* is not positive.
        """
        if isinstance(expires_in, timedelta):
            expires_in = expires_in.total_seconds()
        seconds = int(expires_in)
        if seconds <= 0:
            raise ValueError(f"expires_in must be at least one second, got {expires_in!r}")
        return self._transport.presign(key, seconds)
