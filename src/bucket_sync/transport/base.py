"""Abstract transport boundary between bucket_sync and an object store."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import BinaryIO

from ..outcomes import Outcome


@dataclass
class StorageObject:
    """Wrapper returned by a read that carries content alongside metadata."""

    content: bytes
    content_type: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ObjectSummary:
    """One entry of a bucket listing."""

    key: str
    size: int = 0
    etag: str = ""
    last_modified: datetime | None = None


@dataclass(frozen=True)
class ListPage:
    """A single page of a listing; ``next_token`` is ``None`` on the last page."""

    objects: list[ObjectSummary]
    next_token: str | None = None


class ObjectTransport(ABC):
    """Per-bucket access to a remote object store.

    Read-style operations (``get``, ``head``, ``delete``) return a tagged
    :data:`~bucket_sync.outcomes.Outcome` instead of raising, so callers never
    inspect backend exceptions. The remaining operations raise
    :class:`~bucket_sync.exceptions.StorageError` subclasses.
    """

    @property
    @abstractmethod
    def bucket(self) -> str:
        """Name of the bucket this transport is bound to."""

    @abstractmethod
    def get(self, key: str) -> Outcome[StorageObject]:
        """Fetch the object body and its content type."""

    @abstractmethod
    def head(self, key: str) -> Outcome[None]:
        """Check for existence without transferring the body."""

    @abstractmethod
    def put(
        self,
        key: str,
        body: bytes | BinaryIO,
        content_type: str | None = None,
        metadata: dict[str, str] | None = None,
    ) -> None:
        """Create or overwrite an object."""

    @abstractmethod
    def delete(self, key: str) -> Outcome[None]:
        """Remove an object."""

    @abstractmethod
    def list_page(self, prefix: str, continuation_token: str | None = None) -> ListPage:
        """Return one page of objects whose key starts with *prefix*."""

    @abstractmethod
    def presign(self, key: str, expires_in: int) -> str:
        """Return a time-limited GET URL for *key*, valid for *expires_in* seconds."""
