"""Shared fixtures: an in-memory transport standing in for S3."""

import pytest

from bucket_sync.accessor import ObjectAccessor
from bucket_sync.client import BucketClient
from bucket_sync.exceptions import StorageError, StorageNotFoundError
from bucket_sync.outcomes import Failed, Found, NotFound
from bucket_sync.transport.base import ListPage, ObjectSummary, ObjectTransport, StorageObject


class InMemoryTransport(ObjectTransport):
    """Dict-backed transport. ``failures`` maps a key to the error every operation on it reports."""

    def __init__(self, bucket: str = "test-bucket", page_size: int = 1000):
        self._bucket = bucket
        self.page_size = page_size
        self.objects: dict[str, StorageObject] = {}
        self.failures: dict[str, StorageError] = {}
        self.put_keys: list[str] = []
        self.list_calls: list[str | None] = []

    @property
    def bucket(self) -> str:
        return self._bucket

    def get(self, key):
        if key in self.failures:
            return Failed(self.failures[key])
        if key not in self.objects:
            return NotFound(StorageNotFoundError("NoSuchKey", key=key))
        obj = self.objects[key]
        return Found(StorageObject(content=obj.content, content_type=obj.content_type, metadata=dict(obj.metadata)))

    def head(self, key):
        if key in self.failures:
            return Failed(self.failures[key])
        if key not in self.objects:
            return NotFound(StorageNotFoundError("404", key=key))
        return Found(None)

    def put(self, key, body, content_type=None, metadata=None):
        if key in self.failures:
            raise self.failures[key]
        content = body if isinstance(body, bytes) else body.read()
        self.objects[key] = StorageObject(content=content, content_type=content_type, metadata=metadata or {})
        self.put_keys.append(key)

    def delete(self, key):
        if key in self.failures:
            return Failed(self.failures[key])
        self.objects.pop(key, None)
        return Found(None)

    def list_page(self, prefix, continuation_token=None):
        self.list_calls.append(continuation_token)
        keys = sorted(k for k in self.objects if k.startswith(prefix))
        start = int(continuation_token or 0)
        chunk = keys[start : start + self.page_size]
        end = start + len(chunk)
        return ListPage(
            objects=[ObjectSummary(key=k, size=len(self.objects[k].content)) for k in chunk],
            next_token=str(end) if end < len(keys) else None,
        )

    def presign(self, key, expires_in):
        return f"https://{self._bucket}.example.test/{key}?X-Amz-Expires={expires_in}"


@pytest.fixture
def memory_transport() -> InMemoryTransport:
    return InMemoryTransport()


@pytest.fixture
def accessor(memory_transport) -> ObjectAccessor:
    return ObjectAccessor(memory_transport)


@pytest.fixture
def bucket_client(memory_transport) -> BucketClient:
    return BucketClient(memory_transport)
