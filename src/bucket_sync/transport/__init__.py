"""Transport boundary: the per-bucket primitives the rest of bucket_sync sits on."""

from .base import ListPage, ObjectSummary, ObjectTransport, StorageObject

__all__ = [
    "ListPage",
    "ObjectSummary",
    "ObjectTransport",
    "StorageObject",
]
