"""Client-side abstraction over S3-compatible object storage.

Structured values, raw content and whole local directory trees are stored
and fetched by key, with uniform "missing key" versus "failure" handling.
"""

from .accessor import ObjectAccessor
from .client import BucketClient
from .content_types import DEFAULT_CONTENT_TYPES, ContentTypeMap
from .exceptions import (
    LocalIOError,
    SerializationError,
    StorageConnectionError,
    StorageError,
    StorageNotFoundError,
    StoragePermissionError,
)
from .factory import create_bucket_client
from .keys import key_for_path, path_for_key
from .outcomes import Failed, Found, NotFound, Outcome
from .persistence import StructuredStore
from .serialization import JsonCodec
from .sync import DirectorySynchronizer, list_files
from .transport import ListPage, ObjectSummary, ObjectTransport, StorageObject

__all__ = [
    "BucketClient",
    "ContentTypeMap",
    "DEFAULT_CONTENT_TYPES",
    "DirectorySynchronizer",
    "Failed",
    "Found",
    "JsonCodec",
    "ListPage",
    "LocalIOError",
    "NotFound",
    "ObjectAccessor",
    "ObjectSummary",
    "ObjectTransport",
    "Outcome",
    "SerializationError",
    "StorageConnectionError",
    "StorageError",
    "StorageNotFoundError",
    "StorageObject",
    "StoragePermissionError",
    "StructuredStore",
    "create_bucket_client",
    "key_for_path",
    "list_files",
    "path_for_key",
]
