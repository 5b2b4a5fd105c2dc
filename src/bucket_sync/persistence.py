"""Structured get/put of values serialized into objects."""

from typing import Any

from .accessor import ObjectAccessor
from .exceptions import SerializationError
from .serialization import JsonCodec


class StructuredStore:
    """Persist values as serialized objects through an :class:`ObjectAccessor`."""

    def __init__(self, accessor: ObjectAccessor, codec: JsonCodec | None = None):
        self._accessor = accessor
        self._codec = codec or JsonCodec()

    def get(self, key: str, model: Any = None) -> tuple[bool, Any]:
        """Load and decode the value stored at *key*.

        Returns ``(False, None)`` when the key does not exist and
        ``(True, value)`` otherwise. A zero-length object decodes to ``None``.

        Raises:
            SerializationError: If the stored bytes cannot be decoded.
            StorageError: For any transport failure other than a missing key.
        """
        obj = self._accessor.read(key)
        if obj is None:
            return False, None
        if not obj.content:
            return True, None
        try:
            return True, self._codec.decode(obj.content, model)
        except SerializationError as e:
            e.key = key
            raise

    def put(self, key: str, value: Any) -> str:
        """Encode *value* and write it to *key*. ``None`` writes an empty body."""
        if value is None:
            return self._accessor.write(key, b"")
        try:
            body = self._codec.encode(value)
        except SerializationError as e:
            e.key = key
            raise
        return self._accessor.write(key, body, content_type=self._codec.content_type)
