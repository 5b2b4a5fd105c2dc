"""JSON codec used by structured persistence."""

from typing import Any

from pydantic import TypeAdapter, ValidationError

from .exceptions import SerializationError

_ANY_ADAPTER: TypeAdapter[Any] = TypeAdapter(Any)


class JsonCodec:
    """Encode values to indented JSON and decode them back.

    Encoding goes through pydantic so models, dataclasses and datetimes are
    handled; decoding validates into *model* when one is given.
    """

    content_type = "application/json"

    def __init__(self, indent: int | None = 2):
        self._indent = indent

    def encode(self, value: Any) -> bytes:
        try:
            return _ANY_ADAPTER.dump_json(value, indent=self._indent)
        except ValueError as e:
            raise SerializationError(f"Cannot encode value of type {type(value).__name__}: {e}", cause=e) from e

    def decode(self, data: bytes, model: Any = None) -> Any:
        adapter = TypeAdapter(model) if model is not None else _ANY_ADAPTER
        try:
            return adapter.validate_json(data)
        except ValidationError as e:
            raise SerializationError(f"Cannot decode stored bytes: {e}", cause=e) from e
