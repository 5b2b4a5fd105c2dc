"""Content-type inference from file extensions."""

import os
from collections.abc import Mapping

DEFAULT_CONTENT_TYPES: Mapping[str, str] = {
    ".txt": "text/plain",
    ".csv": "text/csv",
    ".tsv": "text/tsv",
    ".html": "text/html",
    ".json": "application/json",
    ".xml": "application/xml",
}


class ContentTypeMap:
    """Extension to content-type table.

    Unknown extensions resolve to ``None`` rather than a generic binary type,
    so the object is stored without a content type.
    """

    def __init__(self, mapping: Mapping[str, str] | None = None):
        self._types: dict[str, str] = {}
        for extension, content_type in (DEFAULT_CONTENT_TYPES if mapping is None else mapping).items():
            self.register(extension, content_type)

    def register(self, extension: str, content_type: str) -> None:
        self._types[_normalize(extension)] = content_type

    def resolve(self, path: str | os.PathLike) -> str | None:
        _, extension = os.path.splitext(os.fspath(path))
        if not extension:
            return None
        return self._types.get(extension.lower())

    def __contains__(self, extension: str) -> bool:
        return _normalize(extension) in self._types


def _normalize(extension: str) -> str:
    extension = extension.lower()
    return extension if extension.startswith(".") else f".{extension}"
