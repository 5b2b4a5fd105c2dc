"""Translation of botocore failures into the bucket_sync error taxonomy.

Only the transport boundary calls into this module; everything above it
works with :mod:`bucket_sync.outcomes` values.
"""

import logging

from botocore.exceptions import (
    ClientError,
    ConnectionClosedError,
    ConnectTimeoutError,
    EndpointConnectionError,
    NoCredentialsError,
    PartialCredentialsError,
    ReadTimeoutError,
)

from .exceptions import (
    StorageConnectionError,
    StorageError,
    StorageNotFoundError,
    StoragePermissionError,
)
from .outcomes import Failed, NotFound

log = logging.getLogger(__name__)

_ERROR_CODE_MAP = {
    "NoSuchKey": StorageNotFoundError,
    "NotFound": StorageNotFoundError,
    "404": StorageNotFoundError,
    "AccessDenied": StoragePermissionError,
    "Forbidden": StoragePermissionError,
    "403": StoragePermissionError,
    "InvalidAccessKeyId": StoragePermissionError,
    "SignatureDoesNotMatch": StoragePermissionError,
    "ExpiredToken": StoragePermissionError,
    "NoSuchBucket": StorageError,
}

_HTTP_STATUS_MAP = {
    404: StorageNotFoundError,
    403: StoragePermissionError,
}

_CONNECTION_ERRORS = (
    EndpointConnectionError,
    ConnectionClosedError,
    ConnectTimeoutError,
    ReadTimeoutError,
)

_CREDENTIAL_ERRORS = (NoCredentialsError, PartialCredentialsError)


def translate_error(error: Exception, key: str | None = None) -> StorageError:
    """Map a transport exception onto a :class:`StorageError` subclass."""
    if isinstance(error, StorageError):
        return error
    if isinstance(error, ClientError):
        return _translate_client_error(error, key)
    if isinstance(error, _CONNECTION_ERRORS):
        return StorageConnectionError(str(error), key=key, cause=error)
    if isinstance(error, _CREDENTIAL_ERRORS):
        return StoragePermissionError(str(error), key=key, cause=error)
    if isinstance(error, ConnectionError):
        return StorageConnectionError(str(error), key=key, cause=error)
    return StorageError(str(error), key=key, cause=error)


def classify(error: Exception, key: str | None = None) -> NotFound | Failed:
    """Split a failed read/head/delete into "missing key" and everything else."""
    translated = translate_error(error, key)
    if isinstance(translated, StorageNotFoundError):
        log.debug("Key not found: %s", key)
        return NotFound(translated)
    return Failed(translated)


def _translate_client_error(error: ClientError, key: str | None) -> StorageError:
    response = error.response or {}
    code = str(response.get("Error", {}).get("Code", ""))
    exc_cls = _ERROR_CODE_MAP.get(code)
    if exc_cls is None:
        # Named codes missing from the table stay generic even on a 404.
        # A named code other than the ones above is never a missing key, even with a 404 status.
        if not code or code.isdigit():
            status = response.get("ResponseMetadata", {}).get("HTTPStatusCode")
            exc_cls = _HTTP_STATUS_MAP.get(status, StorageError)
    return exc_cls(str(error), key=key, cause=error)
