"""Tagged results returned by the transport for read-style operations."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .exceptions import StorageError, StorageNotFoundError

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """The operation succeeded; ``value`` holds its result."""

    value: T


@dataclass(frozen=True)
class NotFound:
    """The store reported that the key does not exist."""

    error: StorageNotFoundError


@dataclass(frozen=True)
class Failed:
    """Any failure other than a missing key. ``error.cause`` keeps the original exception."""

    error: StorageError


Outcome = Union[Found[T], NotFound, Failed]


def unwrap(outcome: "Outcome[T]") -> T:
    """Return the found value or raise the carried error, not-found included."""
    if isinstance(outcome, Found):
        return outcome.value
    raise outcome.error


def unwrap_or_none(outcome: "Outcome[T]") -> T | None:
    """Return the found value, ``None`` for a missing key, or raise the failure."""
    if isinstance(outcome, NotFound):
        return None
    return unwrap(outcome)
