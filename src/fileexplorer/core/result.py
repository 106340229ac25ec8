# Tagged result values returned by core operations.
# Created: 2026-10-19
#
# Core functions never raise across component boundaries. They return Ok(value) or
# Err(kind, message); the HTTP layer is the only place that turns an Err into a status.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories a core operation can report."""

    BAD_REQUEST = "bad_request"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str


Result = Union[Ok[T], Err]


ACCESS_DENIED = "Access denied."


def bad_request(message: str) -> Err:
    return Err(ErrorKind.BAD_REQUEST, message)


def forbidden(message: str = ACCESS_DENIED) -> Err:
    return Err(ErrorKind.FORBIDDEN, message)


def not_found(message: str) -> Err:
    return Err(ErrorKind.NOT_FOUND, message)


def internal(message: str = "An unexpected error occurred.") -> Err:
    return Err(ErrorKind.INTERNAL, message)
