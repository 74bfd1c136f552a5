"""
Error taxonomy for the API handlers.

Every failure that reaches a client carries exactly one ErrorKind, and the
kind alone decides the HTTP status code. Handlers and services build
DomainError values and return them inside an Err result; the error handler
is the only place they are turned into a response.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Stable error type tags exposed in the response envelope."""

    VALIDATION = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    INTERNAL = "INTERNAL_SERVER_ERROR"
    BAD_REQUEST = "BAD_REQUEST"


_STATUS_CODES: Dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}

_DEFAULT_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.VALIDATION: "Validation failed",
    ErrorKind.NOT_FOUND: "Resource not found",
    ErrorKind.UNAUTHORIZED: "Unauthorized",
    ErrorKind.FORBIDDEN: "Forbidden",
    ErrorKind.INTERNAL: "Internal server error",
    ErrorKind.BAD_REQUEST: "Bad request",
}


def to_error_kind(kind: Any) -> ErrorKind:
    """Resolve a kind or its tag string, INTERNAL for anything unknown."""
    try:
        return ErrorKind(kind)
    except (TypeError, ValueError):
        return ErrorKind.INTERNAL


def status_for_kind(kind: Any) -> int:
    """Get the HTTP status code for an error kind (500 for anything unknown)."""
    return _STATUS_CODES[to_error_kind(kind)]


@dataclass(frozen=True)
class DomainError:
    """
    A typed, immutable failure value.

    Attributes:
        kind: Error kind, determines the status code
        status_code: HTTP status code for the kind
        message: Client-facing message
        details: Structured detail, only carried for validation errors
        code: Machine-readable code, only carried for internal errors
        cause: Underlying exception, used for logging and never serialized
    """

    kind: ErrorKind
    status_code: int
    message: str
    details: Optional[Dict[str, Any]] = None
    code: Optional[str] = None
    cause: Optional[BaseException] = None

    def __post_init__(self):
        object.__setattr__(self, "kind", to_error_kind(self.kind))

    @classmethod
    def of(cls, kind: ErrorKind, message: Optional[str] = None) -> "DomainError":
        """Create an error of the given kind with its default status and message."""
        kind = to_error_kind(kind)
        return cls(
            kind=kind,
            status_code=status_for_kind(kind),
            message=message or _DEFAULT_MESSAGES[kind],
        )

    @classmethod
    def validation(
        cls,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> "DomainError":
        return cls(
            kind=ErrorKind.VALIDATION,
            status_code=400,
            message=message or _DEFAULT_MESSAGES[ErrorKind.VALIDATION],
            details=details if details is not None else {},
        )

    @classmethod
    def not_found(cls, message: Optional[str] = None) -> "DomainError":
        return cls.of(ErrorKind.NOT_FOUND, message)

    @classmethod
    def unauthorized(cls, message: Optional[str] = None) -> "DomainError":
        return cls.of(ErrorKind.UNAUTHORIZED, message)

    @classmethod
    def forbidden(cls, message: Optional[str] = None) -> "DomainError":
        return cls.of(ErrorKind.FORBIDDEN, message)

    @classmethod
    def bad_request(cls, message: Optional[str] = None) -> "DomainError":
        return cls.of(ErrorKind.BAD_REQUEST, message)

    @classmethod
    def internal(
        cls,
        message: Optional[str] = None,
        code: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> "DomainError":
        return cls(
            kind=ErrorKind.INTERNAL,
            status_code=500,
            message=message or _DEFAULT_MESSAGES[ErrorKind.INTERNAL],
            code=code,
            cause=cause,
        )
