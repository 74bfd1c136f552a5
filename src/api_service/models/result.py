"""
Result values returned across service and handler boundaries.

A call either succeeds with ``Ok(value)`` or fails with ``Err(error)``
carrying a DomainError. Callers branch on ``is_ok`` instead of catching
typed exceptions.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from api_service.models.errors import DomainError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed result."""

    error: DomainError

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok[Any], Err]
