"""Tagged results for the outer layers.

Handlers raise typed domain exceptions. Callers that prefer to branch on
an explicit value (the HTTP routes do) wrap the call in ``capture`` and
get back either ``Ok(value)`` or ``Err(kind, message)``. Only domain
errors are captured; anything else is a server fault and keeps
propagating.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar, Union

from inventory.domain.exceptions import (
    ConcurrencyConflictError,
    DomainException,
    DuplicateNameError,
    NotFoundError,
)

T = TypeVar("T")


class ErrorKind(Enum):
    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    DUPLICATE_NAME = "duplicate_name"
    CONFLICT = "conflict"

    @staticmethod
    def of(exc: DomainException) -> ErrorKind:
        # most specific first: NotFound and DuplicateName are InvalidArgument too
        if isinstance(exc, NotFoundError):
            return ErrorKind.NOT_FOUND
        if isinstance(exc, DuplicateNameError):
            return ErrorKind.DUPLICATE_NAME
        if isinstance(exc, ConcurrencyConflictError):
            return ErrorKind.CONFLICT
        return ErrorKind.INVALID_ARGUMENT


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]


def capture(fn: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T]:
    """Call ``fn`` and fold any DomainException into an ``Err``."""
    try:
        return Ok(fn(*args, **kwargs))
    except DomainException as exc:
        return Err(ErrorKind.of(exc), str(exc))
