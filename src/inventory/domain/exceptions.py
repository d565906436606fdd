"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and map them to exit
codes or status codes. Anything that is not a DomainException is a
server-side failure and propagates unchanged.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidArgumentError(DomainException):
    """Caller-supplied data is malformed or would break an invariant."""


class NotFoundError(InvalidArgumentError):
    """A requested product does not exist."""


class DuplicateNameError(InvalidArgumentError):
    """Another product already uses the requested name."""

    def __init__(self, message: str, name: str) -> None:
        super().__init__(message)
        self.name = name


class ConcurrencyConflictError(DomainException):
    """The record changed underneath us more times than we were willing to retry."""
