"""Unit tests for the Ok/Err result helpers."""

import pytest

from inventory.application.result import Err, ErrorKind, Ok, capture
from inventory.domain.exceptions import (
    ConcurrencyConflictError,
    DuplicateNameError,
    InvalidArgumentError,
    NotFoundError,
)


def _raise(exc: Exception):
    raise exc


class TestCapture:

    def test_success_is_ok(self):
        result = capture(lambda a, b: a + b, 2, b=3)
        assert result == Ok(5)
        assert result.is_ok

    @pytest.mark.parametrize(
        "exc, kind",
        [
            (InvalidArgumentError("bad"), ErrorKind.INVALID_ARGUMENT),
            (NotFoundError("gone"), ErrorKind.NOT_FOUND),
            (DuplicateNameError("taken", "X"), ErrorKind.DUPLICATE_NAME),
            (ConcurrencyConflictError("busy"), ErrorKind.CONFLICT),
        ],
    )
    def test_domain_errors_become_err(self, exc, kind):
        result = capture(_raise, exc)
        assert isinstance(result, Err)
        assert not result.is_ok
        assert result.kind is kind
        assert result.message == str(exc)

    def test_other_errors_propagate(self):
        with pytest.raises(RuntimeError):
            capture(_raise, RuntimeError("disk on fire"))
