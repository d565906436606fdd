"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from inventory.domain.exceptions import InvalidArgumentError


PRICE_PLACES = 6
MAX_PRICE = Decimal("1E9")


def _require_int(value: object, what: str) -> None:
    # bool is an int subclass; True must not sneak in as an amount of 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{what} must be an integer, got {type(value).__name__}"
        )


@dataclass(frozen=True)
class Money:
    """Monetary amount.

    Uses Decimal so a price read back from storage is exactly the price
    that was written. Amounts are bounded to what every store keeps
    exactly: at most ``PRICE_PLACES`` fractional digits and below
    ``MAX_PRICE``.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidArgumentError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise InvalidArgumentError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise InvalidArgumentError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        if self.amount >= MAX_PRICE:
            raise InvalidArgumentError(
                f"Money amount must be below {MAX_PRICE:f}, got {self.amount}"
            )
        if self.amount.normalize().as_tuple().exponent < -PRICE_PLACES:
            raise InvalidArgumentError(
                f"Money amount has more than {PRICE_PLACES} decimal places, got {self.amount}"
            )

    @property
    def is_positive(self) -> bool:
        return self.amount > Decimal("0")

    def __float__(self) -> float:
        return float(self.amount)

    def __str__(self) -> str:
        return str(self.amount)

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise InvalidArgumentError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidArgumentError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """A strictly positive number of units.

    Reservations and reservation clears only ever move a positive number
    of units; the direction is given by the operation, never by the sign.
    """

    value: int

    def __post_init__(self) -> None:
        _require_int(self.value, "Quantity")
        if self.value <= 0:
            raise InvalidArgumentError(f"Quantity must be greater than 0: [{self.value}]")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class StockDelta:
    """A signed change to physical stock.

    Positive values restock, negative values shrink (write-offs, counts).
    Zero is accepted and leaves the product untouched.
    """

    value: int

    def __post_init__(self) -> None:
        _require_int(self.value, "Stock amount")

    def __str__(self) -> str:
        return f"{self.value:+d}"
