"""Argument guards shared by the application handlers.

These checks look only at the *shape* of caller input and never touch
storage, so a bad id or a blank name is rejected the same way whatever
the database currently holds.
"""

from __future__ import annotations

from inventory.domain.exceptions import InvalidArgumentError
from inventory.domain.model.product import is_blank
from inventory.domain.model.value_objects import Money, Quantity, StockDelta


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def require_product_id(product_id: int) -> int:
    if not _is_int(product_id) or product_id <= 0:
        raise InvalidArgumentError(f"Product ID is invalid: [{product_id}]")
    return product_id


def require_name(name: str | None) -> str:
    if not isinstance(name, str) or is_blank(name):
        raise InvalidArgumentError(f"Product Name is invalid: [{name}]")
    return name


def require_price(price: str | float | int | None) -> Money:
    if price is None:
        raise InvalidArgumentError(f"Product Price is invalid: [{price}]")
    try:
        money = Money.of(price)
    except InvalidArgumentError as exc:
        raise InvalidArgumentError(f"Product Price is invalid: [{price}]") from exc
    if not money.is_positive:
        raise InvalidArgumentError(f"Product Price is invalid: [{price}]")
    return money


def require_quantity(amount: int, what: str) -> Quantity:
    """Accept only a strictly positive whole number of units."""
    if not _is_int(amount) or amount <= 0:
        raise InvalidArgumentError(f"{what} must be greater than 0: [{amount}]")
    return Quantity(amount)


def require_stock_delta(amount: int) -> StockDelta:
    if not _is_int(amount):
        raise InvalidArgumentError(f"Stock amount is invalid: [{amount}]")
    return StockDelta(amount)
