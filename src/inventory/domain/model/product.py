"""Product aggregate: catalog entry plus its stock and reservation counters.

Each product knows how many units are physically in stock and how many
of those are held by reservations. All counter arithmetic lives here so
the invariants are enforced in exactly one place.
"""

from __future__ import annotations

from dataclasses import dataclass

from inventory.domain.exceptions import InvalidArgumentError
from inventory.domain.model.value_objects import Money, Quantity, StockDelta


def is_blank(name: str | None) -> bool:
    return name is None or not str(name).strip()


@dataclass
class Product:
    """Aggregate root for a catalog product.

    Invariants:
    - ``items_in_stock`` is always >= 0
    - ``items_reserved`` is always >= 0
    - ``items_reserved`` can never exceed ``items_in_stock``

    Use ``Product.create()`` for new products. The ``__init__`` is kept
    simple so repositories can reconstitute persisted rows as they are.
    """

    id: int | None
    name: str
    price: Money
    items_in_stock: int = 0
    items_reserved: int = 0
    version: int = 0

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(name: str, price: Money) -> Product:
        if is_blank(name):
            raise InvalidArgumentError(f"Product Name is invalid: [{name}]")
        if not price.is_positive:
            raise InvalidArgumentError(f"Product Price is invalid: [{price.amount}]")
        return Product(id=None, name=name, price=price)

    # --- Computed properties --------------------------------------------------

    @property
    def available_stock(self) -> int:
        return self.items_in_stock - self.items_reserved

    # --- Catalog mutations ----------------------------------------------------

    def rename(self, name: str) -> None:
        if is_blank(name):
            raise InvalidArgumentError(f"Product Name is invalid: [{name}]")
        self.name = name

    def change_price(self, price: Money) -> None:
        if not price.is_positive:
            raise InvalidArgumentError(f"Product Price is invalid: [{price.amount}]")
        self.price = price

    # --- Counter mutations ----------------------------------------------------

    def adjust_stock(self, delta: StockDelta) -> None:
        """Restock (positive delta) or shrink (negative delta) physical stock.

        Stock may never shrink below what is already reserved.
        """
        self._apply_counters(
            stock=self.items_in_stock + delta.value,
            reserved=self.items_reserved,
            action=f"adjust stock by {delta}",
        )

    def reserve(self, quantity: Quantity) -> None:
        """Hold ``quantity`` units of available stock."""
        if quantity.value > self.available_stock:
            raise InvalidArgumentError(
                f"Cannot reserve {quantity} of product [{self.id}]: "
                f"only {self.available_stock} available"
            )
        self._apply_counters(
            stock=self.items_in_stock,
            reserved=self.items_reserved + quantity.value,
            action=f"reserve {quantity}",
        )

    def clear_reserved(self, quantity: Quantity) -> None:
        """Fulfil a reservation.

        The units leave stock and the hold is released at the same time,
        so both ``items_in_stock`` and ``items_reserved`` drop by
        ``quantity``.
        """
        self._apply_counters(
            stock=self.items_in_stock - quantity.value,
            reserved=self.items_reserved - quantity.value,
            action=f"clear {quantity} reserved",
        )

    # --- Internal helpers -----------------------------------------------------

    def _apply_counters(self, stock: int, reserved: int, action: str) -> None:
        # validate every bound before assigning anything
        prefix = f"Cannot {action} for product [{self.id}]"
        if stock < 0:
            raise InvalidArgumentError(
                f"{prefix}: items in stock would become negative [{stock}]"
            )
        if reserved < 0:
            raise InvalidArgumentError(
                f"{prefix}: items reserved would become negative [{reserved}]"
            )
        if reserved > stock:
            raise InvalidArgumentError(
                f"{prefix}: available stock would become negative [{stock - reserved}]"
            )
        self.items_in_stock = stock
        self.items_reserved = reserved
