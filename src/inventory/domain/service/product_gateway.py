"""Domain service: Product Gateway.

The gateway is the sole authority over stored product state. Handlers
only check the *shape* of their arguments; everything that depends on
what is currently stored (existence, name clashes, counter bounds) is
re-validated here against a freshly loaded record.

Every mutation is a read-modify-write:

  1. load the product by id (NotFoundError if absent)
  2. apply the change on the aggregate, which validates every bound
     before assigning anything
  3. write all fields back as one versioned update

Step 3 is optimistic: if another writer got there first the repository
raises ConcurrencyConflictError, and the whole cycle is repeated against
the fresh record, up to ``max_retries`` times.
"""

from __future__ import annotations

import logging
from typing import Callable

from inventory.domain.exceptions import (
    ConcurrencyConflictError,
    DuplicateNameError,
    NotFoundError,
)
from inventory.domain.model.product import Product
from inventory.domain.model.value_objects import Money, Quantity, StockDelta
from inventory.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 3


class ProductGateway:

    def __init__(
        self,
        product_repo: ProductRepository,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ) -> None:
        if max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {max_retries}")
        self._product_repo = product_repo
        self._max_retries = max_retries

    # --- Queries --------------------------------------------------------------

    def get_product(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product ID does not exist: [{product_id}]")
        return product

    def list_products(self) -> list[Product]:
        return self._product_repo.list_all()

    # --- Lifecycle ------------------------------------------------------------

    def add_product(self, name: str, price: Money) -> Product:
        """Insert a new product with both counters at zero.

        The repository enforces name uniqueness at the storage level and
        raises DuplicateNameError on a clash.
        """
        product = self._product_repo.add(Product.create(name, price))
        logger.info("Added product [%s] %r at %s", product.id, product.name, product.price)
        return product

    def delete_product(self, product_id: int) -> None:
        self.get_product(product_id)
        self._product_repo.delete(product_id)
        logger.info("Deleted product [%s]", product_id)

    # --- Mutations ------------------------------------------------------------

    def rename(self, product_id: int, name: str) -> None:
        holder = self._product_repo.get_by_name(name)
        if holder is not None and holder.id != product_id:
            raise DuplicateNameError(f"Product Name already exists: [{name}]", name)
        self._mutate(product_id, lambda p: p.rename(name), f"renamed to {name!r}")

    def change_price(self, product_id: int, price: Money) -> None:
        self._mutate(product_id, lambda p: p.change_price(price), f"repriced to {price}")

    def adjust_stock(self, product_id: int, delta: StockDelta) -> None:
        self._mutate(product_id, lambda p: p.adjust_stock(delta), f"stock adjusted by {delta}")

    def reserve(self, product_id: int, quantity: Quantity) -> None:
        self._mutate(product_id, lambda p: p.reserve(quantity), f"reserved {quantity}")

    def clear_reserved(self, product_id: int, quantity: Quantity) -> None:
        self._mutate(
            product_id, lambda p: p.clear_reserved(quantity), f"cleared {quantity} reserved"
        )

    # --- Internal helpers -----------------------------------------------------

    def _mutate(
        self,
        product_id: int,
        change: Callable[[Product], None],
        description: str,
    ) -> None:
        conflicts = 0
        while True:
            product = self.get_product(product_id)
            change(product)
            try:
                self._product_repo.update(product)
            except ConcurrencyConflictError as exc:
                conflicts += 1
                if conflicts > self._max_retries:
                    logger.warning(
                        "Giving up on product [%s] after %d version conflicts",
                        product_id, conflicts,
                    )
                    raise ConcurrencyConflictError(
                        f"Product [{product_id}] was modified concurrently; "
                        f"gave up after {self._max_retries} retries"
                    ) from exc
                logger.warning(
                    "Version conflict on product [%s], retrying (%d/%d)",
                    product_id, conflicts, self._max_retries,
                )
                continue
            logger.info(
                "Product [%s] %s (stock=%d, reserved=%d)",
                product_id, description, product.items_in_stock, product.items_reserved,
            )
            return
