"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the outer layers (CLI, HTTP) and the application
layer without exposing the domain aggregate to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from inventory.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as shown to callers."""

    id: int
    name: str
    price: float
    items_in_stock: int
    items_reserved: int

    @property
    def available_stock(self) -> int:
        return self.items_in_stock - self.items_reserved

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            price=float(product.price),
            items_in_stock=product.items_in_stock,
            items_reserved=product.items_reserved,
        )
