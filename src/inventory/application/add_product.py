"""Application service: Add Product use case."""

from __future__ import annotations

from inventory.application.dto import ProductDTO
from inventory.application.guards import require_name, require_price
from inventory.domain.service.product_gateway import ProductGateway


class AddProductHandler:

    def __init__(self, gateway: ProductGateway) -> None:
        self._gateway = gateway

    def handle(self, name: str, price: str | float) -> ProductDTO:
        """Add a new product to the catalog with empty stock.

        Raises DuplicateNameError if the name is already taken.
        """
        require_name(name)
        money = require_price(price)
        product = self._gateway.add_product(name, money)
        return ProductDTO.from_product(product)
