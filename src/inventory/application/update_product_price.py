"""Application service: Update Product Price use case.

The price is validated here as well as on the aggregate, so a
non-positive price is rejected before storage is touched, exactly as it
is for AddProduct.
"""

from __future__ import annotations

from inventory.application.guards import require_price, require_product_id
from inventory.domain.service.product_gateway import ProductGateway


class UpdateProductPriceHandler:

    def __init__(self, gateway: ProductGateway) -> None:
        self._gateway = gateway

    def handle(self, product_id: int, price: str | float) -> None:
        require_product_id(product_id)
        money = require_price(price)
        self._gateway.change_price(product_id, money)
