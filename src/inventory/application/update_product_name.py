"""Application service: Update Product Name use case."""

from __future__ import annotations

from inventory.application.guards import require_name, require_product_id
from inventory.domain.service.product_gateway import ProductGateway


class UpdateProductNameHandler:

    def __init__(self, gateway: ProductGateway) -> None:
        self._gateway = gateway

    def handle(self, product_id: int, name: str) -> None:
        require_product_id(product_id)
        require_name(name)
        self._gateway.rename(product_id, name)
