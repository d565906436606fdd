"""Application service: Delete Product use case."""

from __future__ import annotations

from inventory.application.guards import require_product_id
from inventory.domain.service.product_gateway import ProductGateway


class DeleteProductHandler:

    def __init__(self, gateway: ProductGateway) -> None:
        self._gateway = gateway

    def handle(self, product_id: int) -> None:
        """Permanently remove a product. Its id is never handed out again."""
        require_product_id(product_id)
        self._gateway.delete_product(product_id)
