"""Application service: Get Product use case (query)."""

from __future__ import annotations

from inventory.application.dto import ProductDTO
from inventory.application.guards import require_product_id
from inventory.domain.service.product_gateway import ProductGateway


class GetProductHandler:

    def __init__(self, gateway: ProductGateway) -> None:
        self._gateway = gateway

    def handle(self, product_id: int) -> ProductDTO:
        require_product_id(product_id)
        return ProductDTO.from_product(self._gateway.get_product(product_id))
