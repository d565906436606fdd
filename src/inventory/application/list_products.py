"""Application service: List Products use case (query).

No input to validate; returns the whole catalog in storage order, which
callers must not rely on.
"""

from __future__ import annotations

from inventory.application.dto import ProductDTO
from inventory.domain.service.product_gateway import ProductGateway


class ListProductsHandler:

    def __init__(self, gateway: ProductGateway) -> None:
        self._gateway = gateway

    def handle(self) -> list[ProductDTO]:
        return [ProductDTO.from_product(p) for p in self._gateway.list_products()]
