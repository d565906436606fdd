"""Application service: Update Product Stock use case."""

from __future__ import annotations

from inventory.application.guards import require_product_id, require_stock_delta
from inventory.domain.service.product_gateway import ProductGateway


class UpdateProductStockHandler:

    def __init__(self, gateway: ProductGateway) -> None:
        self._gateway = gateway

    def handle(self, product_id: int, amount: int) -> None:
        """Change physical stock by a signed amount.

        A positive amount restocks, a negative amount shrinks stock. The
        gateway rejects any change that would leave stock negative or
        below the quantity already reserved.
        """
        require_product_id(product_id)
        delta = require_stock_delta(amount)
        self._gateway.adjust_stock(product_id, delta)
