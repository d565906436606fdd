"""Application service: Clear Reserved Product use case.

Clearing fulfils a reservation: the goods leave the building, so the
amount comes off both the reserved count and physical stock.
"""

from __future__ import annotations

from inventory.application.guards import require_product_id, require_quantity
from inventory.domain.service.product_gateway import ProductGateway


class ClearReservedProductHandler:

    def __init__(self, gateway: ProductGateway) -> None:
        self._gateway = gateway

    def handle(self, product_id: int, amount: int) -> None:
        require_product_id(product_id)
        quantity = require_quantity(amount, "Clear amount")
        self._gateway.clear_reserved(product_id, quantity)
