"""Application service: Reserve Product use case.

Holds units of available stock against a pending checkout so they
cannot be sold twice.
"""

from __future__ import annotations

from inventory.application.guards import require_product_id, require_quantity
from inventory.domain.service.product_gateway import ProductGateway


class ReserveProductHandler:

    def __init__(self, gateway: ProductGateway) -> None:
        self._gateway = gateway

    def handle(self, product_id: int, amount: int) -> None:
        require_product_id(product_id)
        quantity = require_quantity(amount, "Reserve amount")
        self._gateway.reserve(product_id, quantity)
