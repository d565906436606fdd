"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging

from inventory.domain.repository.product_repository import ProductRepository
from inventory.domain.service.product_gateway import ProductGateway
from inventory.infrastructure.config import Settings, load_settings
from inventory.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from inventory.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)

logger = logging.getLogger(__name__)


def product_repository(settings: Settings | None = None) -> ProductRepository:
    settings = settings or load_settings()
    if settings.backend == "sql":
        if settings.database_url is None:
            # default SQLite file lives in the data directory
            settings.data_dir.mkdir(parents=True, exist_ok=True)
        logger.debug("Using SQL product store at %s", settings.sql_url)
        return SqlProductRepository.from_url(settings.sql_url)
    logger.debug("Using JSON product store at %s", settings.json_path)
    return JsonProductRepository(settings.json_path)


def product_gateway(settings: Settings | None = None) -> ProductGateway:
    settings = settings or load_settings()
    return ProductGateway(product_repository(settings), max_retries=settings.max_retries)
