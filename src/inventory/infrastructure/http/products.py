"""HTTP routes for the product catalog.

One route per use case. Every handler call goes through ``capture`` so
domain failures come back as an ``Err`` and are mapped to a status code
here; anything else escapes to the app-level 500 handler.
"""

from __future__ import annotations

from typing import Any

from flask import Blueprint, current_app, jsonify, request

from inventory.application.add_product import AddProductHandler
from inventory.application.clear_reserved_product import ClearReservedProductHandler
from inventory.application.delete_product import DeleteProductHandler
from inventory.application.dto import ProductDTO
from inventory.application.get_product import GetProductHandler
from inventory.application.list_products import ListProductsHandler
from inventory.application.reserve_product import ReserveProductHandler
from inventory.application.result import Err, ErrorKind, Result, capture
from inventory.application.update_product_name import UpdateProductNameHandler
from inventory.application.update_product_price import UpdateProductPriceHandler
from inventory.application.update_product_stock import UpdateProductStockHandler
from inventory.domain.service.product_gateway import ProductGateway

GATEWAY_KEY = "inventory.gateway"

STATUS_BY_KIND = {
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.NOT_FOUND: 400,
    ErrorKind.DUPLICATE_NAME: 400,
    ErrorKind.CONFLICT: 409,
}

bp = Blueprint("products", __name__)


def product_to_dict(dto: ProductDTO) -> dict:
    return {
        "id": dto.id,
        "name": dto.name,
        "price": dto.price,
        "itemsInStock": dto.items_in_stock,
        "itemsReserved": dto.items_reserved,
    }


def _gateway() -> ProductGateway:
    return current_app.extensions[GATEWAY_KEY]


def _body_value(field: str) -> Any:
    """Accept either a bare JSON value or an object carrying ``field``."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data.get(field)
    return data


def _respond(result: Result, body: Any = None):
    if isinstance(result, Err):
        payload = {"error": result.kind.value, "message": result.message}
        return jsonify(payload), STATUS_BY_KIND[result.kind]
    if body is None:
        return "", 200
    return jsonify(body), 200


@bp.route("", methods=["POST"])
def add_product():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    handler = AddProductHandler(_gateway())
    result = capture(handler.handle, data.get("name"), data.get("price"))
    return _respond(result, product_to_dict(result.value) if result.is_ok else None)


@bp.route("", methods=["GET"])
def list_products():
    products = ListProductsHandler(_gateway()).handle()
    return jsonify([product_to_dict(p) for p in products]), 200


@bp.route("/<int(signed=True):product_id>", methods=["GET"])
def get_product(product_id: int):
    result = capture(GetProductHandler(_gateway()).handle, product_id)
    return _respond(result, product_to_dict(result.value) if result.is_ok else None)


@bp.route("/<int(signed=True):product_id>/name", methods=["PUT"])
def update_product_name(product_id: int):
    handler = UpdateProductNameHandler(_gateway())
    return _respond(capture(handler.handle, product_id, _body_value("name")))


@bp.route("/<int(signed=True):product_id>/price", methods=["PUT"])
def update_product_price(product_id: int):
    handler = UpdateProductPriceHandler(_gateway())
    return _respond(capture(handler.handle, product_id, _body_value("price")))


@bp.route("/<int(signed=True):product_id>/stock", methods=["PUT"])
def update_product_stock(product_id: int):
    handler = UpdateProductStockHandler(_gateway())
    return _respond(capture(handler.handle, product_id, _body_value("amount")))


@bp.route("/<int(signed=True):product_id>/reserve", methods=["POST"])
def reserve_product(product_id: int):
    handler = ReserveProductHandler(_gateway())
    return _respond(capture(handler.handle, product_id, _body_value("amount")))


@bp.route("/<int(signed=True):product_id>/reserve", methods=["DELETE"])
def clear_reserved_product(product_id: int):
    handler = ClearReservedProductHandler(_gateway())
    return _respond(capture(handler.handle, product_id, _body_value("amount")))


@bp.route("/<int(signed=True):product_id>", methods=["DELETE"])
def delete_product(product_id: int):
    return _respond(capture(DeleteProductHandler(_gateway()).handle, product_id))
