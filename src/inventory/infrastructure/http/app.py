"""Flask application factory."""

from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from inventory.domain.service.product_gateway import ProductGateway
from inventory.infrastructure.bootstrap import product_gateway
from inventory.infrastructure.config import Settings, load_settings
from inventory.infrastructure.http.products import GATEWAY_KEY, bp as products_bp

logger = logging.getLogger(__name__)


def create_app(
    gateway: ProductGateway | None = None,
    settings: Settings | None = None,
) -> Flask:
    """Build the app around ``gateway``, or one wired from ``settings``."""
    app = Flask(__name__)
    if gateway is None:
        gateway = product_gateway(settings or load_settings())
    app.extensions[GATEWAY_KEY] = gateway

    app.register_blueprint(products_bp, url_prefix="/products")

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"}), 200

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        logger.exception("Unhandled error while serving request")
        return jsonify({"error": "internal", "message": str(exc)}), 500

    return app
