from __future__ import annotations

import atexit
import logging
from typing import Optional

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from promptshop.app.config import Config
from promptshop.app.extensions import EXTENSION_KEY, ShopContext
from promptshop.app.gateway import ModelGateway, OpenAIGateway
from promptshop.app.common.errors import ApiError
from promptshop.app.common.request_context import current_request_id, init_request_id
from promptshop.app.api.register import register_blueprints
from promptshop.app.cli import cli_bp


def create_app(config_object: type[Config] = Config, gateway: Optional[ModelGateway] = None) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)

    # Basic logging (prompt previews + model latency)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    # Shop context: state, schema, layout, gateway, view cache
    if gateway is None:
        gateway = OpenAIGateway.from_config(app.config)
    shop = ShopContext.from_config(app.config, gateway)
    app.extensions[EXTENSION_KEY] = shop
    if app.config.get("FLUSH_ON_EXIT"):
        # Only writes state changed outside a mutation, so an idle reloader
        # parent exits without touching the file.
        atexit.register(shop.close)

    # Request id, echoed back as X-Request-ID
    init_request_id(app)

    @app.get("/health")
    def health():
        return {"status": "ok"}, 200

    register_blueprints(app)

    # CLI (flask reset-state, flask clear-views)
    app.register_blueprint(cli_bp)

    # Error handlers
    @app.errorhandler(ApiError)
    def handle_api_error(err: ApiError):
        app.logger.error("%s: %s", err.code, err.message)
        return jsonify(err.to_dict(current_request_id())), err.status_code, err.headers or {}

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        # Normalize Werkzeug errors into our JSON shape, keeping headers like Allow
        payload = {
            "error": {
                "code": "http_error",
                "message": err.description,
                "details": {"name": err.name},
                "request_id": current_request_id(),
            }
        }
        headers = {k: v for k, v in err.get_headers() if k.lower() != "content-type"}
        return jsonify(payload), err.code or 500, headers

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        app.logger.exception("Unhandled exception")
        payload = {
            "error": {
                "code": "internal_error",
                "message": "Internal server error",
                "details": {},
                "request_id": current_request_id(),
            }
        }
        return jsonify(payload), 500

    return app
