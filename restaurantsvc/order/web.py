"""HTTP interface of the order service."""

from __future__ import annotations

import json
import re
from typing import Any

from flask import Flask, Response, jsonify, request

from restaurantsvc.order.models import (
    CreateRestaurantOrderRequest,
    UpdateRestaurantOrderRequest,
)
from restaurantsvc.order.service import RestaurantOrderService
from restaurantsvc.order.store import OrderNotFoundError

_INTEGER = re.compile(r"[+-]?[0-9]+")
_ALLOWED_METHODS = "GET,HEAD,PUT,PATCH,POST,DELETE"


def _read_json() -> Any:
    raw = request.get_data(cache=True)
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise ValueError(f"invalid JSON body: {exc}") from exc


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer {text!r}")
    return int(text)


def _http_error(status: int, message: str) -> tuple[Response, int]:
    return jsonify({"message": message}), status


def _install_common(app: Flask) -> None:
    @app.after_request
    def _allow_any_origin(response: Response) -> Response:
        response.headers.setdefault("Access-Control-Allow-Origin", "*")
        if request.method == "OPTIONS":
            response.headers["Access-Control-Allow-Methods"] = _ALLOWED_METHODS
            wanted = request.headers.get("Access-Control-Request-Headers")
            if wanted:
                response.headers["Access-Control-Allow-Headers"] = wanted
        return response

    @app.get("/ping")
    def ping() -> tuple[str, int]:
        return "pong", 200


def create_app(service: RestaurantOrderService) -> Flask:
    """Build the order service application around ``service``."""
    app = Flask(__name__)
    _install_common(app)

    @app.post("/api/orders")
    def create_restaurant_order():
        try:
            order_request = CreateRestaurantOrderRequest.from_dict(_read_json())
        except ValueError as exc:
            return _http_error(400, f"Failed to bind request body: {exc}")
        try:
            order = service.create_restaurant_order(order_request)
        except Exception as exc:
            return _http_error(500, f"Failed to create restaurant order: {exc}")
        return jsonify(order.to_dict()), 201

    @app.patch("/api/orders/<order_id>")
    def update_restaurant_order(order_id: str):
        try:
            update_request = UpdateRestaurantOrderRequest.from_dict(_read_json())
        except ValueError as exc:
            return _http_error(400, f"Failed to bind request body: {exc}")
        try:
            service.update_restaurant_order(update_request)
        except Exception as exc:
            return _http_error(500, f"Failed to update restaurant order: {exc}")
        return "", 200

    @app.get("/api/orders/<order_id>")
    def get_restaurant_order_by_id(order_id: str):
        try:
            parsed = _parse_int(order_id)
        except ValueError as exc:
            return _http_error(400, f"Invalid restaurant order ID: {exc}")
        try:
            order = service.get_restaurant_order_by_id(parsed)
        except OrderNotFoundError:
            return _http_error(404, "Restaurant order not found")
        except Exception as exc:
            return _http_error(500, f"Failed to get restaurant order: {exc}")
        return jsonify(order.to_dict()), 200

    return app