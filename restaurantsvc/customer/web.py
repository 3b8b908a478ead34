"""HTTP interface of the customer service."""

from __future__ import annotations

import json
from typing import Any

from flask import Flask, Response, jsonify, request

from restaurantsvc.customer.models import CreateCustomerRequest, UpdateCustomerRequest
from restaurantsvc.customer.service import CustomerService, RestaurantTableService

_ALLOWED_METHODS = "GET,HEAD,PUT,PATCH,POST,DELETE"


def _read_json() -> Any:
    raw = request.get_data(cache=True)
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise ValueError(f"invalid JSON body: {exc}") from exc


def _message(status: int, message: str) -> tuple[Response, int]:
    return jsonify(message), status


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


def create_app(
    customer_service: CustomerService, table_service: RestaurantTableService
) -> Flask:
    """Build the customer service application around the given services."""
    app = Flask(__name__)
    _install_common(app)

    @app.post("/api/customers")
    def create_customer():
        try:
            customer_request = CreateCustomerRequest.from_dict(_read_json())
        except ValueError as exc:
            return _message(400, f"Invalid request: {exc}")
        try:
            customer = customer_service.create_customer(customer_request)
        except Exception as exc:
            return _message(500, f"Failed to create customer: {exc}")
        return jsonify(customer.to_dict()), 201

    @app.patch("/api/customers/<customer_id>")
    def update_customer(customer_id: str):
        try:
            update_request = UpdateCustomerRequest.from_dict(_read_json())
        except ValueError as exc:
            return _message(400, f"Invalid request: {exc}")
        try:
            customer_service.update_customer(update_request)
        except Exception as exc:
            return _message(500, f"Failed to update customer: {exc}")
        return "", 200

    @app.get("/api/restaurant-tables/pending-payment")
    def get_pending_payment_tables():
        try:
            tables = table_service.get_pending_payment_tables()
        except Exception as exc:
            return _message(500, f"Failed to get pending payment tables: {exc}")
        return jsonify([table.to_dict() for table in tables]), 200

    @app.get("/api/restaurant-tables/pending-delivery")
    def get_pending_delivery_tables():
        try:
            tables = table_service.get_pending_delivery_tables()
        except Exception as exc:
            return _message(500, f"Failed to get pending delivery tables: {exc}")
        return jsonify([table.to_dict() for table in tables]), 200

    return app