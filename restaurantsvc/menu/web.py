"""HTTP interface of the menu service."""

from __future__ import annotations

import json
import re
from typing import Any

from flask import Flask, Response, jsonify, request

from restaurantsvc.menu.models import CreateMenuRequest
from restaurantsvc.menu.service import MenuService

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


def _error(status: int, message: str) -> tuple[Response, int]:
    return jsonify({"error": message}), status


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


def create_app(service: MenuService) -> Flask:
    """Build the menu service application around ``service``."""
    app = Flask(__name__)
    _install_common(app)

    @app.post("/api/menus")
    def create_menu():
        try:
            menu_request = CreateMenuRequest.from_dict(_read_json())
        except ValueError as exc:
            return _error(400, f"Invalid request: {exc}")
        app.logger.info("create menu request: %r", menu_request)
        try:
            menu = service.create_menu(menu_request)
        except Exception as exc:
            return _error(500, f"Failed to create menu: {exc}")
        return jsonify(menu.to_dict()), 201

    @app.patch("/api/menus/<menu_id>/deactivate")
    def deactivate_menu(menu_id: str):
        try:
            parsed = _parse_int(menu_id)
        except ValueError as exc:
            return _error(400, f"Invalid menu ID: {exc}")
        try:
            service.deactivate_menu(parsed)
        except Exception as exc:
            return _error(500, f"Failed to deactivate menu: {exc}")
        return jsonify({"status": "success"}), 200

    @app.get("/api/menus")
    def get_menus():
        ids_param = request.args.get("ids", "")
        if ids_param:
            return _menus_by_ids(ids_param)
        try:
            menus = service.get_all_active_menus()
        except Exception as exc:
            return _error(500, f"Failed to fetch active menus: {exc}")
        return jsonify([menu.to_dict() for menu in menus]), 200

    def _menus_by_ids(ids_param: str):
        ids = []
        for part in ids_param.split(","):
            try:
                ids.append(_parse_int(part.strip()))
            except ValueError:
                return _error(400, f"Invalid ID format: {part}")
        try:
            menus = service.get_menus_by_ids(ids)
        except Exception as exc:
            return _error(500, f"Failed to fetch menus: {exc}")
        return jsonify([menu.to_dict() for menu in menus]), 200

    return app