"""HTTP clients for the menu and order services."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import requests

from restaurantsvc.customer.models import (
    CreateRestaurantOrderRequest,
    Menu,
    RestaurantOrder,
)

_HEADERS = {"Accept": "application/json"}
_TIMEOUT_SECONDS = 10.0


class ServiceClientError(Exception):
    """Raised when a remote service cannot be reached or answers with an error."""


class _ServiceClient:
    service_name = "service"

    def __init__(self, base_url: str, session: requests.Session | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = self.session.request(
                method,
                self.base_url + path,
                headers=_HEADERS,
                timeout=_TIMEOUT_SECONDS,
                **kwargs,
            )
        except requests.RequestException as exc:
            raise ServiceClientError(f"error calling {self.service_name}: {exc}") from exc
        if response.status_code >= 400:
            raise ServiceClientError(
                f"{self.service_name} returned status {response.status_code}"
            )
        try:
            return response.json()
        except ValueError as exc:
            raise ServiceClientError(
                f"{self.service_name} returned an invalid body: {exc}"
            ) from exc


class MenuServiceClient(_ServiceClient):
    """Fetches menus from the menu service."""

    service_name = "menu service"

    def __init__(self, base_url: str, session: requests.Session | None = None) -> None:
        super().__init__(base_url, session)

    def get_menus(self, ids: Iterable[int]) -> list[Menu]:
        id_param = ",".join(str(menu_id) for menu_id in ids)
        body = self._request("GET", "/menus", params={"ids": id_param})
        if not isinstance(body, list):
            raise ServiceClientError("menu service returned an invalid body: expected a list")
        try:
            return [Menu.from_dict(entry) for entry in body]
        except ValueError as exc:
            raise ServiceClientError(f"menu service returned an invalid body: {exc}") from exc


class OrderServiceClient(_ServiceClient):
    """Opens orders on the order service."""

    service_name = "order service"

    def __init__(self, base_url: str, session: requests.Session | None = None) -> None:
        super().__init__(base_url, session)

    def create_order(self, request: CreateRestaurantOrderRequest) -> RestaurantOrder:
        body = self._request("POST", "/orders", json=request.to_dict())
        try:
            return RestaurantOrder.from_dict(body)
        except ValueError as exc:
            raise ServiceClientError(f"order service returned an invalid body: {exc}") from exc