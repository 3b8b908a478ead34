"""Customer, table, and remote menu/order payloads used by the customer side."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from restaurantsvc.menu.models import _field, _plain, _require_mapping


class CustomerStatus(str, Enum):
    """Stage of a customer's visit, in the order they must pass through."""

    WAITING = "WAITING"
    EATING = "EATING"
    NEEDS_PAYMENT = "NEEDS_PAYMENT"
    PAID = "PAID"


class TableStatus(str, Enum):
    """Whether a restaurant table can take new customers."""

    AVAILABLE = "AVAILABLE"
    UNAVAILABLE = "UNAVAILABLE"


def _number(body: dict[str, Any], key: str) -> float:
    value = body.get(key, 0.0)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {key!r} must be a number")
    return float(value)


def _string_map(body: dict[str, Any], key: str) -> dict[str, str]:
    value = body.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"field {key!r} must be an object")
    result: dict[str, str] = {}
    for name, text in value.items():
        if not isinstance(name, str) or not isinstance(text, str):
            raise ValueError(f"field {key!r} must map strings to strings")
        result[name] = text
    return result


@dataclass(frozen=True)
class CreateCustomerRequest:
    """Payload to seat a customer at a table with the menus they ordered."""

    menu_ids: list[int] = field(default_factory=list)
    restaurant_table_id: int = 0
    order_id: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> CreateCustomerRequest:
        body = _require_mapping(data)
        return cls(
            menu_ids=_field(body, "menu_ids", "int_list"),
            restaurant_table_id=_field(body, "restaurant_table_id", "int"),
            order_id=_field(body, "order_id", "int"),
        )


@dataclass(frozen=True)
class Customer:
    """A customer as stored and returned to clients."""

    id: int
    status: str
    restaurant_table_id: int
    order_id: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "status": _plain(self.status),
            "restaurant_table_id": self.restaurant_table_id,
            "order_id": self.order_id,
        }


@dataclass(frozen=True)
class UpdateCustomerRequest:
    """Payload to move a customer to a new status."""

    id: int = 0
    status: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> UpdateCustomerRequest:
        body = _require_mapping(data)
        return cls(id=_field(body, "id", "int"), status=_field(body, "status", "str"))


@dataclass(frozen=True)
class Menu:
    """A menu as reported by the menu service."""

    id: int
    items: dict[str, str]
    price: float

    @classmethod
    def from_dict(cls, data: Any) -> Menu:
        body = _require_mapping(data)
        return cls(
            id=_field(body, "id", "int"),
            items=_string_map(body, "items"),
            price=_number(body, "price"),
        )


@dataclass(frozen=True)
class CreateRestaurantOrderRequest:
    """Payload sent to the order service to open an order."""

    menu_ids: list[int] = field(default_factory=list)
    total: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {"menu_ids": list(self.menu_ids), "total": self.total}


@dataclass(frozen=True)
class RestaurantOrder:
    """An order as reported by the order service."""

    id: int
    menu_ids: list[int]
    total: float
    status: str

    @classmethod
    def from_dict(cls, data: Any) -> RestaurantOrder:
        body = _require_mapping(data)
        return cls(
            id=_field(body, "id", "int"),
            menu_ids=_field(body, "menu_ids", "int_list"),
            total=_number(body, "total"),
            status=_field(body, "status", "str"),
        )


@dataclass(frozen=True)
class RestaurantTable:
    """A restaurant table and whether it is free."""

    id: int
    status: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "status": _plain(self.status)}