"""Restaurant order records and request payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from restaurantsvc.menu.models import _field, _plain, _require_mapping


class OrderStatus(str, Enum):
    """Lifecycle state of a restaurant order."""

    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class CreateRestaurantOrderRequest:
    """Payload to create an order from menu ids and a total."""

    menu_ids: list[int] = field(default_factory=list)
    total: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> CreateRestaurantOrderRequest:
        body = _require_mapping(data)
        return cls(
            menu_ids=_field(body, "menu_ids", "int_list"),
            total=_field(body, "total", "number"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"menu_ids": list(self.menu_ids), "total": self.total}


@dataclass(frozen=True)
class RestaurantOrder:
    """An order as stored and returned to clients."""

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
            total=_field(body, "total", "number"),
            status=_field(body, "status", "str"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "menu_ids": list(self.menu_ids),
            "total": self.total,
            "status": str(_plain(self.status)),
        }


@dataclass(frozen=True)
class UpdateRestaurantOrderRequest:
    """Payload to change the status of an order."""

    id: int = 0
    status: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> UpdateRestaurantOrderRequest:
        body = _require_mapping(data)
        return cls(id=_field(body, "id", "int"), status=_field(body, "status", "str"))