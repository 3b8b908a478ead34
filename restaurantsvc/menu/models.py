"""Menu and item records, request payloads, and shared payload parsing."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class MenuSection(str, Enum):
    """Course of a menu, used as the key of a menu's items."""

    STARTER = "STARTER"
    MAIN = "MAIN"
    DESSERT = "DESSERT"
    DRINK = "DRINK"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int_list(value: Any) -> bool:
    return isinstance(value, list) and all(_is_int(v) for v in value)


def _is_str_map(value: Any) -> bool:
    return isinstance(value, Mapping) and all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    )


# kind -> (converter that also yields the default, validator, error wording)
_FIELD_KINDS: dict[str, tuple[Callable[..., Any], Callable[[Any], bool], str]] = {
    "int": (int, _is_int, "must be an integer"),
    "number": (float, _is_number, "must be a number"),
    "str": (str, lambda value: isinstance(value, str), "must be a string"),
    "int_list": (list, _is_int_list, "must be a list of integers"),
    "str_map": (dict, _is_str_map, "must map strings to strings"),
}


def _require_mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError("request body must be a JSON object")
    return data


def _field(data: Mapping[str, Any], key: str, kind: str) -> Any:
    """Read ``key`` as ``kind``; a missing or null value gives the zero value."""
    convert, accepts, wording = _FIELD_KINDS[kind]
    value = data.get(key)
    if value is None:
        return convert()
    if not accepts(value):
        raise ValueError(f"field {key!r} {wording}")
    return convert(value)


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


@dataclass(frozen=True)
class Item:
    """A dish or drink that menus are built from."""

    id: int
    name: str
    type: str


@dataclass(frozen=True)
class CreateMenuRequest:
    """Payload to create a menu from four item ids and a price."""

    starter_id: int = 0
    main_id: int = 0
    dessert_id: int = 0
    drink_id: int = 0
    price: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> CreateMenuRequest:
        body = _require_mapping(data)
        return cls(
            starter_id=_field(body, "starter", "int"),
            main_id=_field(body, "main", "int"),
            dessert_id=_field(body, "dessert", "int"),
            drink_id=_field(body, "drink", "int"),
            price=_field(body, "price", "number"),
        )

    @property
    def item_ids(self) -> list[int]:
        return [self.starter_id, self.main_id, self.dessert_id, self.drink_id]


@dataclass(frozen=True)
class Menu:
    """A menu as returned to clients: item names keyed by section."""

    id: int
    items: dict[str, str] = field(default_factory=dict)
    price: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> Menu:
        body = _require_mapping(data)
        return cls(
            id=_field(body, "id", "int"),
            items=_field(body, "items", "str_map"),
            price=_field(body, "price", "number"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "items": dict(self.items), "price": self.price}


@dataclass(frozen=True)
class MenuRecord:
    """A row of the menus table."""

    id: int
    starter_id: int
    main_id: int
    dessert_id: int
    drink_id: int
    price: float
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


@dataclass(frozen=True)
class MenuWithNames:
    """A menu row joined with the names of its items."""

    id: int
    starter_name: str
    main_name: str
    dessert_name: str
    drink_name: str
    price: float

    def to_menu(self) -> Menu:
        names = (self.starter_name, self.main_name, self.dessert_name, self.drink_name)
        items = {section.value: name for section, name in zip(MenuSection, names)}
        return Menu(id=self.id, items=items, price=self.price)