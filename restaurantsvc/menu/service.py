"""Business rules for menus."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from restaurantsvc.menu.models import CreateMenuRequest, Menu, MenuWithNames

if TYPE_CHECKING:
    from restaurantsvc.menu.store import MenuStore

_ITEMS_PER_MENU = 4


class MenuServiceError(Exception):
    """Raised when a menu request breaks a business rule."""


class MenuService:
    """Creates, lists and deactivates menus."""

    def __init__(self, menus: MenuStore, items: MenuStore) -> None:
        self.menus = menus
        self.items = items

    def create_menu(self, request: CreateMenuRequest) -> Menu:
        items = self.items.get_items_by_ids(request.item_ids)
        if len(items) != _ITEMS_PER_MENU:
            raise MenuServiceError(
                f"not all items found: expected {_ITEMS_PER_MENU}, got {len(items)}"
            )
        names = {item.id: item.name for item in items}
        record = self.menus.create_menu(request)
        item_ids = (record.starter_id, record.main_id, record.dessert_id, record.drink_id)
        return MenuWithNames(
            record.id, *(names.get(item_id, "") for item_id in item_ids), record.price
        ).to_menu()

    def deactivate_menu(self, menu_id: int) -> None:
        self.menus.deactivate_menu(menu_id)

    def get_all_active_menus(self) -> list[Menu]:
        return self.menus.get_all_active_menus()

    def get_menus_by_ids(self, ids: Iterable[int]) -> list[Menu]:
        menus = self.menus.get_menus_by_ids(list(ids))
        if not menus:
            raise MenuServiceError("no menus found for the given IDs")
        return menus