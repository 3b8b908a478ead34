"""SQL storage for menus and the items they are built from."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy import (
    Column,
    DateTime,
    Float,
    Integer,
    MetaData,
    Select,
    String,
    Table,
    func,
    insert,
    select,
    update,
)
from sqlalchemy.engine import Engine

from restaurantsvc.menu.models import (
    CreateMenuRequest,
    Item,
    Menu,
    MenuRecord,
    MenuWithNames,
)


def _record_columns(*columns: Column) -> tuple[Column, ...]:
    """The id and bookkeeping columns every table has, followed by ``columns``."""
    return (
        Column("id", Integer, primary_key=True),
        Column("created_at", DateTime, server_default=func.now()),
        Column("updated_at", DateTime, server_default=func.now()),
        Column("deleted_at", DateTime, nullable=True),
        *columns,
    )


def _insert_returning(
    engine: Engine, table: Table, values: Mapping[str, Any], column: Column
) -> tuple[int, Any]:
    """Insert a row and return its id with the stored value of ``column``."""
    with engine.begin() as connection:
        row_id = connection.execute(insert(table).values(**values)).inserted_primary_key[0]
        value = connection.execute(select(column).where(table.c.id == row_id)).scalar_one()
    return row_id, value


def _set_status(engine: Engine, table: Table, row_id: int, status: Any) -> None:
    with engine.begin() as connection:
        connection.execute(
            update(table)
            .where(table.c.id == row_id)
            .values(status=getattr(status, "value", status))
        )


metadata = MetaData()

items_table = Table(
    "items",
    metadata,
    *_record_columns(
        Column("name", String, nullable=False),
        Column("type", String, nullable=False),
    ),
)

menus_table = Table(
    "menus",
    metadata,
    *_record_columns(
        Column("starter_id", Integer),
        Column("main_id", Integer),
        Column("dessert_id", Integer),
        Column("drink_id", Integer),
        Column("price", Float, nullable=False),
    ),
)


class MenuStoreError(Exception):
    """Raised when a menu operation cannot be carried out."""


class MenuStore:
    """Reads and writes menus and items through a SQLAlchemy engine."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def get_items_by_ids(self, ids: Iterable[int]) -> list[Item]:
        wanted = list(ids)
        if not wanted:
            return []
        query = (
            select(items_table.c.id, items_table.c.name, items_table.c.type)
            .where(items_table.c.id.in_(wanted))
            .order_by(items_table.c.id)
        )
        with self.engine.connect() as connection:
            return [Item(*row) for row in connection.execute(query)]

    def create_menu(self, request: CreateMenuRequest) -> MenuRecord:
        values = {
            "starter_id": request.starter_id,
            "main_id": request.main_id,
            "dessert_id": request.dessert_id,
            "drink_id": request.drink_id,
            "price": request.price,
        }
        with self.engine.begin() as connection:
            result = connection.execute(insert(menus_table).values(**values))
            menu_id = result.inserted_primary_key[0]
        return MenuRecord(id=menu_id, **values)

    def deactivate_menu(self, menu_id: int) -> None:
        statement = (
            update(menus_table)
            .where(menus_table.c.id == menu_id, menus_table.c.deleted_at.is_(None))
            .values(deleted_at=func.now())
        )
        with self.engine.begin() as connection:
            result = connection.execute(statement)
        if result.rowcount == 0:
            raise MenuStoreError(
                f"0 rows affected, menu with id {menu_id} may not exist or is already deleted"
            )

    def get_all_active_menus(self) -> list[Menu]:
        return self._fetch_menus(self._menus_with_names())

    def get_menus_by_ids(self, ids: Iterable[int]) -> list[Menu]:
        wanted = list(ids)
        if not wanted:
            raise MenuStoreError("no menu IDs provided")
        query = self._menus_with_names()
        return self._fetch_menus(query.where(query.selected_columns.id.in_(wanted)))

    @staticmethod
    def _menus_with_names() -> Select:
        menu = menus_table.alias("m")
        sections = ("starter", "main", "dessert", "drink")
        aliases = {name: items_table.alias(f"{name}_item") for name in sections}
        joined = menu
        for name, item in aliases.items():
            joined = joined.outerjoin(item, menu.c[f"{name}_id"] == item.c.id)
        return (
            select(
                menu.c.id,
                *(aliases[name].c.name.label(f"{name}_name") for name in sections),
                menu.c.price,
            )
            .select_from(joined)
            .where(menu.c.deleted_at.is_(None))
            .order_by(menu.c.id)
        )

    def _fetch_menus(self, query: Select) -> list[Menu]:
        with self.engine.connect() as connection:
            rows = connection.execute(query).all()
        return [
            MenuWithNames(row.id, *(name or "" for name in row[1:5]), row.price).to_menu()
            for row in rows
        ]