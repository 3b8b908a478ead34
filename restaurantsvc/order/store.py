"""SQL storage for restaurant orders."""

from __future__ import annotations

from sqlalchemy import ARRAY, JSON, Column, Float, Integer, MetaData, String, Table, select
from sqlalchemy.engine import Engine

from restaurantsvc.menu.store import _insert_returning, _record_columns, _set_status
from restaurantsvc.order.models import (
    CreateRestaurantOrderRequest,
    OrderStatus,
    RestaurantOrder,
    UpdateRestaurantOrderRequest,
)

metadata = MetaData()

_MENU_IDS_TYPE = JSON().with_variant(ARRAY(Integer), "postgresql")

restaurant_orders_table = Table(
    "restaurant_orders",
    metadata,
    *_record_columns(
        Column("menu_ids", _MENU_IDS_TYPE, nullable=False),
        Column("total", Float, nullable=False),
        Column("status", String, nullable=False, server_default=OrderStatus.PENDING.value),
    ),
)


class OrderNotFoundError(LookupError):
    """Raised when no active order has the requested id."""


class RestaurantOrderStore:
    """Reads and writes restaurant orders through a SQLAlchemy engine."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def create_restaurant_order(self, request: CreateRestaurantOrderRequest) -> RestaurantOrder:
        table = restaurant_orders_table
        menu_ids = list(request.menu_ids)
        order_id, status = _insert_returning(
            self.engine, table, {"menu_ids": menu_ids, "total": request.total}, table.c.status
        )
        return RestaurantOrder(id=order_id, menu_ids=menu_ids, total=request.total, status=status)

    def update_restaurant_order(self, request: UpdateRestaurantOrderRequest) -> None:
        _set_status(self.engine, restaurant_orders_table, request.id, request.status)

    def get_restaurant_order_by_id(self, order_id: int) -> RestaurantOrder:
        table = restaurant_orders_table
        query = select(table.c.id, table.c.menu_ids, table.c.total, table.c.status).where(
            table.c.id == order_id, table.c.deleted_at.is_(None)
        )
        with self.engine.connect() as connection:
            row = connection.execute(query).first()
        if row is None:
            raise OrderNotFoundError(f"restaurant order {order_id} not found")
        return RestaurantOrder(
            id=row.id, menu_ids=list(row.menu_ids or []), total=row.total, status=row.status
        )