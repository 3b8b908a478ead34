"""SQL storage for customers and the tables they occupy."""

from __future__ import annotations

from sqlalchemy import Column, Integer, MetaData, String, Table, func, select
from sqlalchemy.engine import Engine

from restaurantsvc.customer.models import (
    CreateCustomerRequest,
    Customer,
    CustomerStatus,
    RestaurantTable,
    TableStatus,
    UpdateCustomerRequest,
)
from restaurantsvc.menu.store import _insert_returning, _record_columns, _set_status

metadata = MetaData()

customers_table = Table(
    "customers",
    metadata,
    *_record_columns(
        Column("status", String, nullable=False, server_default=CustomerStatus.WAITING.value),
        Column("restaurant_table_id", Integer, nullable=False),
        Column("order_id", Integer, nullable=False),
    ),
)

_SEATED = (CustomerStatus.WAITING.value, CustomerStatus.EATING.value)
_UNPAID = (*_SEATED, CustomerStatus.NEEDS_PAYMENT.value)


class CustomerNotFoundError(LookupError):
    """Raised when no matching active customer exists."""


class CustomerStore:
    """Reads and writes customers through a SQLAlchemy engine."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def create_customer(self, request: CreateCustomerRequest) -> Customer:
        values = {
            "restaurant_table_id": request.restaurant_table_id,
            "order_id": request.order_id,
        }
        customer_id, status = _insert_returning(
            self.engine, customers_table, values, customers_table.c.status
        )
        return Customer(id=customer_id, status=status, **values)

    def update_customer(self, request: UpdateCustomerRequest) -> None:
        _set_status(self.engine, customers_table, request.id, request.status)

    def get_customer_by_restaurant_table_id(self, restaurant_table_id: int) -> Customer:
        table = customers_table
        return self._fetch_one(
            table.c.restaurant_table_id == restaurant_table_id,
            table.c.status.in_(_SEATED),
            missing=f"no seated customer at restaurant table {restaurant_table_id}",
        )

    def get_customer_by_id(self, customer_id: int) -> Customer:
        return self._fetch_one(
            customers_table.c.id == customer_id,
            missing=f"customer {customer_id} not found",
        )

    def get_pending_payment_tables(self) -> list[RestaurantTable]:
        return self._tables_with_status(_UNPAID)

    def get_pending_delivery_tables(self) -> list[RestaurantTable]:
        return self._tables_with_status((CustomerStatus.WAITING.value,))

    def _fetch_one(self, *conditions, missing: str) -> Customer:
        table = customers_table
        query = (
            select(table.c.id, table.c.status, table.c.restaurant_table_id, table.c.order_id)
            .where(table.c.deleted_at.is_(None), *conditions)
            .order_by(table.c.id)
        )
        with self.engine.connect() as connection:
            row = connection.execute(query).first()
        if row is None:
            raise CustomerNotFoundError(missing)
        return Customer(**row._mapping)

    def _tables_with_status(self, statuses: tuple[str, ...]) -> list[RestaurantTable]:
        table = customers_table
        query = (
            select(table.c.restaurant_table_id)
            .where(table.c.status.in_(statuses), table.c.deleted_at.is_(None))
            .group_by(table.c.restaurant_table_id)
            .order_by(func.min(table.c.order_id), table.c.restaurant_table_id)
        )
        with self.engine.connect() as connection:
            table_ids = connection.execute(query).scalars().all()
        return [
            RestaurantTable(id=table_id, status=TableStatus.UNAVAILABLE.value)
            for table_id in table_ids
        ]