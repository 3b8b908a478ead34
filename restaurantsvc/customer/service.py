"""Business rules for customers and restaurant tables."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from typing import Protocol

from restaurantsvc.customer.clients import ServiceClientError
from restaurantsvc.customer.models import (
    CreateCustomerRequest,
    CreateRestaurantOrderRequest,
    Customer,
    CustomerStatus,
    Menu,
    RestaurantOrder,
    RestaurantTable,
    UpdateCustomerRequest,
)

_STATUS_RANK = {status.value: rank for rank, status in enumerate(CustomerStatus, start=1)}


class CustomerRepository(Protocol):
    def create_customer(self, request: CreateCustomerRequest) -> Customer: ...

    def update_customer(self, request: UpdateCustomerRequest) -> None: ...

    def get_customer_by_id(self, customer_id: int) -> Customer: ...


class RestaurantTableRepository(Protocol):
    def get_pending_payment_tables(self) -> list[RestaurantTable]: ...

    def get_pending_delivery_tables(self) -> list[RestaurantTable]: ...


class MenuClient(Protocol):
    def get_menus(self, ids: Iterable[int]) -> list[Menu]: ...


class OrderClient(Protocol):
    def create_order(self, request: CreateRestaurantOrderRequest) -> RestaurantOrder: ...


class InvalidStatusTransition(ValueError):
    """Raised when a customer would skip or go back a status."""


def _plain(status) -> str:
    return str(getattr(status, "value", status))


class CustomerService:
    """Seats customers, opens their orders and moves them through their visit."""

    def __init__(
        self,
        customers: CustomerRepository,
        menu_client: MenuClient,
        order_client: OrderClient,
    ) -> None:
        self.customers = customers
        self.menu_client = menu_client
        self.order_client = order_client

    def create_customer(self, request: CreateCustomerRequest) -> Customer:
        try:
            menus = self.menu_client.get_menus(request.menu_ids)
        except ServiceClientError as exc:
            raise ServiceClientError(f"failed to fetch menus: {exc}") from exc

        order_request = CreateRestaurantOrderRequest(
            menu_ids=[menu.id for menu in menus],
            total=sum(menu.price for menu in menus),
        )
        try:
            order = self.order_client.create_order(order_request)
        except ServiceClientError as exc:
            raise ServiceClientError(f"failed to create order: {exc}") from exc

        return self.customers.create_customer(dataclasses.replace(request, order_id=order.id))

    def update_customer(self, request: UpdateCustomerRequest) -> None:
        current = self.customers.get_customer_by_id(request.id)
        old_status = _plain(current.status)
        new_status = _plain(request.status)
        if _STATUS_RANK.get(new_status, 0) != _STATUS_RANK.get(old_status, 0) + 1:
            raise InvalidStatusTransition(
                f"invalid status transition from {old_status} to {new_status}"
            )
        self.customers.update_customer(request)


class RestaurantTableService:
    """Reports which tables still have business in progress."""

    def __init__(self, tables: RestaurantTableRepository) -> None:
        self.tables = tables

    def get_pending_payment_tables(self) -> list[RestaurantTable]:
        return self.tables.get_pending_payment_tables()

    def get_pending_delivery_tables(self) -> list[RestaurantTable]:
        return self.tables.get_pending_delivery_tables()