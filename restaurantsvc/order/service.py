"""Business operations on restaurant orders."""

from __future__ import annotations

from typing import Protocol

from restaurantsvc.order.models import (
    CreateRestaurantOrderRequest,
    RestaurantOrder,
    UpdateRestaurantOrderRequest,
)


class RestaurantOrderRepository(Protocol):
    def create_restaurant_order(self, request: CreateRestaurantOrderRequest) -> RestaurantOrder: ...

    def update_restaurant_order(self, request: UpdateRestaurantOrderRequest) -> None: ...

    def get_restaurant_order_by_id(self, order_id: int) -> RestaurantOrder: ...


class RestaurantOrderService:
    """Creates, updates and looks up restaurant orders."""

    def __init__(self, orders: RestaurantOrderRepository) -> None:
        self.orders = orders

    def create_restaurant_order(self, request: CreateRestaurantOrderRequest) -> RestaurantOrder:
        return self.orders.create_restaurant_order(request)

    def update_restaurant_order(self, request: UpdateRestaurantOrderRequest) -> None:
        self.orders.update_restaurant_order(request)

    def get_restaurant_order_by_id(self, order_id: int) -> RestaurantOrder:
        return self.orders.get_restaurant_order_by_id(order_id)