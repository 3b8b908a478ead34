import pytest
from sqlalchemy import create_engine

from restaurantsvc.order.models import (
    CreateRestaurantOrderRequest,
    OrderStatus,
    UpdateRestaurantOrderRequest,
)
from restaurantsvc.order.service import RestaurantOrderService
from restaurantsvc.order.store import OrderNotFoundError, RestaurantOrderStore, metadata


@pytest.fixture
def service(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'orders.sqlite'}")
    metadata.create_all(engine)
    yield RestaurantOrderService(RestaurantOrderStore(engine))
    engine.dispose()


def test_create_then_get(service):
    created = service.create_restaurant_order(CreateRestaurantOrderRequest([5, 6], 40.0))
    assert service.get_restaurant_order_by_id(created.id) == created
    assert created.status == OrderStatus.PENDING.value


def test_update_status(service):
    created = service.create_restaurant_order(CreateRestaurantOrderRequest([1], 2.0))
    service.update_restaurant_order(
        UpdateRestaurantOrderRequest(created.id, OrderStatus.CANCELLED.value)
    )
    assert service.get_restaurant_order_by_id(created.id).status == "CANCELLED"


def test_missing_order_error_propagates(service):
    with pytest.raises(OrderNotFoundError):
        service.get_restaurant_order_by_id(12)