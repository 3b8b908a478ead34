import pytest

from restaurantsvc.order.models import (
    CreateRestaurantOrderRequest,
    OrderStatus,
    RestaurantOrder,
    UpdateRestaurantOrderRequest,
)


@pytest.mark.parametrize("value", ["PENDING", "COMPLETED", "CANCELLED"])
def test_status_values(value):
    order = RestaurantOrder(id=1, menu_ids=[], total=0.0, status=OrderStatus(value))
    assert order.to_dict()["status"] == value


def test_create_request_from_dict():
    request = CreateRestaurantOrderRequest.from_dict({"menu_ids": [3, 1], "total": 9.5})
    assert request.menu_ids == [3, 1]
    assert request.total == 9.5


def test_create_request_null_menu_ids_is_empty():
    request = CreateRestaurantOrderRequest.from_dict({"menu_ids": None})
    assert request.menu_ids == []
    assert request.total == 0.0


@pytest.mark.parametrize(
    "body",
    [
        {"menu_ids": "1,2"},
        {"menu_ids": [1, "2"]},
        {"menu_ids": [True]},
        {"total": "ten"},
        "not an object",
    ],
)
def test_create_request_rejects_bad_bodies(body):
    with pytest.raises(ValueError):
        CreateRestaurantOrderRequest.from_dict(body)


def test_order_to_dict():
    order = RestaurantOrder(id=4, menu_ids=[1, 2], total=15.0, status="PENDING")
    assert order.to_dict() == {
        "id": 4,
        "menu_ids": [1, 2],
        "total": 15.0,
        "status": "PENDING",
    }


def test_order_to_dict_accepts_enum_status():
    order = RestaurantOrder(id=1, menu_ids=[], total=0.0, status=OrderStatus.COMPLETED)
    assert order.to_dict()["status"] == "COMPLETED"


def test_update_request_from_dict():
    request = UpdateRestaurantOrderRequest.from_dict({"id": 8, "status": "CANCELLED"})
    assert request == UpdateRestaurantOrderRequest(8, "CANCELLED")


def test_update_request_rejects_non_string_status():
    with pytest.raises(ValueError):
        UpdateRestaurantOrderRequest.from_dict({"id": 1, "status": 2})