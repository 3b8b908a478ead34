import pytest

from restaurantsvc.menu.models import (
    CreateMenuRequest,
    Menu,
    MenuRecord,
    MenuSection,
    MenuWithNames,
)


def test_section_values_match_wire_keys():
    menu = MenuWithNames(1, "Soup", "Steak", "Cake", "Wine", 5.0).to_menu()
    assert [s.value for s in MenuSection] == ["STARTER", "MAIN", "DESSERT", "DRINK"]
    assert set(menu.items) == {s.value for s in MenuSection}


def test_create_request_reads_wire_field_names():
    request = CreateMenuRequest.from_dict(
        {"starter": 1, "main": 2, "dessert": 3, "drink": 4, "price": 12.5}
    )
    assert request == CreateMenuRequest(1, 2, 3, 4, 12.5)
    assert request.item_ids == [1, 2, 3, 4]


def test_create_request_missing_fields_default_to_zero():
    request = CreateMenuRequest.from_dict({"main": 9})
    assert request.item_ids == [0, 9, 0, 0]
    assert request.price == 0.0


def test_create_request_integer_price_becomes_float():
    request = CreateMenuRequest.from_dict({"price": 10})
    assert request.price == 10.0
    assert isinstance(request.price, float)


@pytest.mark.parametrize(
    "body",
    [
        {"starter": "one"},
        {"main": 2.5},
        {"drink": True},
        {"price": "cheap"},
        [1, 2, 3],
    ],
)
def test_create_request_rejects_bad_types(body):
    with pytest.raises(ValueError):
        CreateMenuRequest.from_dict(body)


def test_menu_to_dict_round_trips_fields():
    menu = Menu(id=5, items={"STARTER": "Soup"}, price=7.25)
    assert menu.to_dict() == {"id": 5, "items": {"STARTER": "Soup"}, "price": 7.25}


def test_menu_to_dict_copies_items():
    menu = Menu(id=1, items={"MAIN": "Fish"}, price=1.0)
    data = menu.to_dict()
    data["items"]["MAIN"] = "Changed"
    assert menu.items["MAIN"] == "Fish"


def test_menu_with_names_to_menu_keys_by_section():
    row = MenuWithNames(3, "Soup", "Steak", "Cake", "Wine", 20.0)
    menu = row.to_menu()
    assert menu.id == 3
    assert menu.price == 20.0
    assert menu.items == {
        "STARTER": "Soup",
        "MAIN": "Steak",
        "DESSERT": "Cake",
        "DRINK": "Wine",
    }


def test_menu_record_timestamps_default_empty():
    record = MenuRecord(1, 2, 3, 4, 5, 6.0)
    assert (record.created_at, record.updated_at, record.deleted_at) == (None, None, None)