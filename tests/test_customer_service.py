import pytest

from restaurantsvc.customer.clients import ServiceClientError
from restaurantsvc.customer.models import (
    CreateCustomerRequest,
    Customer,
    CustomerStatus,
    Menu,
    RestaurantOrder,
    RestaurantTable,
    UpdateCustomerRequest,
)
from restaurantsvc.customer.service import (
    CustomerService,
    InvalidStatusTransition,
    RestaurantTableService,
)
from restaurantsvc.customer.store import CustomerNotFoundError


class FakeCustomers:
    def __init__(self, existing=()):
        self.by_id = {c.id: c for c in existing}
        self.created = []
        self.updated = []

    def create_customer(self, request):
        self.created.append(request)
        return Customer(100, "WAITING", request.restaurant_table_id, request.order_id)

    def update_customer(self, request):
        self.updated.append(request)

    def get_customer_by_id(self, customer_id):
        try:
            return self.by_id[customer_id]
        except KeyError:
            raise CustomerNotFoundError(str(customer_id)) from None


class FakeMenuClient:
    def __init__(self, menus=None, error=None):
        self.menus = menus or []
        self.error = error
        self.asked = []

    def get_menus(self, ids):
        self.asked.append(list(ids))
        if self.error:
            raise self.error
        return self.menus


class FakeOrderClient:
    def __init__(self, order_id=55, error=None):
        self.order_id = order_id
        self.error = error
        self.requests = []

    def create_order(self, request):
        self.requests.append(request)
        if self.error:
            raise self.error
        return RestaurantOrder(self.order_id, request.menu_ids, request.total, "PENDING")


def test_create_customer_opens_order_with_menu_total():
    menus = FakeMenuClient([Menu(1, {}, 10.0), Menu(2, {}, 5.5)])
    orders = FakeOrderClient(order_id=55)
    customers = FakeCustomers()
    service = CustomerService(customers, menus, orders)

    customer = service.create_customer(CreateCustomerRequest([1, 2], restaurant_table_id=8))

    assert menus.asked == [[1, 2]]
    assert orders.requests[0].menu_ids == [1, 2]
    assert orders.requests[0].total == 15.5
    assert customers.created[0].order_id == 55
    assert customer.order_id == 55
    assert customer.restaurant_table_id == 8


def test_create_customer_menu_failure():
    customers = FakeCustomers()
    service = CustomerService(
        customers, FakeMenuClient(error=ServiceClientError("down")), FakeOrderClient()
    )
    with pytest.raises(ServiceClientError, match="failed to fetch menus"):
        service.create_customer(CreateCustomerRequest([1], 1))
    assert customers.created == []


def test_create_customer_order_failure():
    customers = FakeCustomers()
    service = CustomerService(
        customers,
        FakeMenuClient([Menu(1, {}, 2.0)]),
        FakeOrderClient(error=ServiceClientError("down")),
    )
    with pytest.raises(ServiceClientError, match="failed to create order"):
        service.create_customer(CreateCustomerRequest([1], 1))
    assert customers.created == []


@pytest.mark.parametrize(
    "old, new",
    [
        (CustomerStatus.WAITING, CustomerStatus.EATING),
        (CustomerStatus.EATING, CustomerStatus.NEEDS_PAYMENT),
        (CustomerStatus.NEEDS_PAYMENT, CustomerStatus.PAID),
    ],
)
def test_update_allows_next_status(old, new):
    customers = FakeCustomers([Customer(1, old.value, 2, 3)])
    service = CustomerService(customers, FakeMenuClient(), FakeOrderClient())
    request = UpdateCustomerRequest(1, new.value)
    service.update_customer(request)
    assert customers.updated == [request]


@pytest.mark.parametrize(
    "old, new",
    [
        (CustomerStatus.WAITING, CustomerStatus.NEEDS_PAYMENT),
        (CustomerStatus.EATING, CustomerStatus.WAITING),
        (CustomerStatus.PAID, CustomerStatus.PAID),
        (CustomerStatus.EATING, "UNKNOWN"),
    ],
)
def test_update_rejects_other_transitions(old, new):
    customers = FakeCustomers([Customer(1, old.value, 2, 3)])
    service = CustomerService(customers, FakeMenuClient(), FakeOrderClient())
    with pytest.raises(InvalidStatusTransition, match="invalid status transition"):
        service.update_customer(UpdateCustomerRequest(1, getattr(new, "value", new)))
    assert customers.updated == []


def test_update_missing_customer():
    service = CustomerService(FakeCustomers(), FakeMenuClient(), FakeOrderClient())
    with pytest.raises(CustomerNotFoundError):
        service.update_customer(UpdateCustomerRequest(9, "EATING"))


class FakeTables:
    def get_pending_payment_tables(self):
        return [RestaurantTable(1, "UNAVAILABLE"), RestaurantTable(2, "UNAVAILABLE")]

    def get_pending_delivery_tables(self):
        return [RestaurantTable(2, "UNAVAILABLE")]


def test_table_service_passes_through():
    service = RestaurantTableService(FakeTables())
    assert [t.id for t in service.get_pending_payment_tables()] == [1, 2]
    assert service.get_pending_delivery_tables() == [RestaurantTable(2, "UNAVAILABLE")]