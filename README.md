# restaurantsvc

Three small HTTP services that together run the floor of a restaurant:

- **menu** – items (starters, mains, desserts, drinks) and the fixed-price
  menus built from them;
- **order** – restaurant orders holding a list of menu ids, a total and a status;
- **customer** – the party sitting at a table, its order, and its progress from
  waiting to paid.

Each service is a Flask application built by a `create_app` function and
backed by a store on top of a SQLAlchemy engine. The packages are
`restaurantsvc.menu`, `restaurantsvc.order` and `restaurantsvc.customer`, each
with `models`, `store`, `service` and `web` modules.

## Installing

```
pip install .
pip install ".[test]"   # adds pytest and responses for the test suite
```

SQLite works out of the box. For PostgreSQL, install a database driver such
as `psycopg2` yourself; a `postgres://` DSN is accepted and treated as
`postgresql://`.

## Database connections and tables

`restaurantsvc.db.connect(dsn, max_attempts=10, delay=3.0)` creates an engine
and runs `SELECT 1` on it, waiting `delay` seconds after each failed attempt.
When all `max_attempts` fail it raises `DatabaseConnectionError`; a
`max_attempts` below 1 raises `ValueError`. Non-SQLite engines get a pool of
25 connections, recycled after two hours, with pre-ping.

Each store module has a `metadata` object describing its tables (`items` and
`menus`; `restaurant_orders`; `customers`). Create them with, for example:

```python
from restaurantsvc.menu import store as menu_store

menu_store.metadata.create_all(engine)
```

## Menu service

```python
from restaurantsvc.db import connect
from restaurantsvc.menu.store import MenuStore, metadata
from restaurantsvc.menu.service import MenuService
from restaurantsvc.menu.web import create_app

engine = connect("sqlite:///menus.db")
metadata.create_all(engine)
store = MenuStore(engine)
app = create_app(MenuService(store, store))
app.run(port=8081)
```

| Method | Path                          | Purpose                                        |
|--------|-------------------------------|------------------------------------------------|
| GET    | `/ping`                       | answers `pong`                                 |
| POST   | `/api/menus`                  | create a menu from `starter`, `main`, `dessert`, `drink` item ids and a `price` |
| PATCH  | `/api/menus/<id>/deactivate`  | soft-delete a menu; answers `{"status": "success"}` |
| GET    | `/api/menus`                  | all active menus, or only `?ids=1,2,3`         |

`MenuService.create_menu` only creates a menu when all four items exist,
otherwise it raises `MenuServiceError`. `MenuService.get_menus_by_ids` raises
`MenuServiceError` when none of the ids match an active menu, and
`MenuStore.get_menus_by_ids` raises `MenuStoreError` for an empty id list.
Deactivating a menu that does not exist or is already deactivated raises
`MenuStoreError`.

Menus are returned as
`{"id": ..., "items": {"STARTER": ..., "MAIN": ..., "DESSERT": ..., "DRINK": ...}, "price": ...}`.
Errors are answered as `{"error": "..."}` with status 400 for a bad body, id or
id list and 500 when the service fails.

## Order service

```python
from restaurantsvc.db import connect
from restaurantsvc.order.store import RestaurantOrderStore, metadata
from restaurantsvc.order.service import RestaurantOrderService
from restaurantsvc.order.web import create_app

engine = connect("sqlite:///orders.db")
metadata.create_all(engine)
app = create_app(RestaurantOrderService(RestaurantOrderStore(engine)))
app.run(port=8083)
```

| Method | Path               | Purpose                                          |
|--------|--------------------|--------------------------------------------------|
| GET    | `/ping`            | answers `pong`                                   |
| POST   | `/api/orders`      | create an order from `menu_ids` and `total`      |
| PATCH  | `/api/orders/<id>` | set the `status` of the order whose `id` is given in the body |
| GET    | `/api/orders/<id>` | fetch one order                                  |

New orders start as `PENDING`; `OrderStatus` also names `COMPLETED` and
`CANCELLED`. Fetching an order that does not exist answers 404 (the store
raises `OrderNotFoundError`). Errors are answered as `{"message": "..."}`.

## Customer service

The customer service talks to the other two over HTTP: when a customer is
seated it fetches the chosen menus, adds up their prices and opens an order.
Give the clients the base URL that the `/menus` and `/orders` paths hang from.

```python
import requests

from restaurantsvc.db import connect
from restaurantsvc.customer.store import CustomerStore, metadata
from restaurantsvc.customer.clients import MenuServiceClient, OrderServiceClient
from restaurantsvc.customer.service import CustomerService, RestaurantTableService
from restaurantsvc.customer.web import create_app

engine = connect("sqlite:///customers.db")
metadata.create_all(engine)
store = CustomerStore(engine)
session = requests.Session()

customers = CustomerService(
    store,
    MenuServiceClient("http://localhost:8081/api", session=session),
    OrderServiceClient("http://localhost:8083/api", session=session),
)
app = create_app(customers, RestaurantTableService(store))
app.run(port=8082)
```

| Method | Path                                      | Purpose                                   |
|--------|-------------------------------------------|-------------------------------------------|
| GET    | `/ping`                                   | answers `pong`                            |
| POST   | `/api/customers`                          | seat a customer: `menu_ids`, `restaurant_table_id` |
| PATCH  | `/api/customers/<id>`                     | move the customer whose `id` is given in the body to `status` |
| GET    | `/api/restaurant-tables/pending-payment`  | tables with customers waiting, eating or needing to pay |
| GET    | `/api/restaurant-tables/pending-delivery` | tables with customers still waiting for food |

New customers start as `WAITING` and move through `WAITING` → `EATING` →
`NEEDS_PAYMENT` → `PAID`, one step at a time; `CustomerService.update_customer`
refuses any other change with `InvalidStatusTransition`. Pending tables are
reported with status `UNAVAILABLE`, ordered by their earliest order id.

`MenuServiceClient.get_menus` and `OrderServiceClient.create_order` raise
`ServiceClientError` when the remote service cannot be reached, answers with
status 400 or above, or sends a body of the wrong shape. Errors from the
customer routes are answered as a bare JSON string.

## What this package does not do

- It installs no command: each service is started from your own code, as in
  the examples above, with Flask's server or any WSGI server.
- There is no route for creating or editing items; rows in the `items` table
  must be written to the database directly.
- It publishes no API documentation pages and runs no schema migrations.