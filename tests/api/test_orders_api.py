from __future__ import annotations

import logging

import pytest

_ORDERS = [
    {"primaryEmail": "a@b.com", "status": "pending", "totalPrice": 100},
    {"primaryEmail": "a@b.com", "status": "completed", "totalPrice": 250},
    {"primaryEmail": "c@d.com", "status": "completed", "totalPrice": 75},
    {"primaryEmail": "c@d.com", "status": "cancelled", "totalPrice": 40},
    {"primaryEmail": "e@f.com", "status": "pending", "totalPrice": 10},
]


@pytest.fixture
def seeded_orders(client) -> list[str]:
    return [client.post("/addOrder", json=order).json()["insertedId"] for order in _ORDERS]


def _ids(response) -> set[str]:
    return {order["_id"] for order in response.json()}


def test_orders_for_email(client, seeded_orders):
    response = client.get("/orders/a@b.com")
    assert response.status_code == 200
    orders = response.json()

    assert len(orders) == 2
    assert {order["primaryEmail"] for order in orders} == {"a@b.com"}


def test_status_routes_partition_all_orders(client, seeded_orders):
    pending = _ids(client.get("/pendingOrders"))
    completed = _ids(client.get("/completedOrders"))
    cancelled = _ids(client.get("/cancelledOrders"))
    everything = _ids(client.get("/allOrders"))

    assert pending.isdisjoint(completed)
    assert pending.isdisjoint(cancelled)
    assert completed.isdisjoint(cancelled)
    assert pending | completed | cancelled == everything == set(seeded_orders)


def test_order_stats_counts_per_status(client, seeded_orders):
    stats = client.get("/orderStats").json()
    counts = {entry["_id"]: entry["count"] for entry in stats}

    assert counts == {"pending": 2, "completed": 2, "cancelled": 1}
    assert sum(counts.values()) == len(client.get("/allOrders").json())


def test_order_amount_stats_sums_total_price(client, seeded_orders):
    stats = client.get("/orderAmountStats").json()
    amounts = {entry["_id"]: entry["totalAmount"] for entry in stats}

    assert amounts == {"pending": 110, "completed": 325, "cancelled": 40}


def test_update_order_moves_it_between_status_lists(client):
    order = {"primaryEmail": "a@b.com", "status": "pending", "totalPrice": 100}
    order_id = client.post("/addOrder", json=order).json()["insertedId"]

    mine = client.get("/orders/a@b.com").json()
    assert [entry["_id"] for entry in mine] == [order_id]
    assert order_id in _ids(client.get("/pendingOrders"))

    response = client.put(f"/updateOrder/{order_id}", json={"status": "completed"})
    assert response.status_code == 200
    assert response.json() == {
        "acknowledged": True,
        "matchedCount": 1,
        "modifiedCount": 1,
        "upsertedCount": 0,
        "upsertedId": None,
    }

    assert order_id in _ids(client.get("/completedOrders"))
    assert order_id not in _ids(client.get("/pendingOrders"))


def test_update_order_only_touches_status(client, store):
    order = {"primaryEmail": "a@b.com", "status": "pending", "totalPrice": 100}
    order_id = client.post("/addOrder", json=order).json()["insertedId"]

    client.put(f"/updateOrder/{order_id}", json={"status": "cancelled", "totalPrice": 0})

    stored = store.orders.find_one({"primaryEmail": "a@b.com"})
    assert stored["status"] == "cancelled"
    assert stored["totalPrice"] == 100


def test_update_order_without_status_is_server_error(client, seeded_orders):
    response = client.put(f"/updateOrder/{seeded_orders[0]}", json={})
    assert response.status_code == 500
    assert response.text == "Internal Server Error"


def test_update_order_with_string_body_is_plain_text_500(client, store, seeded_orders):
    response = client.put(f"/updateOrder/{seeded_orders[0]}", json="completed")
    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Internal Server Error"
    assert "completed" not in response.text
    assert store.orders.count_documents({"status": "pending"}) == 2


def test_unencodable_order_is_logged_server_error(client, store, caplog):
    store.orders.insert_one({"status": "pending", "totalPrice": float("nan")})

    with caplog.at_level(logging.ERROR, logger="furniro.api.routes.orders"):
        response = client.get("/allOrders")

    assert response.status_code == 500
    assert response.text == "Internal Server Error"
    assert any("Listing orders failed" in record.getMessage() for record in caplog.records)
