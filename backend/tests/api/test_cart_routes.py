"""Cart Routes — HTTP surface over the cart store.

Invariants:
    - Every mutation responds with the post-mutation snapshot
    - Unknown product ids are no-ops (200, cart unchanged)
    - Unknown cart ids → 404 with the standard error envelope
    - Toasts drained once; only add/remove produce them
"""

import logging
from uuid import UUID, uuid4


def _lines(body: dict) -> list[tuple[str, int]]:
    return [(line["id"], line["quantity"]) for line in body["lines"]]


# ─── Lifecycle ───────────────────────────────────────────────────

async def test_create_cart_returns_201_and_empty_snapshot(client):
    res = await client.post("/api/v1/carts")
    assert res.status_code == 201
    body = res.json()
    assert body["lines"] == []
    assert body["total_item_count"] == 0
    assert body["grand_total"] == 0


async def test_get_unknown_cart_returns_404(client):
    res = await client.get(f"/api/v1/carts/{uuid4()}")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_not_found_log_record_carries_cart_id(client, caplog):
    missing = uuid4()
    with caplog.at_level(logging.WARNING, logger="shopcart.api.error_handlers"):
        await client.get(f"/api/v1/carts/{missing}")

    [record] = [r for r in caplog.records if r.name == "shopcart.api.error_handlers"]
    assert record.cart_id == str(missing)
    assert record.error_code == "RESOURCE_NOT_FOUND"


async def test_delete_cart_returns_204_then_404(client, cart_id, registry):
    res = await client.delete(f"/api/v1/carts/{cart_id}")
    assert res.status_code == 204
    assert len(registry) == 0
    res = await client.get(f"/api/v1/carts/{cart_id}")
    assert res.status_code == 404


async def test_cart_limit_returns_429(client):
    for _ in range(3):
        assert (await client.post("/api/v1/carts")).status_code == 201
    res = await client.post("/api/v1/carts")
    assert res.status_code == 429
    assert res.json()["error"]["code"] == "CART_LIMIT_REACHED"


# ─── Items ───────────────────────────────────────────────────────

async def test_add_by_id_merges_and_keeps_order(client, cart_id):
    await client.post(f"/api/v1/carts/{cart_id}/items", json={"product_id": 1})
    await client.post(f"/api/v1/carts/{cart_id}/items", json={"product_id": 2})
    res = await client.post(f"/api/v1/carts/{cart_id}/items", json={"product_id": "1"})

    assert res.status_code == 200
    body = res.json()
    assert _lines(body) == [("1", 2), ("2", 1)]
    assert body["total_item_count"] == 3
    assert body["grand_total"] == 2 * 3500 + 800


async def test_add_full_product_record(client, cart_id):
    res = await client.post(
        f"/api/v1/carts/{cart_id}/items",
        json={"product": {"id": 42, "name": "Pashmina Shawl", "price": 2500}},
    )
    body = res.json()
    assert _lines(body) == [("42", 1)]
    assert body["lines"][0]["image"] is None
    assert body["grand_total"] == 2500


async def test_add_unknown_id_is_noop(client, cart_id):
    res = await client.post(f"/api/v1/carts/{cart_id}/items", json={"product_id": 9999})
    assert res.status_code == 200
    assert res.json()["lines"] == []


async def test_noop_add_logs_requested_id(client, cart_id, caplog):
    with caplog.at_level(logging.INFO, logger="shopcart.api.routes.cart_items"):
        await client.post(f"/api/v1/carts/{cart_id}/items", json={"product_id": 9999})

    [record] = [r for r in caplog.records if r.name == "shopcart.api.routes.cart_items"]
    assert record.product_id == "9999"
    assert record.cart_id == cart_id


async def test_noop_add_of_product_record_logs_record_id(
    client, cart_id, registry, caplog, monkeypatch,
):
    session = registry.get(UUID(cart_id))
    monkeypatch.setattr(session.store, "add", lambda target: False)

    with caplog.at_level(logging.INFO, logger="shopcart.api.routes.cart_items"):
        await client.post(
            f"/api/v1/carts/{cart_id}/items",
            json={"product": {"id": 42, "name": "Pashmina Shawl", "price": 2500}},
        )

    [record] = [r for r in caplog.records if r.name == "shopcart.api.routes.cart_items"]
    assert record.product_id == "42"


async def test_add_with_invalid_body_returns_400(client, cart_id):
    res = await client.post(f"/api/v1/carts/{cart_id}/items", json={})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_remove_unknown_id_leaves_cart_unchanged(client, cart_id):
    await client.post(f"/api/v1/carts/{cart_id}/items", json={"product_id": 1})
    await client.post(f"/api/v1/carts/{cart_id}/items", json={"product_id": 2})

    res = await client.delete(f"/api/v1/carts/{cart_id}/items/9999")

    assert res.status_code == 200
    assert _lines(res.json()) == [("1", 1), ("2", 1)]


async def test_adjust_and_remove_scenario(client, cart_id):
    items = f"/api/v1/carts/{cart_id}/items"
    await client.post(items, json={"product_id": 1})
    await client.post(items, json={"product_id": 1})
    await client.post(items, json={"product_id": 2})

    res = await client.patch(f"{items}/1", json={"delta": -1})
    assert _lines(res.json()) == [("1", 1), ("2", 1)]

    res = await client.patch(f"{items}/1", json={"delta": -1})
    assert _lines(res.json()) == [("2", 1)]

    res = await client.delete(f"{items}/2")
    assert res.json()["lines"] == []
    assert res.json()["grand_total"] == 0


async def test_adjust_zero_delta_rejected(client, cart_id):
    res = await client.patch(f"/api/v1/carts/{cart_id}/items/1", json={"delta": 0})
    assert res.status_code == 400


async def test_clear_items(client, cart_id):
    await client.post(f"/api/v1/carts/{cart_id}/items", json={"product_id": 3})
    res = await client.delete(f"/api/v1/carts/{cart_id}/items")
    assert res.status_code == 200
    assert res.json()["lines"] == []


# ─── View & notifications ────────────────────────────────────────

async def test_view_projects_render_model(client, cart_id):
    await client.post(f"/api/v1/carts/{cart_id}/items", json={"product_id": 1})
    await client.post(
        f"/api/v1/carts/{cart_id}/items",
        json={"product": {"id": "x1", "name": "Stole", "price": 450}},
    )

    res = await client.get(f"/api/v1/carts/{cart_id}/view")

    body = res.json()
    assert res.status_code == 200
    assert [row["product_id"] for row in body["rows"]] == ["1", "x1"]
    assert body["rows"][0]["unit_price_text"] == "₹3,500"
    assert body["rows"][1]["image_url"] == "/static/img/placeholder.png"
    assert body["badge_count"] == 2
    assert body["total_text"] == "₹3,950"
    assert body["empty_message"] is None


async def test_view_of_empty_cart(client, cart_id):
    body = (await client.get(f"/api/v1/carts/{cart_id}/view")).json()
    assert body["rows"] == []
    assert body["empty_message"] == "Your cart is empty"


async def test_notifications_drained_once(client, cart_id):
    items = f"/api/v1/carts/{cart_id}/items"
    await client.post(items, json={"product_id": 1})
    await client.patch(f"{items}/1", json={"delta": 3})
    await client.delete(f"{items}/1")

    res = await client.get(f"/api/v1/carts/{cart_id}/notifications")
    messages = [n["message"] for n in res.json()["notifications"]]
    assert messages == ["Product added to cart!", "Product removed from cart!"]
    assert all(n["severity"] == "success" for n in res.json()["notifications"])

    again = await client.get(f"/api/v1/carts/{cart_id}/notifications")
    assert again.json()["notifications"] == []
