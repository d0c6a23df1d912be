"""Cart Schemas — request validation and snapshot/view response building.

Invariants:
    - AddItemRequest requires exactly one of product_id / product
    - bool never accepted as a product id
    - AdjustQuantityRequest rejects a zero delta
    - Responses mirror the core snapshot / render model they are built from
"""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from shopcart.core.cart_projection import project_cart
from shopcart.core.cart_store import CartStore
from shopcart.core.catalog import default_catalog
from shopcart.schemas.cart import (
    AddItemRequest, AdjustQuantityRequest, CartResponse, CartViewResponse,
)
from shopcart.schemas.catalog import ProductPayload


# --- AddItemRequest -----------------------------------------------------------

def test_add_request_accepts_int_or_str_id():
    assert AddItemRequest(product_id=3).product_id == 3
    assert AddItemRequest(product_id="3").product_id == "3"


def test_add_request_accepts_full_product():
    req = AddItemRequest(product={"id": 7, "name": " Stole ", "price": 450})
    assert req.product.name == "Stole"
    assert req.product.image is None


def test_add_request_requires_exactly_one_source():
    with pytest.raises(ValidationError):
        AddItemRequest()
    with pytest.raises(ValidationError):
        AddItemRequest(product_id=1, product={"id": 1, "name": "A", "price": 1})


def test_add_request_rejects_bool_id():
    with pytest.raises(ValidationError):
        AddItemRequest(product_id=True)


# --- ProductPayload -----------------------------------------------------------

def test_product_payload_rejects_negative_price():
    with pytest.raises(ValidationError):
        ProductPayload(id=1, name="A", price=-1)


def test_product_payload_rejects_blank_name_and_id():
    with pytest.raises(ValidationError):
        ProductPayload(id=1, name="   ", price=1)
    with pytest.raises(ValidationError):
        ProductPayload(id="  ", name="A", price=1)


# --- AdjustQuantityRequest ----------------------------------------------------

def test_adjust_request_accepts_negative_delta():
    assert AdjustQuantityRequest(delta=-1).delta == -1


def test_adjust_request_rejects_zero():
    with pytest.raises(ValidationError):
        AdjustQuantityRequest(delta=0)


# --- Responses ----------------------------------------------------------------

def test_cart_response_from_snapshot():
    store = CartStore(default_catalog())
    store.add(2)
    store.add(2)
    cart_id = uuid4()

    resp = CartResponse.from_snapshot(cart_id, store.snapshot())

    assert resp.cart_id == cart_id
    assert resp.lines[0].id == "2"
    assert resp.lines[0].quantity == 2
    assert resp.lines[0].line_total == 1600
    assert resp.total_item_count == 2
    assert resp.grand_total == 1600


def test_cart_view_response_from_render_model():
    store = CartStore(default_catalog())
    store.add(1)
    cart_id = uuid4()

    resp = CartViewResponse.from_render_model(cart_id, project_cart(store.snapshot()))

    assert resp.rows[0].product_id == "1"
    assert resp.rows[0].unit_price_text == "₹3,500"
    assert resp.badge_count == 1
    assert resp.total_text == "₹3,500"
    assert resp.empty_message is None
