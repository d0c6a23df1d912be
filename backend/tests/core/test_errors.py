"""Error Hierarchy — codes, HTTP statuses and the REST envelope."""

from shopcart.core.errors import (
    CartLimitReachedError,
    ErrorCategory,
    ErrorContext,
    InvalidProductError,
    ResourceNotFoundError,
    ShopCartError,
)


def test_resource_not_found_envelope():
    err = ResourceNotFoundError("Cart", "abc", ErrorContext(cart_id="abc"))
    body = err.to_response()["error"]
    assert err.http_status == 404
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == "Cart 'abc' not found"
    assert body["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert body["context"]["cart_id"] == "abc"


def test_invalid_product_carries_field():
    err = InvalidProductError("bad price", "price")
    assert isinstance(err, ShopCartError)
    assert err.field == "price"
    assert err.to_response()["error"]["code"] == "INVALID_PRODUCT"


def test_cart_limit_is_429_warning():
    err = CartLimitReachedError(5)
    assert err.http_status == 429
    assert err.severity.value == "warning"
    assert "5" in err.message
