"""Shared BDD fixtures and step definitions for ordering."""

import pytest
from aurum.cart.items import AddToCart, CreateCart
from aurum.catalogue.product.management import AddProduct
from aurum.catalogue.queries import get_product
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def products():
    """Product ids created by the scenario, keyed by name."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('a product "{name}" priced {price:d} with {stock:d} in stock'),
    target_fixture="product_id",
)
def product_in_stock(process, products, name, price, stock):
    products[name] = process(AddProduct(name=name, price=price, stock=stock))
    return products[name]


@given("an empty cart", target_fixture="cart_id")
def empty_cart(process):
    return process(CreateCart(session_id="sess-bdd"))


@given(parsers.cfparse('the shopper adds "{name}" to the cart'))
def shopper_adds(process, products, cart_id, name):
    process(AddToCart(cart_id=cart_id, product_id=products[name]))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse('"{name}" has {stock:d} in stock'))
def product_stock_is(products, name, stock):
    assert get_product(products[name]).stock == stock
