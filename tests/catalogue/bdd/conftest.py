"""Shared BDD fixtures and step definitions for the Catalogue."""

import pytest
from aurum.catalogue.category.management import AddCategory
from aurum.catalogue.product.management import AddProduct
from aurum.catalogue.queries import resolve_category
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
@given(parsers.cfparse('a category "{name}"'), target_fixture="category_id")
def category_named(process, name):
    return process(AddCategory(name=name))


@given(parsers.cfparse('a product "{name}" in category "{category}"'))
def product_in_category(process, products, name, category):
    products[name] = process(AddProduct(name=name, price=1000, stock=5, category=category))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse('the category "{name}" still exists'))
def category_still_exists(name):
    assert resolve_category(name) is not None


@then(parsers.cfparse('no category is named "{name}"'))
def no_category_named(name):
    assert resolve_category(name) is None
