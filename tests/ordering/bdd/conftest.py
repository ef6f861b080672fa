"""Shared BDD fixtures and step definitions for the Ordering domain."""

import pytest
from ordering.cart.cart import Cart
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


@given(parsers.cfparse('an empty cart for user "{user_id}"'), target_fixture="cart")
def empty_cart(user_id):
    return Cart.create(user_id=user_id)


@then(parsers.cfparse('the cart action fails with "{code}"'))
def cart_action_fails(error, code):
    assert error["exc"] is not None
    assert error["exc"].code == code
