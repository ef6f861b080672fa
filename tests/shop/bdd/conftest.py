"""Shared BDD fixtures and step definitions for the Shop domain."""

import pytest
from pytest_bdd import given, parsers, then
from shop.menu.menu import Menu


@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


@given(parsers.cfparse('a draft menu "{name}" for shop "{shop_id}"'), target_fixture="menu")
def draft_menu(name, shop_id):
    return Menu.create(shop_id=shop_id, name=name, description=None, base_price=10000.0)


@given(parsers.cfparse('a required option group "{name}" with an option priced {price:d}'))
def required_group(menu, name, price):
    group = menu.add_option_group(name, required=True)
    menu.add_option(group.id, f"{name} option", price)


@given(parsers.cfparse('an optional option group "{name}" with an option priced {price:d}'))
def optional_group(menu, name, price):
    group = menu.add_option_group(name, required=False)
    menu.add_option(group.id, f"{name} option", price)


@given("the menu is open")
def menu_is_open(menu):
    menu.open()


@then(parsers.cfparse('publication fails with "{code}"'))
def publication_fails(error, code):
    assert error["exc"] is not None
    assert error["exc"].code == code
