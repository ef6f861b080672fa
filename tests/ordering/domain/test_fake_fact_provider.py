"""Tests for the in-memory fact provider."""

from decimal import Decimal

import pytest
import requests
from ordering.facts.fake_adapter import FakeFactProvider
from ordering.facts.port import OptionFacts


@pytest.fixture()
def provider():
    provider = FakeFactProvider()
    provider.register_user("u1")
    provider.register_shop("s1", open=True, min_order_amount=10000.0)
    provider.register_menu("s1", "m1", name="Bibimbap", base_price=8000.0, options={"Egg": 500.0})
    return provider


class TestFakeFactProvider:
    def test_users(self, provider):
        assert provider.user_is_valid("u1")
        assert not provider.user_is_valid("u2")

    def test_unknown_shop_is_closed(self, provider):
        assert provider.shop_facts("s1").open
        assert provider.shop_facts("s1").min_order_amount == 10000.0
        assert not provider.shop_facts("nowhere").open

    def test_menu_facts(self, provider):
        menu = provider.menu_facts("s1", "m1")
        assert menu.name == "Bibimbap"
        assert menu.open
        assert menu.find_option("Egg") == OptionFacts(name="Egg", price=500.0)
        assert menu.find_option("Tofu") is None
        assert provider.menu_facts("s1", "m2") is None

    def test_menu_options(self, provider):
        assert provider.menu_options("s1", "m1") == [OptionFacts(name="Egg", price=500.0)]
        assert provider.menu_options("s1", "m2") == []

    def test_change_menu_price_keeps_the_rest(self, provider):
        provider.change_menu_price("s1", "m1", 9000.0)
        menu = provider.menu_facts("s1", "m1")
        assert menu.base_price == 9000.0
        assert menu.name == "Bibimbap"
        assert menu.options == (OptionFacts(name="Egg", price=500.0),)

    def test_unavailable_provider_raises_transport_errors(self, provider):
        provider.set_unavailable()
        with pytest.raises(requests.ConnectionError):
            provider.user_is_valid("u1")

    def test_calls_are_recorded(self, provider):
        provider.user_is_valid("u1")
        provider.shop_facts("s1")
        assert provider.calls == [("user_is_valid", "u1"), ("shop_facts", "s1")]


class TestRepeatedOptionNames:
    def test_options_may_be_registered_as_pairs(self, provider):
        menu = provider.register_menu("s1", "m3", name="Combo", base_price=1.5, options=[("Large", 3.0), ("Large", 0.5)])

        assert len(menu.matching_options("Large")) == 2
        assert menu.find_option("Large") is None
        assert menu.base_price == Decimal("1.5")
