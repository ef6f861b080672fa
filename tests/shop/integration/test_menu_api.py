"""Integration tests for menu endpoints and the published menu facts."""

from unittest.mock import Mock

import pytest
import requests
from fastapi import FastAPI
from fastapi.testclient import TestClient
from ordering.facts.http_adapter import HttpFactProvider
from ordering.facts.retry import RetryPolicy
from protean.utils.globals import current_domain
from shared.api import register_error_handlers
from shop.api import menu_router, shop_router
from shop.menu.menu import Menu


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(shop_router)
    app.include_router(menu_router)
    register_error_handlers(app)
    return TestClient(app)


def _create_menu(client, shop_id="shop-001"):
    response = client.post(
        f"/shops/{shop_id}/menus",
        json={"name": "Margherita", "description": "Tomato", "base_price": 12000},
    )
    assert response.status_code == 201
    return response.json()["menu_id"]


def _add_group(client, menu_id, name="Size", required=True):
    response = client.post(f"/menus/{menu_id}/option-groups", json={"name": name, "required": required})
    assert response.status_code == 201
    return response.json()["option_group_id"]


class TestMenuAuthoring:
    def test_create_menu(self, client):
        menu_id = _create_menu(client)
        assert current_domain.repository_for(Menu).get(menu_id).name == "Margherita"

    def test_create_menu_without_name(self, client):
        response = client.post("/shops/shop-001/menus", json={"base_price": 1000})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MENU-DOMAIN-002"

    def test_full_publication_flow(self, client):
        menu_id = _create_menu(client)
        group_id = _add_group(client, menu_id)

        response = client.post(
            f"/menus/{menu_id}/option-groups/{group_id}/options",
            json={"name": "Large", "price": 3000},
        )
        assert response.status_code == 201

        response = client.put(f"/menus/{menu_id}/option-groups/{group_id}", json={"new_name": "Sizes"})
        assert response.status_code == 200

        response = client.put(
            f"/menus/{menu_id}/option-groups/{group_id}/options",
            json={"current_name": "Large", "current_price": 3000, "new_name": "Family"},
        )
        assert response.status_code == 200

        response = client.post(f"/menus/{menu_id}/open")
        assert response.status_code == 200

        menu = current_domain.repository_for(Menu).get(menu_id)
        assert menu.is_open is True
        assert menu.option_groups[0].name == "Sizes"

    def test_open_menu_without_groups(self, client):
        menu_id = _create_menu(client)

        response = client.post(f"/menus/{menu_id}/open")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MENU-DOMAIN-007"

    def test_remove_group(self, client):
        menu_id = _create_menu(client)
        group_id = _add_group(client, menu_id)

        response = client.delete(f"/menus/{menu_id}/option-groups/{group_id}")

        assert response.status_code == 200
        assert len(current_domain.repository_for(Menu).get(menu_id).option_groups) == 0

    def test_unknown_menu_is_a_404(self, client):
        response = client.post("/menus/menu-missing/open")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "MENU-DOMAIN-005"


class TestMenuFacts:
    def test_menu_facts_shape(self, client):
        menu_id = _create_menu(client)
        group_id = _add_group(client, menu_id)
        client.post(f"/menus/{menu_id}/option-groups/{group_id}/options", json={"name": "Large", "price": 3000})

        response = client.get(f"/shops/shop-001/menus/{menu_id}")

        assert response.status_code == 200
        menu = response.json()["menu"]
        assert menu["id"] == menu_id
        assert menu["name"] == "Margherita"
        assert menu["description"] == "Tomato"
        assert menu["basePrice"] == 12000.0
        assert menu["open"] is False
        assert menu["optionGroups"][0]["options"] == [{"name": "Large", "price": 3000.0}]

    def test_options_endpoint(self, client):
        menu_id = _create_menu(client)
        group_id = _add_group(client, menu_id)
        client.post(f"/menus/{menu_id}/option-groups/{group_id}/options", json={"name": "Large", "price": 3000})

        response = client.get(f"/shops/shop-001/menus/{menu_id}/options")

        assert response.status_code == 200
        assert response.json()["menu"]["optionGroups"][0]["options"][0]["name"] == "Large"

    def test_menu_of_another_shop_is_a_404(self, client):
        menu_id = _create_menu(client)

        response = client.get(f"/shops/shop-002/menus/{menu_id}")

        assert response.status_code == 404


class TestFactsContract:
    def test_published_menu_reads_back_through_the_http_fact_provider(self, client):
        menu_id = _create_menu(client)
        group_id = _add_group(client, menu_id)
        client.post(f"/menus/{menu_id}/option-groups/{group_id}/options", json={"name": "Large", "price": 3000})
        client.post(f"/menus/{menu_id}/open")
        published = client.get(f"/shops/shop-001/menus/{menu_id}")

        session = Mock(spec=requests.Session)
        session.get.return_value = Mock(status_code=200, content=published.content, json=published.json)
        provider = HttpFactProvider(base_url="http://shop", session=session, retry_policy=RetryPolicy(sleep=lambda _: None))

        menu = provider.menu_facts("shop-001", menu_id)

        assert menu.open is True
        assert menu.base_price == 12000.0
        assert menu.find_option("Large").price == 3000.0
