"""HTTP adapter for the external fact provider.

Talks JSON to the user and shop services with ``requests``. Every GET goes
through the injected RetryPolicy: a transport failure (connection error,
timeout, non-2xx status) is retried once after a fixed delay, and the second
failure propagates as the unmodified ``requests.RequestException``.

A 404 is not a transport failure: it means the fact does not exist, and is
answered without retrying.
"""

import os
from decimal import Decimal
from typing import Any

import requests
import structlog

from ordering.facts.port import ExternalFactProvider, MenuFacts, OptionFacts, ShopFacts, as_money
from ordering.facts.retry import RetryPolicy

logger = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "http://localhost:8080/api"
DEFAULT_TIMEOUT = 5.0


def parse_bool(value: Any) -> bool:
    """Accept JSON booleans and their string spellings; anything else is False."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


def parse_price(value: Any) -> Decimal:
    """Prices arrive as JSON numbers or strings; both are read as exact decimals."""
    return as_money(value)


class HttpFactProvider(ExternalFactProvider):
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        session: requests.Session | None = None,
        retry_policy: RetryPolicy | None = None,
        timeout: float | None = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.retry_policy = retry_policy or RetryPolicy()
        self.timeout = timeout

    @classmethod
    def from_env(cls) -> "HttpFactProvider":
        """Build from FACTS_BASE_URL, FACTS_RETRY_DELAY and FACTS_TIMEOUT."""
        return cls(
            base_url=os.getenv("FACTS_BASE_URL", DEFAULT_BASE_URL),
            retry_policy=RetryPolicy(delay=float(os.getenv("FACTS_RETRY_DELAY", "0.2"))),
            timeout=float(os.getenv("FACTS_TIMEOUT", str(DEFAULT_TIMEOUT))),
        )

    # -------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------
    def _get_json(self, path: str) -> Any:
        url = f"{self.base_url}{path}"

        def fetch():
            response = self.session.get(url, timeout=self.timeout)
            if response.status_code == 404:
                return None
            response.raise_for_status()
            if not response.content:
                return None
            return response.json(parse_float=Decimal)

        body = self.retry_policy.call(fetch, description=f"GET {url}")
        logger.debug("Fetched external facts", url=url, found=body is not None)
        return body

    # -------------------------------------------------------------------
    # Port
    # -------------------------------------------------------------------
    def user_is_valid(self, user_id: str) -> bool:
        body = self._get_json(f"/users/{user_id}")
        if not isinstance(body, dict):
            return False
        user = body.get("user", body)
        return isinstance(user, dict) and user.get("id") is not None

    def shop_facts(self, shop_id: str) -> ShopFacts:
        body = self._get_json(f"/shops/{shop_id}")
        shop = body.get("shop") if isinstance(body, dict) else None
        if not shop:
            return ShopFacts(open=False)
        return ShopFacts(
            open=parse_bool(shop.get("open")),
            min_order_amount=parse_price(shop.get("minOrderAmount")),
        )

    def menu_facts(self, shop_id: str, menu_id: str) -> MenuFacts | None:
        body = self._get_json(f"/shops/{shop_id}/menus/{menu_id}")
        menu = body.get("menu") if isinstance(body, dict) else None
        if not menu:
            return None
        return MenuFacts(
            menu_id=str(menu.get("id") or menu_id),
            name=menu.get("name") or "",
            description=menu.get("description"),
            base_price=parse_price(menu.get("basePrice")),
            open=parse_bool(menu.get("open")),
            options=tuple(self._flatten_options(menu)),
        )

    def menu_options(self, shop_id: str, menu_id: str) -> list[OptionFacts]:
        body = self._get_json(f"/shops/{shop_id}/menus/{menu_id}/options")
        if isinstance(body, list):
            return [self._option(raw) for raw in body]
        if not isinstance(body, dict):
            return []
        if "options" in body:
            return [self._option(raw) for raw in body.get("options") or []]
        return self._flatten_options(body.get("menu") or {})

    # -------------------------------------------------------------------
    # Parsing
    # -------------------------------------------------------------------
    @staticmethod
    def _option(raw: dict) -> OptionFacts:
        return OptionFacts(name=raw.get("name"), price=parse_price(raw.get("price")))

    def _flatten_options(self, menu: dict) -> list[OptionFacts]:
        return [
            self._option(raw)
            for group in menu.get("optionGroups") or []
            for raw in group.get("options") or []
        ]
