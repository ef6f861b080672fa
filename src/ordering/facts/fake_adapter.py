"""In-memory fact provider for development and testing.

Users, shops and menus are registered up front; anything not registered does
not exist. Every lookup is recorded in ``calls`` so tests can assert which
facts a handler consulted.
"""

import requests

from ordering.facts.port import ExternalFactProvider, MenuFacts, OptionFacts, ShopFacts, as_money


class FakeFactProvider(ExternalFactProvider):
    def __init__(self) -> None:
        self.users: set[str] = set()
        self.shops: dict[str, ShopFacts] = {}
        self.menus: dict[tuple[str, str], MenuFacts] = {}
        self.unavailable: bool = False
        self.calls: list[tuple] = []

    # -------------------------------------------------------------------
    # Setup
    # -------------------------------------------------------------------
    def register_user(self, user_id) -> None:
        self.users.add(str(user_id))

    def register_shop(self, shop_id, open: bool = True, min_order_amount: float = 0.0) -> None:
        self.shops[str(shop_id)] = ShopFacts(open=open, min_order_amount=as_money(min_order_amount))

    def register_menu(
        self,
        shop_id,
        menu_id,
        name: str = "Menu",
        base_price: float = 0.0,
        options: dict[str, float] | list[tuple[str, float]] | None = None,
        open: bool = True,
        description: str | None = None,
    ) -> MenuFacts:
        """Register a menu. ``options`` maps name to price, or lists ``(name, price)`` pairs
        when several option groups reuse a name.
        """
        pairs = options.items() if isinstance(options, dict) else options or []
        menu = MenuFacts(
            menu_id=str(menu_id),
            name=name,
            description=description,
            base_price=as_money(base_price),
            open=open,
            options=tuple(OptionFacts(name=n, price=as_money(p)) for n, p in pairs),
        )
        self.menus[(str(shop_id), str(menu_id))] = menu
        return menu

    def change_menu_price(self, shop_id, menu_id, base_price: float) -> None:
        menu = self.menus[(str(shop_id), str(menu_id))]
        self.register_menu(
            shop_id,
            menu_id,
            name=menu.name,
            base_price=base_price,
            options=[(o.name, o.price) for o in menu.options],
            open=menu.open,
            description=menu.description,
        )

    def set_unavailable(self, unavailable: bool = True) -> None:
        """Make every subsequent lookup fail the way an unreachable service does."""
        self.unavailable = unavailable

    def _record(self, *call) -> None:
        self.calls.append(call)
        if self.unavailable:
            raise requests.ConnectionError("Fact provider unavailable")

    # -------------------------------------------------------------------
    # Port
    # -------------------------------------------------------------------
    def user_is_valid(self, user_id: str) -> bool:
        self._record("user_is_valid", str(user_id))
        return str(user_id) in self.users

    def shop_facts(self, shop_id: str) -> ShopFacts:
        self._record("shop_facts", str(shop_id))
        return self.shops.get(str(shop_id), ShopFacts(open=False))

    def menu_facts(self, shop_id: str, menu_id: str) -> MenuFacts | None:
        self._record("menu_facts", str(shop_id), str(menu_id))
        return self.menus.get((str(shop_id), str(menu_id)))

    def menu_options(self, shop_id: str, menu_id: str) -> list[OptionFacts]:
        self._record("menu_options", str(shop_id), str(menu_id))
        menu = self.menus.get((str(shop_id), str(menu_id)))
        return list(menu.options) if menu else []
