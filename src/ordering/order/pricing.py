"""Price snapshot lookup used when a cart is placed as an order.

Menu names and prices are read from the shop's published facts at the moment
of placement and copied into the order. Each distinct menu is fetched once per
lookup instance, so one placement sees one consistent price per menu.

Amounts stay ``Decimal`` here; the order converts them to its float fields
only once every sum and comparison is done.
"""

from dataclasses import dataclass
from decimal import Decimal

from ordering.cart.errors import CartError, CartErrorCode
from ordering.facts.port import ExternalFactProvider, MenuFacts, as_money


@dataclass(frozen=True)
class PricedOption:
    option_id: str
    name: str
    price: Decimal

    def to_dict(self) -> dict:
        return {"option_id": self.option_id, "name": self.name, "price": float(self.price)}


@dataclass(frozen=True)
class LinePricing:
    menu_id: str
    menu_name: str
    base_price: Decimal
    options: tuple[PricedOption, ...] = ()

    @property
    def unit_price(self) -> Decimal:
        return as_money(self.base_price) + sum((as_money(o.price) for o in self.options), Decimal("0"))

    def line_price(self, quantity: int) -> Decimal:
        return self.unit_price * quantity


class MenuPriceLookup:
    def __init__(self, provider: ExternalFactProvider, shop_id: str) -> None:
        self.provider = provider
        self.shop_id = str(shop_id)
        self._menus: dict[str, MenuFacts | None] = {}

    def _menu(self, menu_id: str) -> MenuFacts:
        if menu_id not in self._menus:
            self._menus[menu_id] = self.provider.menu_facts(self.shop_id, menu_id)

        menu = self._menus[menu_id]
        if menu is None or not menu.open:
            raise CartError(CartErrorCode.MENU_NOT_AVAILABLE, menu_id)
        return menu

    def price_line(self, menu_id, option_ids) -> LinePricing:
        menu = self._menu(str(menu_id))

        options = []
        for option_id in option_ids:
            matches = menu.matching_options(option_id)
            if not matches:
                raise CartError(CartErrorCode.INVALID_OPTION_SELECTION, str(option_id))
            if len(matches) > 1:
                raise CartError(CartErrorCode.INVALID_OPTION_SELECTION, f"{option_id} is ambiguous")
            option = matches[0]
            options.append(PricedOption(option_id=option.option_id, name=option.name, price=as_money(option.price)))

        return LinePricing(
            menu_id=str(menu_id),
            menu_name=menu.name,
            base_price=as_money(menu.base_price),
            options=tuple(options),
        )
