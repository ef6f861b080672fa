"""External fact provider port (abstract interface).

The ordering context does not own users, shops or menus. Before any cart or
order write it asks the owning services for the facts it needs through this
port. Adapters:

- HttpFactProvider for deployed environments
- FakeFactProvider for development and tests
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation


def as_money(value) -> Decimal:
    """Exact decimal form of a price. Floats go through ``str`` so 0.1 stays 0.1."""
    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Not a price: {value!r}") from None


@dataclass(frozen=True)
class ShopFacts:
    """Whether a shop accepts orders, and its minimum order total."""

    open: bool
    min_order_amount: Decimal = Decimal("0")


@dataclass(frozen=True)
class OptionFacts:
    name: str
    price: Decimal = Decimal("0")

    @property
    def option_id(self) -> str:
        # Options are identified by name within their menu
        return self.name


@dataclass(frozen=True)
class MenuFacts:
    """A menu as published by its shop."""

    menu_id: str
    name: str
    base_price: Decimal
    open: bool
    description: str | None = None
    options: tuple[OptionFacts, ...] = field(default_factory=tuple)

    def matching_options(self, option_id: str) -> list[OptionFacts]:
        """Every offered option answering to this id. More than one means the id is ambiguous."""
        return [o for o in self.options if o.option_id == str(option_id)]

    def find_option(self, option_id: str) -> OptionFacts | None:
        matches = self.matching_options(option_id)
        return matches[0] if len(matches) == 1 else None


class ExternalFactProvider(ABC):
    """Read-only view onto facts owned by other services."""

    @abstractmethod
    def user_is_valid(self, user_id: str) -> bool:
        """Return True when the user exists."""
        ...

    @abstractmethod
    def shop_facts(self, shop_id: str) -> ShopFacts:
        """Return the shop's open state. An unknown shop is reported as closed."""
        ...

    @abstractmethod
    def menu_facts(self, shop_id: str, menu_id: str) -> MenuFacts | None:
        """Return the menu, or None when the shop has no such menu."""
        ...

    @abstractmethod
    def menu_options(self, shop_id: str, menu_id: str) -> list[OptionFacts]:
        """Return every option across all of the menu's option groups."""
        ...
