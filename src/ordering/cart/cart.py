"""Cart aggregate — a user's pending menu selections for a single shop.

The cart is a standard CQRS aggregate (not event sourced). There is exactly one
cart per user. A cart only ever holds items from one shop: adding a menu from a
different shop throws away everything and starts over with that shop.

Line items are identified by their merge key, ``(menu_id, sorted option ids)``.
Adding a selection whose key already exists bumps that line's quantity instead
of creating a second line.
"""

import json
from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, Text

from ordering.cart.errors import CartError, CartErrorCode
from ordering.cart.events import CartItemAdded
from ordering.domain import ordering


def option_key(option_ids) -> str:
    """Canonical JSON form of an option selection: sorted, without duplicates."""
    return json.dumps(sorted({str(option_id) for option_id in option_ids or []}))


@ordering.entity(part_of="Cart")
class CartItem:
    menu_id = Identifier(required=True)
    option_ids = Text(default="[]")  # JSON: sorted option id list (merge key part)
    quantity = Integer(required=True, min_value=1)

    @property
    def option_id_list(self) -> list[str]:
        return json.loads(self.option_ids) if self.option_ids else []

    def matches(self, menu_id, key) -> bool:
        return str(self.menu_id) == str(menu_id) and self.option_ids == key


@ordering.aggregate
class Cart:
    user_id = Identifier(required=True)
    shop_id = Identifier()  # Unset until the first item is added
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def items_must_belong_to_a_shop(self):
        if self.items and not self.shop_id:
            raise ValidationError({"shop_id": ["A cart holding items must belong to a shop"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, user_id):
        if not user_id:
            raise CartError(CartErrorCode.INVALID_USER_ID)
        now = datetime.now(UTC)
        return cls(user_id=user_id, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)

    def find_item(self, menu_id, option_ids):
        key = option_key(option_ids)
        return next((i for i in self.items if i.matches(menu_id, key)), None)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, shop_id, menu_id, option_ids, quantity) -> CartItemAdded:
        """Add a menu selection, merging with an identical line if present.

        A selection from a shop other than the cart's current one resets the
        cart to that shop with this selection as its only line.
        """
        if not menu_id:
            raise CartError(CartErrorCode.INVALID_MENU_ID)
        if quantity is None or quantity <= 0:
            raise CartError(CartErrorCode.INVALID_QUANTITY)
        if not shop_id:
            raise CartError(CartErrorCode.INVALID_SHOP_ID)

        key = option_key(option_ids)

        with atomic_change(self):
            if str(self.shop_id or "") != str(shop_id):
                self._start_over(shop_id)

            existing = next((i for i in self.items if i.matches(menu_id, key)), None)
            if existing:
                existing.quantity += quantity
            else:
                self.add_items(CartItem(menu_id=menu_id, option_ids=key, quantity=quantity))
            self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                shop_id=str(self.shop_id),
                menu_id=str(menu_id),
                quantity=quantity,
            )
        )
        return self._events[-1]

    def change_quantity(self, menu_id, option_ids, quantity):
        """Set the quantity of an existing line. Zero or less is rejected, not a removal."""
        if quantity is None or quantity <= 0:
            raise CartError(CartErrorCode.INVALID_QUANTITY)

        item = self.find_item(menu_id, option_ids)
        if item is None:
            raise CartError(CartErrorCode.CART_ITEM_NOT_FOUND)

        item.quantity = quantity
        self.updated_at = datetime.now(UTC)

    def remove_item(self, menu_id, option_ids):
        """Remove the line with this merge key. Removing an absent line is a no-op."""
        item = self.find_item(menu_id, option_ids)
        if item is not None:
            self.remove_items(item)
            self.updated_at = datetime.now(UTC)

    def clear(self):
        """Drop every line and forget the shop."""
        with atomic_change(self):
            for item in list(self.items):
                self.remove_items(item)
            self.shop_id = None
            self.updated_at = datetime.now(UTC)

    def _start_over(self, shop_id):
        for item in list(self.items):
            self.remove_items(item)
        self.shop_id = shop_id

    # -------------------------------------------------------------------
    # Placement
    # -------------------------------------------------------------------
    def place_order(self, price_lookup, minimum_order_amount=0.0):
        """Freeze the cart into an Order and empty the cart in the same step."""
        from ordering.order.order import Order

        if self.is_empty:
            raise CartError(CartErrorCode.EMPTY_CART)

        order = Order.from_cart(self, price_lookup, minimum_order_amount=minimum_order_amount)
        self.clear()
        return order
