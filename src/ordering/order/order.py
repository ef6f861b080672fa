"""Order aggregate — an immutable purchase record frozen from a cart.

An order is created exactly once, from a non-empty cart, at placement time.
Menu names, base prices and option prices are snapshotted into its line items
then, and nothing reads the live menu again. Orders have no mutators.
"""

import json
from datetime import UTC, datetime
from decimal import Decimal

from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text

from ordering.cart.errors import CartError, CartErrorCode
from ordering.domain import ordering
from ordering.facts.port import as_money
from ordering.order.errors import OrderError, OrderErrorCode
from ordering.order.events import OrderPlaced


@ordering.value_object(part_of="Order")
class SelectedOption:
    """An option as it was priced when the order was placed."""

    option_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)


@ordering.entity(part_of="Order")
class OrderItem:
    menu_id = Identifier(required=True)
    menu_name = String(required=True, max_length=255)
    selected_options = Text(default="[]")  # JSON: list of {option_id, name, price}
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)
    line_price = Float(required=True, min_value=0.0)

    @property
    def options(self) -> list[SelectedOption]:
        return [SelectedOption(**raw) for raw in json.loads(self.selected_options or "[]")]


@ordering.aggregate
class Order:
    user_id = Identifier(required=True)
    shop_id = Identifier(required=True)
    items = HasMany(OrderItem)
    total_price = Float(default=0.0)
    order_time = DateTime()

    @classmethod
    def from_cart(cls, cart, price_lookup, minimum_order_amount=0.0):
        """Create an order from the cart's current contents.

        ``price_lookup.price_line(menu_id, option_ids)`` supplies the menu name
        and prices in effect right now. The cart itself is left untouched.
        """
        if not cart.user_id:
            raise OrderError(OrderErrorCode.INVALID_USER_ID)
        if not cart.items:
            raise OrderError(OrderErrorCode.EMPTY_ORDER_ITEMS)
        if not cart.shop_id:
            raise OrderError(OrderErrorCode.INVALID_SHOP_ID)

        items = []
        total_price = Decimal("0")
        for cart_item in cart.items:
            pricing = price_lookup.price_line(cart_item.menu_id, cart_item.option_id_list)
            line_price = pricing.line_price(cart_item.quantity)
            total_price += line_price
            items.append(
                OrderItem(
                    menu_id=cart_item.menu_id,
                    menu_name=pricing.menu_name,
                    selected_options=json.dumps([o.to_dict() for o in pricing.options]),
                    quantity=cart_item.quantity,
                    unit_price=float(pricing.unit_price),
                    line_price=float(line_price),
                )
            )

        if total_price < as_money(minimum_order_amount):
            raise CartError(
                CartErrorCode.MINIMUM_ORDER_AMOUNT_NOT_MET,
                f"{total_price} < {minimum_order_amount}",
            )

        order = cls(
            user_id=cart.user_id,
            shop_id=cart.shop_id,
            items=items,
            total_price=float(total_price),
            order_time=datetime.now(UTC),
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(order.user_id),
                shop_id=str(order.shop_id),
                total_price=order.total_price,
            )
        )
        return order

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)
