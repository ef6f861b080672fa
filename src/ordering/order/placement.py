"""Order placement — command and handler.

Placing an order re-checks the user and the shop, snapshots current menu
prices into a new Order and empties the cart. The Order and the cleared Cart
are written in the same unit of work: either both are committed or neither.
"""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from ordering.cart.cart import Cart
from ordering.cart.errors import CartError, CartErrorCode
from ordering.domain import ordering
from ordering.facts import get_fact_provider
from ordering.order.errors import OrderError, OrderErrorCode
from ordering.order.order import Order
from ordering.order.pricing import MenuPriceLookup

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)


@ordering.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        facts = get_fact_provider()
        if not facts.user_is_valid(str(command.user_id)):
            raise OrderError(OrderErrorCode.INVALID_USER_ID, str(command.user_id))

        cart_repo = current_domain.repository_for(Cart)
        cart = cart_repo.get_for_user(command.user_id)
        if cart.is_empty:
            raise CartError(CartErrorCode.EMPTY_CART)

        shop = facts.shop_facts(str(cart.shop_id))
        if not shop.open:
            raise CartError(CartErrorCode.SHOP_NOT_OPEN, str(cart.shop_id))

        order = cart.place_order(
            MenuPriceLookup(facts, cart.shop_id),
            minimum_order_amount=shop.min_order_amount,
        )

        current_domain.repository_for(Order).add(order)
        cart_repo.add(cart)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            user_id=str(order.user_id),
            shop_id=str(order.shop_id),
            total_price=order.total_price,
            items=len(order.items),
        )
        return str(order.id)
