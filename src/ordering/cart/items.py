"""Cart item management — commands and handler.

Adding an item consults the owning services first: the user must exist, the
shop must be open, the menu must be published and every selected option must
be offered by it. Any failed check aborts before the cart is loaded or changed.
"""

import json
from collections import Counter

import structlog
from protean import handle
from protean.fields import Identifier, Integer, Text
from protean.utils.globals import current_domain

from ordering.cart.cart import Cart, option_key
from ordering.cart.errors import CartError, CartErrorCode
from ordering.domain import ordering
from ordering.facts import get_fact_provider

logger = structlog.get_logger(__name__)


def parse_option_ids(raw) -> list[str]:
    """Accept a JSON list, a comma separated string, or a list.

    Option names containing commas need the JSON form. Anything that is not a
    flat list of ids is rejected as an invalid selection.
    """
    if not raw:
        return []
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw.startswith("["):
            return [o.strip() for o in raw.split(",") if o.strip()]
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError:
            raise CartError(CartErrorCode.INVALID_OPTION_SELECTION, "option ids are not a valid JSON list") from None
    if not isinstance(raw, list | tuple) or any(isinstance(o, dict | list) or o is None for o in raw):
        raise CartError(CartErrorCode.INVALID_OPTION_SELECTION, "option ids must be a flat list")
    return [str(o) for o in raw]


@ordering.command(part_of="Cart")
class AddCartItem:
    user_id = Identifier(required=True)
    shop_id = Identifier()
    menu_id = Identifier()
    option_ids = Text(default="[]")  # JSON: list of option ids
    quantity = Integer()


@ordering.command(part_of="Cart")
class RemoveCartItem:
    user_id = Identifier(required=True)
    menu_id = Identifier()
    option_ids = Text(default="[]")  # JSON: list of option ids


@ordering.command(part_of="Cart")
class ChangeCartItemQuantity:
    user_id = Identifier(required=True)
    menu_id = Identifier()
    option_ids = Text(default="[]")  # JSON: list of option ids
    quantity = Integer()


@ordering.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddCartItem)
    def add_cart_item(self, command):
        if not command.menu_id:
            raise CartError(CartErrorCode.INVALID_MENU_ID)
        if command.quantity is None or command.quantity <= 0:
            raise CartError(CartErrorCode.INVALID_QUANTITY)
        if not command.shop_id:
            raise CartError(CartErrorCode.INVALID_SHOP_ID)

        option_ids = parse_option_ids(command.option_ids)
        self._verify_selection(command.user_id, command.shop_id, command.menu_id, option_ids)

        repo = current_domain.repository_for(Cart)
        cart = repo.find_for_user(command.user_id) or Cart.create(user_id=command.user_id)
        previous_shop = cart.shop_id

        cart.add_item(
            shop_id=command.shop_id,
            menu_id=command.menu_id,
            option_ids=option_ids,
            quantity=command.quantity,
        )
        repo.add(cart)

        if previous_shop and str(previous_shop) != str(command.shop_id):
            logger.info(
                "Cart reset for a different shop",
                cart_id=str(cart.id),
                previous_shop_id=str(previous_shop),
                shop_id=str(command.shop_id),
            )
        logger.info(
            "Cart item added",
            cart_id=str(cart.id),
            user_id=str(command.user_id),
            menu_id=str(command.menu_id),
            quantity=command.quantity,
        )
        return str(cart.id)

    @handle(RemoveCartItem)
    def remove_cart_item(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.get_for_user(command.user_id)
        cart.remove_item(
            menu_id=command.menu_id,
            option_ids=parse_option_ids(command.option_ids),
        )
        repo.add(cart)
        return str(cart.id)

    @handle(ChangeCartItemQuantity)
    def change_cart_item_quantity(self, command):
        if command.quantity is None or command.quantity <= 0:
            raise CartError(CartErrorCode.INVALID_QUANTITY)

        repo = current_domain.repository_for(Cart)
        cart = repo.get_for_user(command.user_id)
        cart.change_quantity(
            menu_id=command.menu_id,
            option_ids=parse_option_ids(command.option_ids),
            quantity=command.quantity,
        )
        repo.add(cart)
        return str(cart.id)

    def _verify_selection(self, user_id, shop_id, menu_id, option_ids):
        facts = get_fact_provider()

        if not facts.user_is_valid(str(user_id)):
            raise CartError(CartErrorCode.INVALID_USER_ID, str(user_id))

        if not facts.shop_facts(str(shop_id)).open:
            raise CartError(CartErrorCode.SHOP_NOT_OPEN, str(shop_id))

        menu = facts.menu_facts(str(shop_id), str(menu_id))
        if menu is None or not menu.open:
            raise CartError(CartErrorCode.MENU_NOT_AVAILABLE, str(menu_id))

        if option_ids:
            offered = Counter(option.option_id for option in facts.menu_options(str(shop_id), str(menu_id)))
            selected = json.loads(option_key(option_ids))
            missing = [o for o in selected if not offered[o]]
            if missing:
                raise CartError(CartErrorCode.INVALID_OPTION_SELECTION, ", ".join(missing))
            # An id offered by more than one group cannot be priced
            ambiguous = [o for o in selected if offered[o] > 1]
            if ambiguous:
                raise CartError(CartErrorCode.INVALID_OPTION_SELECTION, f"{', '.join(ambiguous)} is ambiguous")
