"""Domain events for the Cart aggregate."""

from protean.fields import Identifier, Integer

from ordering.domain import ordering


@ordering.event(part_of="Cart")
class CartItemAdded:
    """A menu selection was added to the cart.

    ``quantity`` is the quantity added by this call, not the merged line total.
    """

    __version__ = 1

    cart_id = Identifier(required=True)
    user_id = Identifier(required=True)
    shop_id = Identifier(required=True)
    menu_id = Identifier(required=True)
    quantity = Integer(required=True)
