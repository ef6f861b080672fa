"""Domain events for the Order aggregate."""

from protean.fields import Float, Identifier

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderPlaced:
    """A cart was frozen into an order. Prices are those in effect at placement."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    shop_id = Identifier(required=True)
    total_price = Float(required=True)
