"""Domain events for the Menu aggregate."""

from protean.fields import Float, Identifier, String, Text

from shop.domain import shop


@shop.event(part_of="Menu")
class MenuCreated:
    """A draft menu was created for a shop."""

    __version__ = 1

    menu_id: Identifier(required=True)
    shop_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    base_price: Float(required=True)


@shop.event(part_of="Menu")
class MenuOpened:
    """A menu was published and its option groups are now visible to customers."""

    __version__ = 1

    menu_id: Identifier(required=True)
    shop_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    description: Text()
