"""Repository for the Cart aggregate."""

from ordering.cart.cart import Cart
from ordering.cart.errors import CartError, CartErrorCode
from ordering.domain import ordering


@ordering.repository(part_of=Cart)
class CartRepository:
    """One cart per user: carts are looked up by their owner."""

    def find_for_user(self, user_id) -> Cart | None:
        record = self._dao.query.filter(user_id=str(user_id)).all().first
        return self.get(record.id) if record else None

    def get_for_user(self, user_id) -> Cart:
        cart = self.find_for_user(user_id)
        if cart is None:
            raise CartError(CartErrorCode.CART_NOT_FOUND, str(user_id))
        return cart
