"""Order fault codes."""

from shared.errors import DomainError, ErrorCode


class OrderErrorCode(ErrorCode):
    EMPTY_ORDER_ITEMS = ("ORDER-DOMAIN-003", "An order needs at least one item")
    INVALID_USER_ID = ("ORDER-DOMAIN-008", "Invalid user id")
    INVALID_SHOP_ID = ("ORDER-DOMAIN-009", "Invalid shop id")


class OrderError(DomainError):
    field = "order"
