"""Shopping cart fault codes."""

from shared.errors import DomainError, ErrorCode


class CartErrorCode(ErrorCode):
    CART_NOT_FOUND = ("CART-DOMAIN-001", "Cart not found")
    DIFFERENT_SHOP_MENU = ("CART-DOMAIN-002", "Menus from a different shop cannot be added")
    EMPTY_CART = ("CART-DOMAIN-003", "Cart is empty")
    MINIMUM_ORDER_AMOUNT_NOT_MET = ("CART-DOMAIN-004", "Minimum order amount not met")
    INVALID_MENU_ID = ("CART-DOMAIN-005", "Invalid menu id")
    INVALID_QUANTITY = ("CART-DOMAIN-006", "Quantity must be at least 1")
    SHOP_NOT_OPEN = ("CART-DOMAIN-007", "Shop is not open")
    INVALID_USER_ID = ("CART-DOMAIN-008", "Invalid user id")
    INVALID_SHOP_ID = ("CART-DOMAIN-009", "Invalid shop id")
    MENU_NOT_AVAILABLE = ("CART-DOMAIN-010", "Menu is not available")
    INVALID_OPTION_SELECTION = ("CART-DOMAIN-011", "Selected option is not offered by the menu")
    CART_ITEM_NOT_FOUND = ("CART-DOMAIN-012", "Cart item not found")


class CartError(DomainError):
    field = "cart"
