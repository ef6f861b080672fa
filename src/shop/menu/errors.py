"""Menu fault codes."""

from shared.errors import DomainError, ErrorCode


class MenuErrorCode(ErrorCode):
    # Creation
    SHOP_ID_REQUIRED = ("MENU-DOMAIN-001", "Shop id is required")
    MENU_NAME_REQUIRED = ("MENU-DOMAIN-002", "Menu name is required")
    BASE_PRICE_REQUIRED = ("MENU-DOMAIN-003", "Base price is required")
    INVALID_BASE_PRICE = ("MENU-DOMAIN-004", "Base price cannot be negative")
    MENU_NOT_FOUND = ("MENU-DOMAIN-005", "Menu not found")

    # Publication
    MENU_ALREADY_OPEN = ("MENU-DOMAIN-006", "Menu is already open")
    INSUFFICIENT_OPTION_GROUPS = ("MENU-DOMAIN-007", "A menu needs at least one option group to open")
    INVALID_REQUIRED_OPTION_GROUP_COUNT = ("MENU-DOMAIN-008", "A menu needs between 1 and 3 required option groups")
    NO_PAID_OPTION_GROUP = ("MENU-DOMAIN-009", "A menu needs at least one option group with a paid option")

    # Option groups and options
    NEW_OPTION_GROUP_NAME_REQUIRED = ("MENU-DOMAIN-010", "Option group name is required")
    OPTION_GROUP_NOT_FOUND = ("MENU-DOMAIN-011", "Option group not found")
    DUPLICATE_OPTION_GROUP_NAME = ("MENU-DOMAIN-012", "Option group name already exists on this menu")
    MAX_REQUIRED_OPTION_GROUPS_EXCEEDED = ("MENU-DOMAIN-013", "An open menu allows at most 3 required option groups")
    OPTION_GROUP_ID_REQUIRED = ("MENU-DOMAIN-014", "Option group id is required")
    CURRENT_OPTION_NAME_REQUIRED = ("MENU-DOMAIN-015", "Current option name is required")
    CURRENT_OPTION_PRICE_REQUIRED = ("MENU-DOMAIN-016", "Current option price is required")
    NEW_OPTION_NAME_REQUIRED = ("MENU-DOMAIN-017", "Option name is required")
    NEW_OPTION_PRICE_REQUIRED = ("MENU-DOMAIN-018", "Option price is required")
    CANNOT_DELETE_REQUIRED_OPTION_GROUP = (
        "MENU-DOMAIN-019",
        "Removing this option group would leave the open menu unpublishable",
    )
    OPTION_NOT_FOUND = ("MENU-DOMAIN-022", "Option not found")
    DUPLICATE_OPTION = ("MENU-DOMAIN-023", "Option with this name and price already exists in the group")
    INVALID_OPTION_PRICE = ("MENU-DOMAIN-024", "Option price cannot be negative")


class MenuError(DomainError):
    field = "menu"
