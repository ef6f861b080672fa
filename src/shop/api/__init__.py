"""Shop domain API package."""

from shop.api.routes import menu_router, shop_router

__all__ = ["shop_router", "menu_router"]
