"""Repository for the Menu aggregate."""

from protean.exceptions import ObjectNotFoundError

from shop.domain import shop
from shop.menu.errors import MenuError, MenuErrorCode
from shop.menu.menu import Menu


@shop.repository(part_of=Menu)
class MenuRepository:
    def get_menu(self, menu_id, shop_id=None) -> Menu:
        """Load a menu, optionally checking it belongs to ``shop_id``."""
        try:
            menu = self.get(str(menu_id))
        except ObjectNotFoundError:
            raise MenuError(MenuErrorCode.MENU_NOT_FOUND, str(menu_id)) from None

        if shop_id is not None and str(menu.shop_id) != str(shop_id):
            raise MenuError(MenuErrorCode.MENU_NOT_FOUND, str(menu_id))
        return menu
