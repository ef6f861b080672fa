"""Menu creation — command and handler."""

import structlog
from protean import handle
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from shop.domain import shop
from shop.menu.menu import Menu

logger = structlog.get_logger(__name__)


@shop.command(part_of="Menu")
class CreateMenu:
    shop_id: Identifier()
    name: String(max_length=255)
    description: Text()
    base_price: Float()


@shop.command_handler(part_of=Menu)
class CreateMenuHandler:
    @handle(CreateMenu)
    def create_menu(self, command):
        menu = Menu.create(
            shop_id=command.shop_id,
            name=command.name,
            description=command.description,
            base_price=command.base_price,
        )
        current_domain.repository_for(Menu).add(menu)

        logger.info("Menu created", menu_id=str(menu.id), shop_id=str(menu.shop_id), name=menu.name)
        return str(menu.id)
