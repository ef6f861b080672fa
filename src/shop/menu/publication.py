"""Menu publication — command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from shop.domain import shop
from shop.menu.menu import Menu

logger = structlog.get_logger(__name__)


@shop.command(part_of="Menu")
class OpenMenu:
    menu_id: Identifier(required=True)


@shop.command_handler(part_of=Menu)
class OpenMenuHandler:
    @handle(OpenMenu)
    def open_menu(self, command):
        repo = current_domain.repository_for(Menu)
        menu = repo.get_menu(command.menu_id)
        menu.open()
        repo.add(menu)

        logger.info(
            "Menu opened",
            menu_id=str(menu.id),
            shop_id=str(menu.shop_id),
            option_groups=len(menu.option_groups),
            required_groups=menu.required_group_count,
        )
