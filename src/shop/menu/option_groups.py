"""Option group management — commands and handler."""

from protean import handle
from protean.fields import Boolean, Float, Identifier, String
from protean.utils.globals import current_domain

from shop.domain import shop
from shop.menu.menu import Menu


@shop.command(part_of="Menu")
class AddOptionGroup:
    menu_id: Identifier(required=True)
    name: String(max_length=255)
    required: Boolean(default=False)


@shop.command(part_of="Menu")
class AddOption:
    menu_id: Identifier(required=True)
    option_group_id: Identifier()
    name: String(max_length=255)
    price: Float()


@shop.command(part_of="Menu")
class ChangeOptionGroupName:
    menu_id: Identifier(required=True)
    option_group_id: Identifier()
    new_name: String(max_length=255)


@shop.command(part_of="Menu")
class ChangeOptionName:
    menu_id: Identifier(required=True)
    option_group_id: Identifier()
    current_name: String(max_length=255)
    current_price: Float()
    new_name: String(max_length=255)


@shop.command(part_of="Menu")
class RemoveOptionGroup:
    menu_id: Identifier(required=True)
    option_group_id: Identifier()


@shop.command_handler(part_of=Menu)
class ManageOptionGroupsHandler:
    @handle(AddOptionGroup)
    def add_option_group(self, command):
        repo = current_domain.repository_for(Menu)
        menu = repo.get_menu(command.menu_id)
        group = menu.add_option_group(name=command.name, required=command.required)
        repo.add(menu)
        return str(group.id)

    @handle(AddOption)
    def add_option(self, command):
        repo = current_domain.repository_for(Menu)
        menu = repo.get_menu(command.menu_id)
        menu.add_option(
            option_group_id=command.option_group_id,
            name=command.name,
            price=command.price,
        )
        repo.add(menu)

    @handle(ChangeOptionGroupName)
    def change_option_group_name(self, command):
        repo = current_domain.repository_for(Menu)
        menu = repo.get_menu(command.menu_id)
        menu.change_option_group_name(
            option_group_id=command.option_group_id,
            new_name=command.new_name,
        )
        repo.add(menu)

    @handle(ChangeOptionName)
    def change_option_name(self, command):
        repo = current_domain.repository_for(Menu)
        menu = repo.get_menu(command.menu_id)
        menu.change_option_name(
            option_group_id=command.option_group_id,
            current_name=command.current_name,
            current_price=command.current_price,
            new_name=command.new_name,
        )
        repo.add(menu)

    @handle(RemoveOptionGroup)
    def remove_option_group(self, command):
        repo = current_domain.repository_for(Menu)
        menu = repo.get_menu(command.menu_id)
        menu.remove_option_group(option_group_id=command.option_group_id)
        repo.add(menu)
