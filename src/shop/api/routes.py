"""FastAPI routes for the Shop domain — menu authoring and published menu facts."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from shop.api.schemas import (
    AddOptionGroupRequest,
    AddOptionRequest,
    ChangeOptionGroupNameRequest,
    ChangeOptionNameRequest,
    CreateMenuRequest,
    MenuIdResponse,
    OptionGroupIdResponse,
    StatusResponse,
)
from shop.menu.creation import CreateMenu
from shop.menu.menu import Menu
from shop.menu.option_groups import (
    AddOption,
    AddOptionGroup,
    ChangeOptionGroupName,
    ChangeOptionName,
    RemoveOptionGroup,
)
from shop.menu.publication import OpenMenu

# ---------------------------------------------------------------------------
# Shop Router — menus as seen from their shop
# ---------------------------------------------------------------------------
shop_router = APIRouter(prefix="/shops", tags=["shops"])


@shop_router.post("/{shop_id}/menus", status_code=201, response_model=MenuIdResponse)
async def create_menu(shop_id: str, body: CreateMenuRequest) -> MenuIdResponse:
    command = CreateMenu(
        shop_id=shop_id,
        name=body.name,
        description=body.description,
        base_price=body.base_price,
    )
    result = current_domain.process(command, asynchronous=False)
    return MenuIdResponse(menu_id=result)


@shop_router.get("/{shop_id}/menus/{menu_id}")
async def get_menu_facts(shop_id: str, menu_id: str) -> dict:
    menu = current_domain.repository_for(Menu).get_menu(menu_id, shop_id=shop_id)
    return {"menu": menu.to_facts()}


@shop_router.get("/{shop_id}/menus/{menu_id}/options")
async def get_menu_options(shop_id: str, menu_id: str) -> dict:
    menu = current_domain.repository_for(Menu).get_menu(menu_id, shop_id=shop_id)
    return {"menu": menu.to_facts()}


# ---------------------------------------------------------------------------
# Menu Router — option groups and publication
# ---------------------------------------------------------------------------
menu_router = APIRouter(prefix="/menus", tags=["menus"])


@menu_router.post("/{menu_id}/option-groups", status_code=201, response_model=OptionGroupIdResponse)
async def add_option_group(menu_id: str, body: AddOptionGroupRequest) -> OptionGroupIdResponse:
    command = AddOptionGroup(menu_id=menu_id, name=body.name, required=body.required)
    result = current_domain.process(command, asynchronous=False)
    return OptionGroupIdResponse(option_group_id=result)


@menu_router.post("/{menu_id}/option-groups/{group_id}/options", status_code=201, response_model=StatusResponse)
async def add_option(menu_id: str, group_id: str, body: AddOptionRequest) -> StatusResponse:
    command = AddOption(menu_id=menu_id, option_group_id=group_id, name=body.name, price=body.price)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@menu_router.put("/{menu_id}/option-groups/{group_id}", response_model=StatusResponse)
async def change_option_group_name(menu_id: str, group_id: str, body: ChangeOptionGroupNameRequest) -> StatusResponse:
    command = ChangeOptionGroupName(menu_id=menu_id, option_group_id=group_id, new_name=body.new_name)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@menu_router.put("/{menu_id}/option-groups/{group_id}/options", response_model=StatusResponse)
async def change_option_name(menu_id: str, group_id: str, body: ChangeOptionNameRequest) -> StatusResponse:
    command = ChangeOptionName(
        menu_id=menu_id,
        option_group_id=group_id,
        current_name=body.current_name,
        current_price=body.current_price,
        new_name=body.new_name,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@menu_router.delete("/{menu_id}/option-groups/{group_id}", response_model=StatusResponse)
async def remove_option_group(menu_id: str, group_id: str) -> StatusResponse:
    command = RemoveOptionGroup(menu_id=menu_id, option_group_id=group_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@menu_router.post("/{menu_id}/open", response_model=StatusResponse)
async def open_menu(menu_id: str) -> StatusResponse:
    command = OpenMenu(menu_id=menu_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()
