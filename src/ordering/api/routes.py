"""FastAPI routes for the Ordering domain — carts and orders."""

import json

from fastapi import APIRouter, Query
from protean.utils.globals import current_domain

from ordering.api.schemas import (
    AddCartItemRequest,
    CartIdResponse,
    ChangeCartItemQuantityRequest,
    OrderIdResponse,
    PlaceOrderRequest,
    StatusResponse,
)
from ordering.cart.items import AddCartItem, ChangeCartItemQuantity, RemoveCartItem
from ordering.order.placement import PlaceOrder

# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/carts", tags=["carts"])


@cart_router.post("/{user_id}/items", response_model=CartIdResponse)
async def add_cart_item(user_id: str, body: AddCartItemRequest) -> CartIdResponse:
    command = AddCartItem(
        user_id=user_id,
        shop_id=body.shop_id,
        menu_id=body.menu_id,
        option_ids=json.dumps(body.option_ids),
        quantity=body.quantity,
    )
    result = current_domain.process(command, asynchronous=False)
    return CartIdResponse(cart_id=result)


@cart_router.put("/{user_id}/items/{menu_id}", response_model=StatusResponse)
async def change_cart_item_quantity(
    user_id: str, menu_id: str, body: ChangeCartItemQuantityRequest
) -> StatusResponse:
    command = ChangeCartItemQuantity(
        user_id=user_id,
        menu_id=menu_id,
        option_ids=json.dumps(body.option_ids),
        quantity=body.quantity,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.delete("/{user_id}/items/{menu_id}", response_model=StatusResponse)
async def remove_cart_item(
    user_id: str,
    menu_id: str,
    option_ids: str = Query(default="", description="Comma separated option ids, or a JSON list"),
) -> StatusResponse:
    command = RemoveCartItem(user_id=user_id, menu_id=menu_id, option_ids=option_ids)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderIdResponse)
async def place_order(body: PlaceOrderRequest) -> OrderIdResponse:
    command = PlaceOrder(user_id=body.user_id)
    result = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=result)
