"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands. Shapes are validated loosely here; business rules
(positive quantities, known menus) are enforced by the domain so that they
surface with their domain error codes.
"""

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Cart Request Schemas
# ---------------------------------------------------------------------------
class AddCartItemRequest(BaseModel):
    shop_id: str | None = None
    menu_id: str | None = None
    option_ids: list[str] = []
    quantity: int | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "shop_id": "shop-001",
                    "menu_id": "menu-001",
                    "option_ids": ["Large", "Extra cheese"],
                    "quantity": 2,
                }
            ]
        }
    }


class ChangeCartItemQuantityRequest(BaseModel):
    option_ids: list[str] = []
    quantity: int | None = None


# ---------------------------------------------------------------------------
# Order Request Schemas
# ---------------------------------------------------------------------------
class PlaceOrderRequest(BaseModel):
    user_id: str


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class CartIdResponse(BaseModel):
    cart_id: str


class OrderIdResponse(BaseModel):
    order_id: str


class StatusResponse(BaseModel):
    status: str = "ok"
