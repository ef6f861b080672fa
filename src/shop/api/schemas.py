"""Pydantic request/response schemas for the Shop API."""

from pydantic import BaseModel


class CreateMenuRequest(BaseModel):
    name: str | None = None
    description: str | None = None
    base_price: float | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Margherita",
                    "description": "Tomato, mozzarella, basil",
                    "base_price": 12000,
                }
            ]
        }
    }


class AddOptionGroupRequest(BaseModel):
    name: str | None = None
    required: bool = False


class AddOptionRequest(BaseModel):
    name: str | None = None
    price: float | None = None


class ChangeOptionGroupNameRequest(BaseModel):
    new_name: str | None = None


class ChangeOptionNameRequest(BaseModel):
    current_name: str | None = None
    current_price: float | None = None
    new_name: str | None = None


class MenuIdResponse(BaseModel):
    menu_id: str


class OptionGroupIdResponse(BaseModel):
    option_group_id: str


class StatusResponse(BaseModel):
    status: str = "ok"
