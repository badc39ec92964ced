"""Pydantic request/response schemas for the Dining API.

These are external contracts, kept apart from the internal Protean commands.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from dining.access.user import Country


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class LineItemSchema(BaseModel):
    menu_item_id: str
    quantity: int = Field(ge=1)


class MenuItemSchema(BaseModel):
    name: str
    price: float = Field(ge=0)
    description: str | None = None


class CreatorSchema(BaseModel):
    id: str
    email: str | None = None


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------
class PlaceOrderRequest(BaseModel):
    items: list[LineItemSchema] = Field(min_length=1)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"items": [{"menu_item_id": "7f8d1c52-2b0a-4d0c-9f56-0d1f0c2e9a11", "quantity": 2}]},
            ]
        }
    }


class CreateSharedCartRequest(BaseModel):
    country: Country
    items: list[LineItemSchema] = Field(min_length=1)


class AddSharedCartItemsRequest(BaseModel):
    items: list[LineItemSchema] = Field(min_length=1)


class RegisterRestaurantRequest(BaseModel):
    name: str
    country: Country
    menu_items: list[MenuItemSchema] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
class OrderItemResponse(BaseModel):
    menu_item_id: str
    name: str | None = None
    unit_price: float
    quantity: int


class OrderResponse(BaseModel):
    id: str
    owner_id: str
    owner_country: str
    status: str
    total: float
    items: list[OrderItemResponse]
    created_at: datetime | None = None


class SharedCartItemResponse(BaseModel):
    menu_item_id: str
    quantity: int
    name: str | None = None
    price: float | None = None


class SharedCartResponse(BaseModel):
    id: str
    share_code: str
    country: str
    created_by: CreatorSchema
    items: list[SharedCartItemResponse]
    created_at: datetime | None = None


class MenuItemResponse(BaseModel):
    id: str
    name: str
    price: float
    description: str | None = None


class RestaurantResponse(BaseModel):
    id: str
    name: str
    country: str
    menu_items: list[MenuItemResponse] = Field(default_factory=list)


class RestaurantIdResponse(BaseModel):
    restaurant_id: str


class AddPaymentMethodRequest(BaseModel):
    user_id: str
    method_type: str = Field(min_length=1, max_length=50)
    details: str = Field(min_length=1, max_length=500)


class PaymentMethodResponse(BaseModel):
    id: str
    user_id: str
    method_type: str
    details: str
    country: str
    created_at: datetime | None = None
