"""Pydantic request/response schemas for the cart and order API.

These are external contracts, kept separate from the Protean commands.
"""

from datetime import datetime

from pydantic import Field

from myecom.api.schemas import Amount, ApiModel, NonBlankStr


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class CartItemRequest(ApiModel):
    product_id: NonBlankStr
    quantity: int = Field(ge=1)


class CartItemResponse(ApiModel):
    id: str
    product_id: str
    product_name: str
    unit_price: Amount
    product_image_url: str | None = None
    quantity: int
    total_price: Amount
    product_in_stock: bool


class CartResponse(ApiModel):
    id: str
    items: list[CartItemResponse]
    total_amount: Amount
    total_items: int
    updated_at: datetime | None = None


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class CreateOrderRequest(ApiModel):
    shipping_address: NonBlankStr = Field(max_length=500)
    notes: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "shippingAddress": "Via Roma 1, Milano",
                    "notes": "Citofonare Rossi",
                }
            ]
        }
    }


class OrderItemResponse(ApiModel):
    id: str
    product_id: str
    product_name: str
    quantity: int
    unit_price: Amount
    total_price: Amount


class OrderResponse(ApiModel):
    id: str
    order_number: str
    status: str
    total_amount: Amount
    shipping_address: str
    notes: str | None = None
    created_at: str | None = None
    items: list[OrderItemResponse]
