"""Pydantic request/response schemas for the Ordering API.

These are external contracts, separate from the internal Protean commands.
Request bodies reject unknown fields.
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


# ---------------------------------------------------------------------------
# Cart Request Schemas
# ---------------------------------------------------------------------------
class AddCartItemRequest(BaseModel):
    product_id: str | None = None
    name: str = Field(min_length=1, max_length=255)
    image: str | None = None
    category: str | None = None
    description: str | None = None
    original_price: float = Field(ge=0)
    discount_price: float = Field(ge=0)
    quantity: int = 1

    model_config = {
        "extra": "forbid",
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Paneer Tikka",
                    "image": "https://cdn.fooddelights.store/paneer-tikka.jpg",
                    "category": "Starters",
                    "description": "Char-grilled cottage cheese with spices",
                    "original_price": 320.0,
                    "discount_price": 280.0,
                    "quantity": 2,
                }
            ]
        },
    }


class UpdateCartQuantityRequest(BaseModel):
    item_id: str
    quantity: int

    model_config = {"extra": "forbid"}


class ApplyCouponRequest(BaseModel):
    code: str = Field(min_length=1, max_length=50)

    model_config = {"extra": "forbid", "json_schema_extra": {"examples": [{"code": "FIRST20"}]}}


# ---------------------------------------------------------------------------
# Order Request Schemas
# ---------------------------------------------------------------------------
class UpdateOrderStatusRequest(BaseModel):
    status: str

    model_config = {"extra": "forbid", "json_schema_extra": {"examples": [{"status": "Shipped"}]}}


# ---------------------------------------------------------------------------
# Customer Request Schemas
# ---------------------------------------------------------------------------
class UpsertCustomerRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr

    model_config = {"extra": "forbid"}


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    success: bool = True
    message: str = "ok"


class LineItemResponse(BaseModel):
    item_id: str
    product_id: str | None = None
    name: str
    image: str | None = None
    category: str | None = None
    description: str | None = None
    original_price: float
    discount_price: float
    quantity: int
    line_total: float


class CartResponse(BaseModel):
    success: bool = True
    items: list[LineItemResponse]
    item_count: int
    subtotal: float
    coupon_code: str | None = None
    discount: float
    payable: float


class ItemAddedResponse(BaseModel):
    success: bool = True
    message: str = "Item added to cart"
    item_id: str


class CouponAppliedResponse(BaseModel):
    success: bool = True
    message: str = "Coupon applied"
    coupon_code: str
    discount: float
    payable: float


class OrderResponse(BaseModel):
    order_id: str
    customer_id: str
    customer_name: str | None = None
    customer_email: str | None = None
    items: list[LineItemResponse]
    total_amount: float
    coupon_code: str | None = None
    coupon_discount: float = 0.0
    payable_amount: float
    delivery_status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OrderPlacedResponse(BaseModel):
    success: bool = True
    message: str = "Order placed successfully!"
    order: OrderResponse


class OrderListResponse(BaseModel):
    success: bool = True
    count: int
    orders: list[OrderResponse]


class OrderStatusResponse(BaseModel):
    success: bool = True
    message: str
    order: OrderResponse


class CustomerResponse(BaseModel):
    customer_id: str
    name: str
    email: str
