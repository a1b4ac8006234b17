"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Product Request Schemas ---


class AddProductRequest(BaseModel):
    model_config = {
        "extra": "forbid",
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Masala Dosa",
                    "description": "Crispy rice crepe with spiced potato filling.",
                    "price": 180.0,
                    "category": "South Indian",
                    "image": "https://cdn.fooddelights.store/masala-dosa.jpg",
                    "ingredients": ["rice", "urad dal", "potato"],
                    "nutrition": {"calories": 350, "protein_g": 8},
                }
            ]
        },
    }

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    price: float = Field(..., ge=0)
    category: str = Field(..., min_length=1, max_length=100)
    image: str | None = Field(None, max_length=1000)
    ingredients: list[str] = Field(default_factory=list)
    nutrition: dict = Field(default_factory=dict)


class UpdateProductRequest(BaseModel):
    model_config = {"extra": "forbid"}

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    price: float | None = Field(None, ge=0)
    category: str | None = Field(None, min_length=1, max_length=100)
    image: str | None = Field(None, max_length=1000)
    ingredients: list[str] | None = None
    nutrition: dict | None = None


class RateProductRequest(BaseModel):
    model_config = {"extra": "forbid"}

    stars: int


# --- Response Schemas ---


class ProductIdResponse(BaseModel):
    product_id: str


class StatusResponse(BaseModel):
    success: bool = True
    message: str = "ok"


class RatingResponse(BaseModel):
    rate: float
    count: int


class ProductResponse(BaseModel):
    product_id: str
    title: str
    description: str | None = None
    price: float
    category: str
    image: str | None = None
    rating: RatingResponse
    ingredients: list[str] = Field(default_factory=list)
    nutrition: dict = Field(default_factory=dict)


class ProductListResponse(BaseModel):
    success: bool = True
    count: int
    products: list[ProductResponse]
