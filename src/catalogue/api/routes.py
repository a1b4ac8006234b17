"""FastAPI endpoints for the Catalogue domain."""

from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain

from catalogue.api.schemas import (
    AddProductRequest,
    ProductIdResponse,
    ProductListResponse,
    ProductResponse,
    RateProductRequest,
    RatingResponse,
    StatusResponse,
    UpdateProductRequest,
)
from catalogue.product.creation import AddProduct
from catalogue.product.details import DeleteProduct, UpdateProduct
from catalogue.product.queries import get_product, list_products
from catalogue.product.rating import RateProduct
from shared.auth import Caller, current_caller, require_admin

product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("", response_model=ProductListResponse)
async def browse_products(
    category: str | None = None,
    search: str | None = None,
    min_price: float | None = Query(None, ge=0),
    max_price: float | None = Query(None, ge=0),
    min_rating: float | None = Query(None, ge=0, le=5),
) -> ProductListResponse:
    products = list_products(
        category=category,
        search=search,
        min_price=min_price,
        max_price=max_price,
        min_rating=min_rating,
    )
    return ProductListResponse(count=len(products), products=[ProductResponse(**p) for p in products])


@product_router.get("/{product_id}", response_model=ProductResponse)
async def product_details(product_id: str) -> ProductResponse:
    return ProductResponse(**get_product(product_id))


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def add_product(body: AddProductRequest, caller: Caller = Depends(require_admin)) -> ProductIdResponse:  # noqa: ARG001
    command = AddProduct(
        title=body.title,
        description=body.description,
        price=body.price,
        category=body.category,
        image=body.image,
        ingredients=body.ingredients,
        nutrition=body.nutrition,
    )
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


@product_router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    body: UpdateProductRequest,
    caller: Caller = Depends(require_admin),  # noqa: ARG001
) -> ProductResponse:
    changes = body.model_dump(exclude_none=True)
    command = UpdateProduct(product_id=product_id, changed_fields=sorted(changes), **changes)
    current_domain.process(command, asynchronous=False)
    return ProductResponse(**get_product(product_id))


@product_router.delete("/{product_id}", response_model=StatusResponse)
async def delete_product(product_id: str, caller: Caller = Depends(require_admin)) -> StatusResponse:  # noqa: ARG001
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return StatusResponse(message="Product deleted")


@product_router.post("/{product_id}/ratings", response_model=RatingResponse)
async def rate_product(
    product_id: str,
    body: RateProductRequest,
    caller: Caller = Depends(current_caller),
) -> RatingResponse:
    command = RateProduct(product_id=product_id, customer_id=caller.customer_id, stars=body.stars)
    rating = current_domain.process(command, asynchronous=False)
    return RatingResponse(**rating)
