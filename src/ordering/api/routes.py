"""FastAPI endpoints for the Ordering domain.

The caller comes from the forwarded session headers. Carts and "my orders"
are always scoped to that caller; admin routes require the admin role.
"""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from ordering.api.schemas import (
    AddCartItemRequest,
    ApplyCouponRequest,
    CartResponse,
    CouponAppliedResponse,
    CustomerResponse,
    ItemAddedResponse,
    OrderListResponse,
    OrderPlacedResponse,
    OrderResponse,
    OrderStatusResponse,
    StatusResponse,
    UpdateCartQuantityRequest,
    UpdateOrderStatusRequest,
    UpsertCustomerRequest,
)
from ordering.cart.coupons import ApplyCoupon, RemoveCoupon
from ordering.cart.items import AddCartItem, RemoveCartItem, UpdateCartQuantity
from ordering.cart.management import ClearCart
from ordering.cart.queries import get_cart
from ordering.customer.customer import Customer
from ordering.customer.directory import UpsertCustomer
from ordering.order.placement import PlaceOrder
from ordering.order.queries import get_order, list_orders
from ordering.order.status import AdvanceDeliveryStatus
from shared.auth import Caller, current_caller, require_admin
from shared.errors import NotFoundError

cart_router = APIRouter(prefix="/cart", tags=["cart"])
order_router = APIRouter(prefix="/orders", tags=["orders"])
customer_router = APIRouter(prefix="/customers", tags=["customers"])


# ---------------------------------------------------------------------------
# Cart endpoints
# ---------------------------------------------------------------------------
@cart_router.post("/add_item", status_code=201, response_model=ItemAddedResponse)
async def add_item(body: AddCartItemRequest, caller: Caller = Depends(current_caller)) -> ItemAddedResponse:
    command = AddCartItem(
        customer_id=caller.customer_id,
        product_id=body.product_id,
        name=body.name,
        image=body.image,
        category=body.category,
        description=body.description,
        original_price=body.original_price,
        discount_price=body.discount_price,
        quantity=body.quantity,
    )
    item_id = current_domain.process(command, asynchronous=False)
    return ItemAddedResponse(item_id=item_id)


@cart_router.get("/get_cart_items", response_model=CartResponse)
async def get_cart_items(caller: Caller = Depends(current_caller)) -> CartResponse:
    return CartResponse(**get_cart(caller.customer_id))


@cart_router.patch("/update_cart_quantity", response_model=StatusResponse)
async def update_cart_quantity(
    body: UpdateCartQuantityRequest, caller: Caller = Depends(current_caller)
) -> StatusResponse:
    command = UpdateCartQuantity(
        customer_id=caller.customer_id,
        item_id=body.item_id,
        quantity=body.quantity,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse(message="Quantity updated")


@cart_router.delete("/delete_cart_item/{name}", response_model=StatusResponse)
async def delete_cart_item(name: str, caller: Caller = Depends(current_caller)) -> StatusResponse:
    command = RemoveCartItem(customer_id=caller.customer_id, name=name)
    current_domain.process(command, asynchronous=False)
    return StatusResponse(message="Item removed from cart")


@cart_router.delete("/clear_cart", response_model=StatusResponse)
async def clear_cart(caller: Caller = Depends(current_caller)) -> StatusResponse:
    current_domain.process(ClearCart(customer_id=caller.customer_id), asynchronous=False)
    return StatusResponse(message="Cart cleared")


@cart_router.post("/apply_coupon", response_model=CouponAppliedResponse)
async def apply_coupon(body: ApplyCouponRequest, caller: Caller = Depends(current_caller)) -> CouponAppliedResponse:
    command = ApplyCoupon(customer_id=caller.customer_id, coupon_code=body.code)
    discount = current_domain.process(command, asynchronous=False)
    cart = get_cart(caller.customer_id)
    return CouponAppliedResponse(coupon_code=cart["coupon_code"], discount=discount, payable=cart["payable"])


@cart_router.delete("/remove_coupon", response_model=StatusResponse)
async def remove_coupon(caller: Caller = Depends(current_caller)) -> StatusResponse:
    current_domain.process(RemoveCoupon(customer_id=caller.customer_id), asynchronous=False)
    return StatusResponse(message="Coupon removed")


# ---------------------------------------------------------------------------
# Order endpoints
# ---------------------------------------------------------------------------
@order_router.post("", status_code=201, response_model=OrderPlacedResponse)
async def place_order(caller: Caller = Depends(current_caller)) -> OrderPlacedResponse:
    order_id = current_domain.process(PlaceOrder(customer_id=caller.customer_id), asynchronous=False)
    return OrderPlacedResponse(order=OrderResponse(**get_order(order_id, caller.customer_id)))


@order_router.get("", response_model=OrderListResponse)
async def list_all_orders(caller: Caller = Depends(require_admin)) -> OrderListResponse:  # noqa: ARG001
    orders = list_orders()
    return OrderListResponse(count=len(orders), orders=[OrderResponse(**o) for o in orders])


@order_router.get("/myorders", response_model=OrderListResponse)
async def list_my_orders(caller: Caller = Depends(current_caller)) -> OrderListResponse:
    orders = list_orders(caller.customer_id)
    return OrderListResponse(count=len(orders), orders=[OrderResponse(**o) for o in orders])


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_single_order(order_id: str, caller: Caller = Depends(current_caller)) -> OrderResponse:
    return OrderResponse(**get_order(order_id, caller.customer_id, is_admin=caller.is_admin))


@order_router.patch("/{order_id}/status", response_model=OrderStatusResponse)
async def update_order_status(
    order_id: str,
    body: UpdateOrderStatusRequest,
    caller: Caller = Depends(require_admin),
) -> OrderStatusResponse:
    command = AdvanceDeliveryStatus(order_id=order_id, status=body.status)
    new_status = current_domain.process(command, asynchronous=False)
    order = get_order(order_id, caller.customer_id, is_admin=True)
    return OrderStatusResponse(message=f"Order status updated to {new_status}", order=OrderResponse(**order))


# ---------------------------------------------------------------------------
# Customer directory endpoints
# ---------------------------------------------------------------------------
@customer_router.put("/me", response_model=CustomerResponse)
async def upsert_me(body: UpsertCustomerRequest, caller: Caller = Depends(current_caller)) -> CustomerResponse:
    command = UpsertCustomer(customer_id=caller.customer_id, name=body.name, email=str(body.email))
    current_domain.process(command, asynchronous=False)
    return CustomerResponse(customer_id=caller.customer_id, name=body.name, email=str(body.email))


@customer_router.get("/me", response_model=CustomerResponse)
async def get_me(caller: Caller = Depends(current_caller)) -> CustomerResponse:
    customer = current_domain.repository_for(Customer).get_or_none(caller.customer_id)
    if customer is None:
        raise NotFoundError("Customer profile not found", field="customer_id")
    return CustomerResponse(customer_id=str(customer.customer_id), name=customer.name, email=customer.email)
