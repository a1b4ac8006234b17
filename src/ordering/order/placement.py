"""Checkout: turn the customer's cart into an order.

The order is written first and the cart cleared second, inside the same unit
of work. If the order cannot be persisted the cart keeps its items.
"""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from ordering.cart.cart import Cart
from ordering.domain import ordering
from ordering.order.order import Order
from shared.errors import EmptyCart

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class PlaceOrder:
    """Check out the customer's cart."""

    customer_id = Identifier(required=True)


@ordering.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        cart_repo = current_domain.repository_for(Cart)
        cart = cart_repo.find_for_customer(command.customer_id)
        if cart is None or not cart.items:
            raise EmptyCart("Cart is empty. Cannot create order.", field="cart")

        # The coupon is re-checked now; one that stopped qualifying grants nothing
        discount = cart.coupon_discount()
        if cart.coupon_code and not discount:
            logger.info(
                "Coupon no longer qualifies at checkout",
                customer_id=str(command.customer_id),
                coupon_code=cart.coupon_code,
                subtotal=cart.subtotal,
            )

        order = Order.place(
            customer_id=command.customer_id,
            lines=[item.to_snapshot() for item in cart.get_items()],
            coupon_code=cart.coupon_code,
            coupon_discount=discount,
        )
        current_domain.repository_for(Order).add(order)

        cart.clear()
        cart_repo.add(cart)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            customer_id=str(command.customer_id),
            total_amount=order.total_amount,
            payable_amount=order.payable_amount,
        )
        return str(order.id)
