"""Cart coupon management: commands and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from ordering.cart.cart import Cart
from ordering.domain import ordering


@ordering.command(part_of="Cart")
class ApplyCoupon:
    """Apply a coupon code to the customer's cart."""

    customer_id = Identifier(required=True)
    coupon_code = String(required=True, max_length=50)


@ordering.command(part_of="Cart")
class RemoveCoupon:
    """Drop the coupon currently active on the customer's cart."""

    customer_id = Identifier(required=True)


@ordering.command_handler(part_of=Cart)
class CartCouponHandler:
    @handle(ApplyCoupon)
    def apply_coupon(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.for_customer(command.customer_id)
        discount = cart.apply_coupon(command.coupon_code)
        repo.add(cart)
        return discount

    @handle(RemoveCoupon)
    def remove_coupon(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.for_customer(command.customer_id)
        cart.remove_coupon()
        repo.add(cart)
