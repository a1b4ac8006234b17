"""Cart management: clearing a cart on request."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from ordering.cart.cart import Cart
from ordering.domain import ordering


@ordering.command(part_of="Cart")
class ClearCart:
    """Remove every item (and the coupon) from the customer's cart."""

    customer_id = Identifier(required=True)


@ordering.command_handler(part_of=Cart)
class ManageCartHandler:
    @handle(ClearCart)
    def clear_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.find_for_customer(command.customer_id)
        if cart is None:
            return
        cart.clear()
        repo.add(cart)
