"""Cart lookups scoped to a single customer."""

from ordering.cart.cart import Cart
from ordering.domain import ordering


@ordering.repository(part_of=Cart)
class CartRepository:
    def find_for_customer(self, customer_id) -> Cart | None:
        """Return the customer's cart, or None if they never had one."""
        carts = self.query.filter(customer_id=str(customer_id)).all().items
        if not carts:
            return None
        return self.get(carts[0].id)

    def for_customer(self, customer_id) -> Cart:
        """Return the customer's cart, starting a new (unsaved) one on first use."""
        return self.find_for_customer(customer_id) or Cart.create(customer_id=customer_id)
