"""Order lookups for customer and admin listings."""

from ordering.domain import ordering
from ordering.order.order import Order


@ordering.repository(part_of=Order)
class OrderRepository:
    def placed_by(self, customer_id) -> list[Order]:
        """Orders placed by one customer, newest first."""
        return self.query.filter(customer_id=str(customer_id)).order_by("-created_at").limit(None).all().items

    def newest_first(self) -> list[Order]:
        return self.query.order_by("-created_at").limit(None).all().items
