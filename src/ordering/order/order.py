"""Order aggregate: an immutable snapshot of a checked-out cart.

Only the delivery status (and ``updated_at``) changes after placement.
Orders are never deleted.

State Machine:
    PENDING → SHIPPED → DELIVERED (terminal)
"""

import math
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text

from ordering.domain import ordering
from ordering.order.events import DeliveryStatusChanged, OrderPlaced
from shared.errors import InvalidStatus, InvalidTransition


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class DeliveryStatus(Enum):
    PENDING = "Pending"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"


# State machine transition map
_VALID_TRANSITIONS = {
    DeliveryStatus.PENDING: {DeliveryStatus.SHIPPED},
    DeliveryStatus.SHIPPED: {DeliveryStatus.DELIVERED},
    DeliveryStatus.DELIVERED: set(),  # Terminal
}


def parse_status(value):
    """Resolve a requested status name, raising ``InvalidStatus`` for unknown values."""
    try:
        return DeliveryStatus(value)
    except ValueError:
        raise InvalidStatus(
            f"Invalid delivery status '{value}'; expected one of "
            + ", ".join(s.value for s in DeliveryStatus),
            field="status",
        ) from None


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderItem:
    """A copy of a cart line taken at checkout. No live link to the catalogue."""

    product_id = Identifier()
    name = String(required=True, max_length=255, sanitize=False)
    image = String(max_length=1000)
    category = String(max_length=100)
    description = Text()
    original_price = Float(required=True, min_value=0.0)
    discount_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)

    @property
    def line_total(self):
        return round(self.discount_price * self.quantity, 2)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    customer_id = Identifier(required=True)
    items = HasMany(OrderItem)
    total_amount = Float(required=True, min_value=0.0)
    coupon_code = String(max_length=50)
    coupon_discount = Float(default=0.0, min_value=0.0)
    payable_amount = Float(required=True, min_value=0.0)
    delivery_status = String(choices=DeliveryStatus, default=DeliveryStatus.PENDING.value)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def payable_amount_is_total_less_discount(self):
        if not math.isclose(self.payable_amount, self.total_amount - (self.coupon_discount or 0.0), abs_tol=0.01):
            raise ValidationError({"payable_amount": ["Payable amount must equal total amount less coupon discount"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, customer_id, lines, coupon_code=None, coupon_discount=0.0):
        """Create a ``Pending`` order from cart line snapshots.

        ``total_amount`` is the pre-coupon sum of ``discount_price * quantity``.
        A coupon that granted nothing is not recorded on the order.
        """
        total_amount = round(sum(line["discount_price"] * line["quantity"] for line in lines), 2)
        coupon_discount = round(coupon_discount or 0.0, 2)
        if not coupon_discount:
            coupon_code = None

        now = datetime.now(UTC)
        order = cls(
            customer_id=customer_id,
            items=[OrderItem(**line) for line in lines],
            total_amount=total_amount,
            coupon_code=coupon_code,
            coupon_discount=coupon_discount,
            payable_amount=round(total_amount - coupon_discount, 2),
            delivery_status=DeliveryStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_id=str(customer_id),
                item_count=len(lines),
                total_amount=order.total_amount,
                coupon_code=order.coupon_code,
                coupon_discount=order.coupon_discount,
                payable_amount=order.payable_amount,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Delivery lifecycle
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target):
        current = DeliveryStatus(self.delivery_status)
        if target not in _VALID_TRANSITIONS.get(current, set()):
            raise InvalidTransition(
                f"Cannot transition from {current.value} to {target.value}",
                field="status",
            )

    def advance_status(self, requested_status):
        """Move the order one step forward. Skips, reversals and repeats are rejected."""
        target = parse_status(requested_status)
        self._assert_can_transition(target)

        previous = self.delivery_status
        now = datetime.now(UTC)
        self.delivery_status = target.value
        self.updated_at = now

        self.raise_(
            DeliveryStatusChanged(
                order_id=str(self.id),
                customer_id=str(self.customer_id),
                previous_status=previous,
                new_status=target.value,
                changed_at=now,
            )
        )
