"""Delivery status updates: command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order, parse_status
from shared.errors import NotFoundError


@ordering.command(part_of="Order")
class AdvanceDeliveryStatus:
    """Move an order to the next delivery status (admin only)."""

    order_id = Identifier(required=True)
    status = String(required=True, max_length=50)


@ordering.command_handler(part_of=Order)
class DeliveryStatusHandler:
    @handle(AdvanceDeliveryStatus)
    def advance_delivery_status(self, command):
        # An unknown status is reported before an unknown order
        target = parse_status(command.status)

        repo = current_domain.repository_for(Order)
        try:
            order = repo.get(command.order_id)
        except ObjectNotFoundError:
            raise NotFoundError("Order not found", field="order_id") from None

        order.advance_status(target.value)
        repo.add(order)
        return order.delivery_status
