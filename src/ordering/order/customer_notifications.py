"""Customer notifications for order events.

Looks up the order and the customer's directory entry and asks the
notification dispatcher to email them. Delivery is best-effort: nothing
raised here may fail the write that produced the event.
"""

import structlog
from protean.utils.mixins import handle
from protean.utils.globals import current_domain

from notifications.dispatcher import get_dispatcher
from ordering.customer.customer import Customer
from ordering.domain import ordering
from ordering.order.events import DeliveryStatusChanged, OrderPlaced
from ordering.order.order import Order

logger = structlog.get_logger(__name__)


@ordering.event_handler(part_of=Order)
class OrderNotificationsHandler:
    """Emails customers when an order is placed or its delivery status changes."""

    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        try:
            order, customer = self._load(event)
            if customer is None:
                return
            sent = get_dispatcher().notify_order_created(order, customer.email, customer.name)
        except Exception as exc:
            logger.error("Order confirmation failed", order_id=str(event.order_id), error=str(exc))
            return

        logger.info("Order confirmation processed", order_id=str(event.order_id), sent=sent)

    @handle(DeliveryStatusChanged)
    def on_delivery_status_changed(self, event: DeliveryStatusChanged) -> None:
        try:
            order, customer = self._load(event)
            if customer is None:
                return
            sent = get_dispatcher().notify_status_changed(order, customer.email, customer.name, event.new_status)
        except Exception as exc:
            logger.error(
                "Status update notification failed",
                order_id=str(event.order_id),
                new_status=event.new_status,
                error=str(exc),
            )
            return

        logger.info(
            "Status update notification processed",
            order_id=str(event.order_id),
            new_status=event.new_status,
            sent=sent,
        )

    def _load(self, event):
        order = current_domain.repository_for(Order).get(event.order_id)
        customer = current_domain.repository_for(Customer).get_or_none(str(event.customer_id))
        if customer is None:
            logger.warning(
                "Customer not in directory, skipping notification",
                order_id=str(event.order_id),
                customer_id=str(event.customer_id),
            )
        return order, customer
