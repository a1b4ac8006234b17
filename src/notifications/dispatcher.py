"""Notification dispatcher: renders order emails and hands them to the email channel.

Both entry points return True when the message was accepted by the channel
and False otherwise. They never raise; failures are logged here and the
caller decides what to do with the result.
"""

import os
from email.message import EmailMessage

import structlog

from notifications.channel import get_email_channel
from notifications.templates import get_template

logger = structlog.get_logger(__name__)

DEFAULT_STORE_NAME = "FoodDelights Store"


def _order_context(order) -> dict:
    return {
        "order_id": str(order.id),
        "items": [
            {
                "name": item.name,
                "quantity": item.quantity,
                "discount_price": item.discount_price,
            }
            for item in order.items
        ],
        "total_amount": order.total_amount,
        "coupon_code": order.coupon_code,
        "coupon_discount": order.coupon_discount,
        "payable_amount": order.payable_amount,
        "delivery_status": order.delivery_status,
        "placed_on": order.created_at.strftime("%d %B %Y") if order.created_at else "",
    }


class NotificationDispatcher:
    def __init__(self, channel=None, store_name: str | None = None, sender: str | None = None):
        self._channel = channel
        self.store_name = store_name or os.getenv("STORE_NAME", DEFAULT_STORE_NAME)
        self.sender = sender or os.getenv("SMTP_SENDER") or os.getenv("SMTP_USER") or "no-reply@fooddelights.store"

    @property
    def channel(self):
        return self._channel or get_email_channel()

    def notify_order_created(self, order, user_email: str, user_name: str) -> bool:
        context = _order_context(order)
        context["user_name"] = user_name
        return self._send("order_confirmation", user_email, context)

    def notify_status_changed(self, order, user_email: str, user_name: str, new_status: str) -> bool:
        context = _order_context(order)
        context["user_name"] = user_name
        context["new_status"] = new_status
        return self._send("status_update", user_email, context)

    def _send(self, notification_type: str, to: str, context: dict) -> bool:
        if not to:
            logger.warning(
                "No recipient for notification, skipping",
                notification_type=notification_type,
                order_id=context.get("order_id"),
            )
            return False

        context["store_name"] = self.store_name
        try:
            content = get_template(notification_type).render(context)

            message = EmailMessage()
            message["From"] = f"{self.store_name} <{self.sender}>"
            message["To"] = to
            message["Subject"] = content["subject"]
            message.set_content(content["body"])

            result = self.channel.send(message)
        except Exception as exc:
            logger.error(
                "Notification dispatch failed",
                notification_type=notification_type,
                order_id=context.get("order_id"),
                error=str(exc),
            )
            return False

        if result.get("status") != "sent":
            logger.warning(
                "Notification was not delivered",
                notification_type=notification_type,
                order_id=context.get("order_id"),
                error=result.get("error"),
            )
            return False

        logger.info(
            "Notification sent",
            notification_type=notification_type,
            order_id=context.get("order_id"),
            message_id=result.get("message_id"),
        )
        return True


_dispatcher: NotificationDispatcher | None = None


def get_dispatcher() -> NotificationDispatcher:
    """Return the process-wide dispatcher."""
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = NotificationDispatcher()
    return _dispatcher


def reset_dispatcher():
    global _dispatcher
    _dispatcher = None
