"""Status update template, sent when an order advances along its delivery lifecycle."""

_STATUS_MESSAGES = {
    "Shipped": "Your order has been shipped!",
    "Delivered": "Your order has been delivered!",
}


class StatusUpdateTemplate:
    notification_type = "status_update"

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        new_status = context.get("new_status", "")
        store_name = context.get("store_name", "FoodDelights Store")
        headline = _STATUS_MESSAGES.get(new_status, f"Your order has been {new_status}")

        return {
            "subject": f"Order Update - {new_status} - Order #{order_id}",
            "body": (
                f"Hi {context.get('user_name') or 'there'},\n\n"
                f"{headline}\n\n"
                f"Order #{order_id}\n"
                f"Status: {new_status}\n"
                f"Order Total: ₹{float(context.get('payable_amount') or 0):.2f}\n\n"
                f"Thank you for shopping with {store_name}."
            ),
        }
