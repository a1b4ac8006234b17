"""Order confirmation template, sent when an order is placed."""


def _money(amount) -> str:
    return f"₹{float(amount or 0):.2f}"


class OrderConfirmationTemplate:
    notification_type = "order_confirmation"

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        store_name = context.get("store_name", "FoodDelights Store")
        lines = [
            f"  {item['name']} x {item['quantity']} @ {_money(item['discount_price'])} = "
            f"{_money(item['discount_price'] * item['quantity'])}"
            for item in context.get("items", [])
        ]

        summary = [f"Order Total: {_money(context.get('total_amount'))}"]
        if context.get("coupon_code"):
            summary.append(f"Coupon {context['coupon_code']}: -{_money(context.get('coupon_discount'))}")
            summary.append(f"Amount Payable: {_money(context.get('payable_amount'))}")

        return {
            "subject": f"Order Confirmation - Order #{order_id}",
            "body": (
                f"Hi {context.get('user_name') or 'there'},\n\n"
                f"Thank you for your order! Order #{order_id} was placed on {context.get('placed_on', '')}.\n\n"
                "Items:\n" + "\n".join(lines) + "\n\n" + "\n".join(summary) + "\n\n"
                f"Delivery Status: {context.get('delivery_status', 'Pending')}\n\n"
                "We'll let you know when your order ships.\n\n"
                f"{store_name}"
            ),
        }
