"""Read side for carts."""

from protean.utils.globals import current_domain

from ordering.cart.cart import Cart


def cart_view(cart, today=None):
    if cart is None:
        return {
            "items": [],
            "item_count": 0,
            "subtotal": 0.0,
            "coupon_code": None,
            "discount": 0.0,
            "payable": 0.0,
        }

    subtotal = cart.subtotal
    discount = cart.coupon_discount(today)
    return {
        "items": [
            {
                "item_id": str(item.id),
                "product_id": str(item.product_id) if item.product_id else None,
                "name": item.name,
                "image": item.image,
                "category": item.category,
                "description": item.description,
                "original_price": item.original_price,
                "discount_price": item.discount_price,
                "quantity": item.quantity,
                "line_total": item.line_total,
            }
            for item in cart.get_items()
        ],
        "item_count": cart.item_count,
        "subtotal": subtotal,
        "coupon_code": cart.coupon_code,
        "discount": discount,
        "payable": round(subtotal - discount, 2),
    }


def get_cart(customer_id, today=None):
    """The customer's cart with totals. A customer without a cart sees an empty one."""
    return cart_view(current_domain.repository_for(Cart).find_for_customer(customer_id), today)
