"""Read side for orders: listings joined with the customer directory."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ordering.customer.customer import Customer
from ordering.order.order import Order
from shared.errors import NotFoundError


def order_view(order, owner=None):
    return {
        "order_id": str(order.id),
        "customer_id": str(order.customer_id),
        "customer_name": owner.name if owner else None,
        "customer_email": owner.email if owner else None,
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
            for item in order.items
        ],
        "total_amount": order.total_amount,
        "coupon_code": order.coupon_code,
        "coupon_discount": order.coupon_discount,
        "payable_amount": order.payable_amount,
        "delivery_status": order.delivery_status,
        "created_at": order.created_at,
        "updated_at": order.updated_at,
    }


def _owners(customer_ids):
    if not customer_ids:
        return {}
    customers = (
        current_domain.repository_for(Customer)
        .query.filter(customer_id__in=list(customer_ids))
        .limit(None)
        .all()
        .items
    )
    return {str(c.customer_id): c for c in customers}


def list_orders(customer_id=None):
    """Orders newest first: one customer's when ``customer_id`` is given, else everyone's.

    Each order carries its owner's name and email, or None when the customer
    is not in the directory.
    """
    repo = current_domain.repository_for(Order)
    orders = repo.placed_by(customer_id) if customer_id else repo.newest_first()
    owners = _owners({str(o.customer_id) for o in orders})
    return [order_view(o, owners.get(str(o.customer_id))) for o in orders]


def get_order(order_id, customer_id, is_admin=False):
    """A single order. Customers only see their own; other orders read as missing."""
    try:
        order = current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise NotFoundError("Order not found", field="order_id") from None

    if not is_admin and str(order.customer_id) != str(customer_id):
        raise NotFoundError("Order not found", field="order_id")

    owner = current_domain.repository_for(Customer).get_or_none(str(order.customer_id))
    return order_view(order, owner)
