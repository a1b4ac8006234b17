"""Domain events for the Cart aggregate."""

from protean.fields import Float, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="Cart")
class CartItemAdded:
    """A product was added to the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)
    name = String(required=True, sanitize=False)
    discount_price = Float(required=True)
    quantity = Integer(required=True)


@ordering.event(part_of="Cart")
class CartQuantityUpdated:
    """The quantity of a cart item was changed."""

    __version__ = 1

    cart_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@ordering.event(part_of="Cart")
class CartItemRemoved:
    """An item was removed from the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)
    name = String(required=True, sanitize=False)


@ordering.event(part_of="Cart")
class CartCleared:
    """All items were removed from the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    items_removed = Integer(required=True)


@ordering.event(part_of="Cart")
class CartCouponApplied:
    """A coupon code was applied to the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    coupon_code = String(required=True)
    discount = Float(required=True)


@ordering.event(part_of="Cart")
class CartCouponRemoved:
    """The customer removed the active coupon."""

    __version__ = 1

    cart_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    coupon_code = String(required=True)


@ordering.event(part_of="Cart")
class CartCouponRevoked:
    """The active coupon stopped qualifying after the cart changed."""

    __version__ = 1

    cart_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    coupon_code = String(required=True)
    reason = String(required=True, max_length=500)
