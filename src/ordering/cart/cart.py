"""Cart aggregate: one mutable collection of line items per customer.

A cart is created implicitly on the customer's first add and is emptied,
never deleted, when the customer clears it or places an order. Line items
are snapshots of the product taken at add-time, unique by product name.
At most one coupon can be active on a cart; it is re-checked whenever the
subtotal shrinks and revoked once the cart no longer meets its minimum.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text

from ordering.cart.events import (
    CartCleared,
    CartCouponApplied,
    CartCouponRemoved,
    CartCouponRevoked,
    CartItemAdded,
    CartItemRemoved,
    CartQuantityUpdated,
)
from ordering.coupon.registry import evaluate, normalize_code
from ordering.domain import ordering
from shared.errors import (
    AlreadyApplied,
    CouponError,
    DuplicateItem,
    InvalidQuantity,
    MinimumNotMet,
    NotFoundError,
)


@ordering.entity(part_of="Cart")
class CartItem:
    product_id = Identifier()
    name = String(required=True, max_length=255, sanitize=False)
    image = String(max_length=1000)
    category = String(max_length=100)
    description = Text()
    original_price = Float(required=True, min_value=0.0)
    discount_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()

    @property
    def line_total(self):
        return round(self.discount_price * self.quantity, 2)

    def to_snapshot(self):
        """Product fields copied into an order line."""
        return {
            "product_id": str(self.product_id) if self.product_id else None,
            "name": self.name,
            "image": self.image,
            "category": self.category,
            "description": self.description,
            "original_price": self.original_price,
            "discount_price": self.discount_price,
            "quantity": self.quantity,
        }


@ordering.aggregate
class Cart:
    customer_id = Identifier(required=True)
    items = HasMany(CartItem)
    coupon_code = String(max_length=50)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def item_names_must_be_unique(self):
        names = [item.name for item in self.items]
        if len(names) != len(set(names)):
            raise ValidationError({"items": ["A product can appear only once in the cart"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, customer_id):
        now = datetime.now(UTC)
        return cls(customer_id=customer_id, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def get_items(self):
        """Line items in the order they were added."""
        return sorted(self.items, key=lambda item: item.added_at or self.created_at)

    def find_item(self, item_id):
        return next((i for i in self.items if str(i.id) == str(item_id)), None)

    @property
    def subtotal(self):
        return round(sum(item.discount_price * item.quantity for item in self.items), 2)

    @property
    def item_count(self):
        return sum(item.quantity for item in self.items)

    def coupon_discount(self, today=None):
        """Discount the active coupon grants right now, 0 when it does not apply."""
        if not self.coupon_code:
            return 0.0
        try:
            return evaluate(self.coupon_code, self.subtotal, today)
        except CouponError:
            return 0.0

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(
        self,
        name,
        original_price,
        discount_price,
        quantity=1,
        image=None,
        category=None,
        description=None,
        product_id=None,
    ):
        if quantity is None or quantity < 1:
            raise InvalidQuantity("Quantity must be at least 1", field="quantity")

        if any(i.name == name for i in self.items):
            raise DuplicateItem(f"{name} is already in the cart", field="name")

        now = datetime.now(UTC)
        item = CartItem(
            product_id=product_id,
            name=name,
            image=image,
            category=category,
            description=description,
            original_price=original_price,
            discount_price=discount_price,
            quantity=quantity,
            added_at=now,
        )
        self.add_items(item)
        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                customer_id=str(self.customer_id),
                item_id=str(item.id),
                name=name,
                discount_price=discount_price,
                quantity=quantity,
            )
        )
        return item

    def update_quantity(self, item_id, quantity, today=None):
        if quantity is None or quantity < 1:
            raise InvalidQuantity("Quantity must be at least 1", field="quantity")

        item = self.find_item(item_id)
        if item is None:
            raise NotFoundError("Item not found in cart", field="item_id")

        previous_quantity = item.quantity
        item.quantity = quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityUpdated(
                cart_id=str(self.id),
                customer_id=str(self.customer_id),
                item_id=str(item.id),
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )
        self._recheck_coupon(today)

    def remove_item(self, name, today=None):
        """Remove the line item whose product name matches ``name`` exactly."""
        item = next((i for i in self.items if i.name == name), None)
        if item is None:
            raise NotFoundError(f"{name} is not in the cart", field="name")

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                customer_id=str(self.customer_id),
                item_id=str(item.id),
                name=item.name,
            )
        )
        self._recheck_coupon(today)

    def clear(self):
        """Empty the cart and drop any active coupon. Safe to call on an empty cart."""
        removed = len(self.items)
        if removed:
            self.remove_items(list(self.items))
        self.coupon_code = None
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCleared(
                cart_id=str(self.id),
                customer_id=str(self.customer_id),
                items_removed=removed,
            )
        )

    # -------------------------------------------------------------------
    # Coupon management
    # -------------------------------------------------------------------
    def apply_coupon(self, code, today=None):
        if self.coupon_code:
            raise AlreadyApplied(
                f"Coupon {self.coupon_code} is already applied; remove it first",
                field="coupon_code",
            )

        # Coupon errors propagate unchanged and leave the cart untouched
        discount = evaluate(code, self.subtotal, today)

        self.coupon_code = normalize_code(code)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCouponApplied(
                cart_id=str(self.id),
                customer_id=str(self.customer_id),
                coupon_code=self.coupon_code,
                discount=discount,
            )
        )
        return discount

    def remove_coupon(self):
        if not self.coupon_code:
            raise NotFoundError("No coupon is applied to this cart", field="coupon_code")

        code = self.coupon_code
        self.coupon_code = None
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCouponRemoved(
                cart_id=str(self.id),
                customer_id=str(self.customer_id),
                coupon_code=code,
            )
        )

    def _recheck_coupon(self, today):
        if not self.coupon_code:
            return

        try:
            evaluate(self.coupon_code, self.subtotal, today)
        except MinimumNotMet as exc:
            code = self.coupon_code
            self.coupon_code = None
            self.raise_(
                CartCouponRevoked(
                    cart_id=str(self.id),
                    customer_id=str(self.customer_id),
                    coupon_code=code,
                    reason=exc.message,
                )
            )
