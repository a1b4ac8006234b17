"""Coupon registry and discount evaluation.

Coupons are static rules keyed by a case-insensitive code. ``evaluate`` is a
pure function of the code, the cart subtotal and the evaluation date: it
either returns the discount amount or raises a ``CouponError``.
"""

from datetime import UTC, date, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Date, Float, String

from ordering.domain import ordering
from shared.errors import CouponExpired, InvalidCode, MinimumNotMet


class DiscountType(Enum):
    PERCENTAGE = "percentage"
    FLAT = "flat"


@ordering.value_object
class Coupon:
    code = String(required=True, max_length=50)
    discount_type = String(required=True, choices=DiscountType)
    value = Float(required=True, min_value=0.0)
    min_order = Float(default=0.0, min_value=0.0)
    valid_till = Date(required=True)

    @invariant.post
    def percentage_cannot_exceed_hundred(self):
        if self.discount_type == DiscountType.PERCENTAGE.value and self.value > 100:
            raise ValidationError({"value": ["Percentage discount cannot exceed 100"]})

    def is_expired(self, today):
        # Valid through the end of ``valid_till``
        return today > self.valid_till

    def discount_for(self, subtotal):
        if self.discount_type == DiscountType.PERCENTAGE.value:
            discount = subtotal * self.value / 100
        else:
            discount = min(self.value, subtotal)
        return round(discount, 2)


_COUPONS = {
    "FIRST20": {
        "discount_type": DiscountType.PERCENTAGE.value,
        "value": 20.0,
        "min_order": 500.0,
        "valid_till": date(2027, 12, 31),
    },
    "SAVE100": {
        "discount_type": DiscountType.FLAT.value,
        "value": 100.0,
        "min_order": 750.0,
        "valid_till": date(2027, 12, 31),
    },
    "FEAST15": {
        "discount_type": DiscountType.PERCENTAGE.value,
        "value": 15.0,
        "min_order": 300.0,
        "valid_till": date(2027, 6, 30),
    },
    "WELCOME50": {
        "discount_type": DiscountType.FLAT.value,
        "value": 50.0,
        "min_order": 200.0,
        "valid_till": date(2027, 12, 31),
    },
    "DIWALI25": {
        "discount_type": DiscountType.PERCENTAGE.value,
        "value": 25.0,
        "min_order": 1000.0,
        "valid_till": date(2025, 11, 15),
    },
}


def current_date():
    """Today in UTC; coupon validity is judged by calendar date."""
    return datetime.now(UTC).date()


def normalize_code(code):
    return (code or "").strip().upper()


def lookup(code):
    """Return the ``Coupon`` registered under ``code``, ignoring case and padding."""
    key = normalize_code(code)
    rule = _COUPONS.get(key)
    if rule is None:
        raise InvalidCode(f"Coupon code '{code}' is not valid", field="coupon_code")
    return Coupon(code=key, **rule)


def evaluate(code, subtotal, today=None):
    """Compute the discount ``code`` grants on ``subtotal``.

    Raises ``InvalidCode`` for an unknown code, ``CouponExpired`` when ``today``
    is past the coupon's ``valid_till`` date and ``MinimumNotMet`` when the
    subtotal is below the coupon's minimum order. Flat discounts never exceed
    the subtotal. The result is rounded to two decimals.
    """
    coupon = lookup(code)
    today = today or current_date()

    if coupon.is_expired(today):
        raise CouponExpired(
            f"Coupon {coupon.code} expired on {coupon.valid_till.isoformat()}",
            field="coupon_code",
        )

    if subtotal < coupon.min_order:
        shortfall = round(coupon.min_order - subtotal, 2)
        raise MinimumNotMet(
            f"Coupon {coupon.code} requires a minimum order of {coupon.min_order:.2f}; add {shortfall:.2f} more",
            field="coupon_code",
        )

    return coupon.discount_for(subtotal)
