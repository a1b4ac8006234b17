"""Error taxonomy for the storefront.

Every error is a ``protean.exceptions.ValidationError`` so domain callers keep
a single catch type. Each kind carries the HTTP status and a machine-readable
code that the API layer copies into the error envelope.
"""

from protean.exceptions import ValidationError as DomainValidationError


class StorefrontError(DomainValidationError):
    status_code = 400
    code = "VALIDATION_ERROR"

    def __init__(self, message, field="_entity", **kwargs):
        self.message = message
        self.field = field
        super().__init__({field: [message]}, **kwargs)


# ---------------------------------------------------------------------------
# Kinds
# ---------------------------------------------------------------------------
class ValidationError(StorefrontError):
    """Malformed input or a value outside its allowed range."""


class NotFoundError(StorefrontError):
    status_code = 404
    code = "NOT_FOUND"


class ConflictError(StorefrontError):
    status_code = 409
    code = "CONFLICT"


class AuthError(StorefrontError):
    status_code = 401
    code = "UNAUTHENTICATED"


class StateError(StorefrontError):
    code = "INVALID_STATE"


class CouponError(StorefrontError):
    code = "COUPON_ERROR"


class UpstreamError(StorefrontError):
    status_code = 500
    code = "UPSTREAM_ERROR"


# ---------------------------------------------------------------------------
# Specific failures
# ---------------------------------------------------------------------------
class InvalidQuantity(ValidationError):
    code = "INVALID_QUANTITY"


class InvalidStatus(ValidationError):
    code = "INVALID_STATUS"


class DuplicateItem(ConflictError):
    # A duplicate line item answers 400, not 409
    status_code = 400
    code = "DUPLICATE_ITEM"


class AlreadyApplied(ConflictError):
    code = "COUPON_ALREADY_APPLIED"


class Forbidden(AuthError):
    status_code = 403
    code = "FORBIDDEN"


class InvalidTransition(StateError):
    code = "INVALID_TRANSITION"


class EmptyCart(StateError):
    code = "EMPTY_CART"


class InvalidCode(CouponError):
    code = "COUPON_INVALID"


class CouponExpired(CouponError):
    code = "COUPON_EXPIRED"


class MinimumNotMet(CouponError):
    code = "COUPON_MINIMUM_NOT_MET"
