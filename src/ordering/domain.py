"""Ordering bounded context: shopping carts, coupons, orders and customers.

Carts are keyed by the customer they belong to and are emptied, never
deleted. Checkout snapshots a cart into an Order that then advances through
a strictly linear delivery lifecycle.
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
