"""Catalogue bounded context: the products customers can order.

Read-mostly. Products are created, edited and deleted by admins; customers
can only rate them.
"""

import structlog
from protean.domain import Domain

catalogue = Domain(name="catalogue")

logger = structlog.get_logger(__name__)
