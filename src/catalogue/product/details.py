"""Product edits and removal: commands and handler."""

import structlog
from protean import handle
from protean.fields import Dict, Float, Identifier, List, String, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.product import EDITABLE_FIELDS, Product

logger = structlog.get_logger(__name__)


@catalogue.command(part_of="Product")
class UpdateProduct:
    """Partial update: only the fields that are set are changed.

    ``ingredients`` and ``nutrition`` default to empty containers. They are
    applied when non-empty or when named in ``changed_fields``.
    """

    product_id: Identifier(required=True)
    title: String(max_length=255)
    description: Text()
    price: Float(min_value=0.0)
    category: String(max_length=100)
    image: String(max_length=1000)
    ingredients: List(String(max_length=100))
    nutrition: Dict()
    changed_fields: List(String(max_length=50))


@catalogue.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


def _changes(command):
    changes = {}
    for name in EDITABLE_FIELDS:
        value = getattr(command, name)
        if name in command.changed_fields or value not in (None, [], {}):
            changes[name] = value
    return changes


@catalogue.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get_product(command.product_id)
        product.update_details(**_changes(command))
        repo.add(product)

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get_product(command.product_id)
        repo.remove(product)
        logger.info("Product deleted", product_id=str(product.id), title=product.title)
