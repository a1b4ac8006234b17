"""Customer product ratings: command and handler."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.product import Product


@catalogue.command(part_of="Product")
class RateProduct:
    product_id: Identifier(required=True)
    customer_id: Identifier(required=True)
    stars: Integer(required=True)


@catalogue.command_handler(part_of=Product)
class RateProductHandler:
    @handle(RateProduct)
    def rate_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get_product(command.product_id)
        product.rate(command.stars)
        repo.add(product)
        return {"rate": product.rating.rate, "count": product.rating.count}
