"""Product lookups and catalogue search."""

from protean.exceptions import ObjectNotFoundError

from catalogue.domain import catalogue
from catalogue.product.product import Product
from shared.errors import NotFoundError


@catalogue.repository(part_of=Product)
class ProductRepository:
    def get_product(self, product_id) -> Product:
        try:
            return self.get(product_id)
        except ObjectNotFoundError:
            raise NotFoundError("Product not found", field="product_id") from None

    def remove(self, product):
        self._dao.delete(product)

    def search(self, category=None, search=None, min_price=None, max_price=None, min_rating=None) -> list[Product]:
        """Products matching every given filter, ordered by title.

        ``search`` matches the title or description, ignoring case.
        """
        filters = {}
        if category:
            filters["category"] = category
        if min_price is not None:
            filters["price__gte"] = min_price
        if max_price is not None:
            filters["price__lte"] = max_price

        query = self.query.filter(**filters) if filters else self.query
        products = query.order_by("title").limit(None).all().items

        if search:
            needle = search.lower()
            products = [
                p for p in products if needle in p.title.lower() or needle in (p.description or "").lower()
            ]
        if min_rating is not None:
            products = [p for p in products if p.rating and p.rating.rate >= min_rating]
        return products
