"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, List, String

from catalogue.domain import catalogue


@catalogue.event(part_of="Product")
class ProductAdded:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    title: String(required=True)
    category: String(required=True)
    price: Float(required=True)
    created_at: DateTime(required=True)


@catalogue.event(part_of="Product")
class ProductUpdated:
    """An admin edited a product."""

    __version__ = 1

    product_id: Identifier(required=True)
    changed_fields: List(String(max_length=50))
    price: Float(required=True)


@catalogue.event(part_of="Product")
class ProductRated:
    """A customer rated a product."""

    __version__ = 1

    product_id: Identifier(required=True)
    stars: Integer(required=True)
    average: Float(required=True)
    count: Integer(required=True)
