"""Product aggregate root with the Rating value object."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Dict, Float, Integer, List, String, Text, ValueObject

from catalogue.domain import catalogue
from catalogue.product.events import ProductAdded, ProductRated, ProductUpdated
from shared.errors import ValidationError as InvalidInput

# Fields an admin may change after creation
EDITABLE_FIELDS = ("title", "description", "price", "category", "image", "ingredients", "nutrition")


@catalogue.value_object(part_of="Product")
class Rating:
    """Average star rating and the number of votes behind it."""

    rate: Float(default=0.0, min_value=0.0, max_value=5.0)
    count: Integer(default=0, min_value=0)

    @invariant.post
    def unrated_products_have_no_average(self):
        if self.count == 0 and self.rate:
            raise ValidationError({"rate": ["A product without votes cannot have an average"]})

    def with_vote(self, stars):
        count = self.count + 1
        return Rating(rate=round((self.rate * self.count + stars) / count, 2), count=count)


@catalogue.aggregate
class Product:
    """Product aggregate root."""

    title: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    category: String(required=True, max_length=100)
    image: String(max_length=1000)
    rating: ValueObject(Rating)
    ingredients: List(String(max_length=100))
    nutrition: Dict()
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def create(
        cls,
        title,
        price,
        category,
        description=None,
        image=None,
        ingredients=None,
        nutrition=None,
    ):
        now = datetime.now(UTC)
        product = cls(
            title=title,
            description=description,
            price=price,
            category=category,
            image=image,
            rating=Rating(rate=0.0, count=0),
            ingredients=ingredients or [],
            nutrition=nutrition or {},
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                title=title,
                category=category,
                price=price,
                created_at=now,
            )
        )
        return product

    def update_details(self, **changes):
        """Apply a partial update. Keys left out (or None) keep their current value."""
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise InvalidInput(f"Cannot update {', '.join(sorted(unknown))}", field="product")

        changed = {name: value for name, value in changes.items() if value is not None}
        for name, value in changed.items():
            setattr(self, name, value)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                changed_fields=sorted(changed),
                price=self.price,
            )
        )

    def rate(self, stars):
        if stars is None or not 1 <= stars <= 5:
            raise InvalidInput("Rating must be between 1 and 5 stars", field="stars")

        self.rating = (self.rating or Rating()).with_vote(stars)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductRated(
                product_id=self.id,
                stars=stars,
                average=self.rating.rate,
                count=self.rating.count,
            )
        )
