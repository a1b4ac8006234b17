"""Tests for the Product aggregate and its Rating value object."""

import pytest
from catalogue.product.events import ProductAdded, ProductRated, ProductUpdated
from catalogue.product.product import Product, Rating
from protean.exceptions import ValidationError


def _make_product(**overrides):
    defaults = {
        "title": "Butter Chicken",
        "price": 349.0,
        "category": "Mains",
        "description": "Creamy tomato gravy",
        "ingredients": ["chicken", "butter", "tomato"],
        "nutrition": {"calories": 540, "protein_g": 32},
    }
    defaults.update(overrides)
    return Product.create(**defaults)


class TestProductCreation:
    def test_create(self):
        product = _make_product()
        assert product.title == "Butter Chicken"
        assert product.price == 349.0
        assert product.ingredients == ["chicken", "butter", "tomato"]
        assert product.nutrition["calories"] == 540
        assert product.rating.rate == 0.0
        assert product.rating.count == 0

    def test_create_raises_event(self):
        product = _make_product()
        events = [e for e in product._events if isinstance(e, ProductAdded)]
        assert len(events) == 1
        assert events[0].title == "Butter Chicken"
        assert events[0].category == "Mains"
        assert events[0]._metadata.domain.version == 1

    def test_optional_collections_default_to_empty(self):
        product = Product.create(title="Plain Rice", price=80.0, category="Sides")
        assert product.ingredients == []
        assert product.nutrition == {}

    def test_negative_price(self):
        with pytest.raises(ValidationError) as exc:
            _make_product(price=-1.0)
        assert "price" in exc.value.messages

    def test_title_required(self):
        with pytest.raises(ValidationError):
            Product.create(title=None, price=10.0, category="Sides")


class TestUpdateDetails:
    def test_partial_update(self):
        product = _make_product()
        product.update_details(price=329.0, title=None)

        assert product.price == 329.0
        assert product.title == "Butter Chicken"
        events = [e for e in product._events if isinstance(e, ProductUpdated)]
        assert events[0].changed_fields == ["price"]

    def test_unknown_field_is_rejected(self):
        product = _make_product()
        with pytest.raises(ValidationError):
            product.update_details(rating=5)


class TestRating:
    def test_first_vote(self):
        assert Rating().with_vote(4) == Rating(rate=4.0, count=1)

    def test_running_average(self):
        rating = Rating(rate=4.0, count=2).with_vote(5)
        assert rating.rate == 4.33
        assert rating.count == 3

    def test_average_without_votes_is_rejected(self):
        with pytest.raises(ValidationError):
            Rating(rate=3.0, count=0)

    def test_rate_product(self):
        product = _make_product()
        product.rate(5)
        product.rate(3)

        assert product.rating.rate == 4.0
        assert product.rating.count == 2
        events = [e for e in product._events if isinstance(e, ProductRated)]
        assert [e.stars for e in events] == [5, 3]

    @pytest.mark.parametrize("stars", [0, 6, None])
    def test_stars_out_of_range(self, stars):
        product = _make_product()
        with pytest.raises(ValidationError):
            product.rate(stars)
        assert product.rating.count == 0
