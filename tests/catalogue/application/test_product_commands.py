"""Application tests for product commands and catalogue queries."""

import pytest
from catalogue.product.creation import AddProduct
from catalogue.product.details import DeleteProduct, UpdateProduct
from catalogue.product.product import Product
from catalogue.product.queries import get_product, list_products
from catalogue.product.rating import RateProduct
from protean import current_domain
from shared.errors import NotFoundError


def _add(title="Masala Dosa", price=120.0, category="South Indian", **kwargs):
    return current_domain.process(
        AddProduct(title=title, price=price, category=category, **kwargs),
        asynchronous=False,
    )


class TestAddProduct:
    def test_add_persists(self):
        product_id = _add(description="Crisp rice crepe", ingredients=["rice", "potato"])
        product = current_domain.repository_for(Product).get(product_id)
        assert product.title == "Masala Dosa"
        assert product.ingredients == ["rice", "potato"]


class TestUpdateProduct:
    def test_only_given_fields_change(self):
        product_id = _add(
            description="Crisp rice crepe",
            ingredients=["rice", "potato"],
            nutrition={"calories": 300},
        )
        current_domain.process(UpdateProduct(product_id=product_id, price=110.0), asynchronous=False)

        product = current_domain.repository_for(Product).get(product_id)
        assert product.price == 110.0
        assert product.description == "Crisp rice crepe"
        assert product.ingredients == ["rice", "potato"]
        assert product.nutrition == {"calories": 300}

    def test_named_containers_can_be_emptied(self):
        product_id = _add(ingredients=["rice", "potato"])
        current_domain.process(
            UpdateProduct(product_id=product_id, ingredients=[], changed_fields=["ingredients"]),
            asynchronous=False,
        )

        product = current_domain.repository_for(Product).get(product_id)
        assert product.ingredients == []
        assert product.title == "Masala Dosa"

    def test_missing_product(self):
        with pytest.raises(NotFoundError):
            current_domain.process(UpdateProduct(product_id="nope", price=1.0), asynchronous=False)


class TestDeleteProduct:
    def test_delete(self):
        product_id = _add()
        current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
        with pytest.raises(NotFoundError):
            get_product(product_id)

    def test_delete_missing(self):
        with pytest.raises(NotFoundError):
            current_domain.process(DeleteProduct(product_id="nope"), asynchronous=False)


class TestRateProduct:
    def test_rating_returns_new_average(self):
        product_id = _add()
        current_domain.process(RateProduct(product_id=product_id, customer_id="cust-1", stars=5), asynchronous=False)
        result = current_domain.process(
            RateProduct(product_id=product_id, customer_id="cust-2", stars=4),
            asynchronous=False,
        )
        assert result == {"rate": 4.5, "count": 2}
        assert get_product(product_id)["rating"] == {"rate": 4.5, "count": 2}


class TestListProducts:
    @pytest.fixture(autouse=True)
    def _menu(self):
        _add(title="Masala Dosa", price=120.0, category="South Indian", description="Potato filling")
        _add(title="Idli", price=60.0, category="South Indian")
        _add(title="Gulab Jamun", price=90.0, category="Desserts", description="Milk dumplings in syrup")
        _add(title="Aloo Paratha", price=110.0, category="North Indian", description="Stuffed with potato")

    def test_all_products_by_title(self):
        assert [p["title"] for p in list_products()] == ["Aloo Paratha", "Gulab Jamun", "Idli", "Masala Dosa"]

    def test_by_category(self):
        assert [p["title"] for p in list_products(category="South Indian")] == ["Idli", "Masala Dosa"]

    def test_search_matches_title_or_description(self):
        assert [p["title"] for p in list_products(search="POTATO")] == ["Aloo Paratha", "Masala Dosa"]
        assert [p["title"] for p in list_products(search="jamun")] == ["Gulab Jamun"]

    def test_price_range(self):
        assert [p["title"] for p in list_products(min_price=90.0, max_price=115.0)] == ["Aloo Paratha", "Gulab Jamun"]

    def test_min_rating(self):
        idli = next(p for p in list_products() if p["title"] == "Idli")
        current_domain.process(
            RateProduct(product_id=idli["product_id"], customer_id="cust-1", stars=5),
            asynchronous=False,
        )
        assert [p["title"] for p in list_products(min_rating=4.0)] == ["Idli"]
