"""Shared BDD fixtures and step definitions for the Catalogue domain."""

import pytest
from catalogue.product.product import Product
from pytest_bdd import given, parsers


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@given(parsers.cfparse('a product "{title}" priced at {price:f} in "{category}"'), target_fixture="product")
def product(title, price, category):
    return Product.create(title=title, price=price, category=category)
