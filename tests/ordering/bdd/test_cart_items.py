"""BDD tests for cart item management."""

from pytest_bdd import scenarios

scenarios("features/cart_items.feature")
