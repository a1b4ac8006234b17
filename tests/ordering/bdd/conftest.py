"""Shared BDD fixtures and step definitions for the Ordering domain."""

from datetime import date

import pytest
from ordering.cart.cart import Cart
from pytest_bdd import given, parsers, then, when
from shared.errors import StorefrontError

# Coupon rules are date-bound; scenarios run on a fixed day
TODAY = date(2026, 5, 1)


@pytest.fixture()
def state():
    """Mutable scenario state: the cart, the order and the last captured error."""
    return {"cart": None, "order": None, "exc": None}


def attempt(state, action, *args, **kwargs):
    try:
        return action(*args, **kwargs)
    except StorefrontError as exc:
        state["exc"] = exc
        return None


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('an empty cart for customer "{customer_id}"'))
def empty_cart(state, customer_id):
    state["cart"] = Cart.create(customer_id=customer_id)


@given(parsers.cfparse('"{name}" is in the cart at {price:f} with quantity {qty:d}'))
def item_in_cart(state, name, price, qty):
    state["cart"].add_item(name=name, original_price=price, discount_price=price, quantity=qty)


@given(parsers.cfparse('coupon "{code}" has been applied'))
def coupon_applied(state, code):
    state["cart"].apply_coupon(code, TODAY)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('"{name}" is added at {price:f} with quantity {qty:d}'))
def add_item(state, name, price, qty):
    attempt(state, state["cart"].add_item, name=name, original_price=price, discount_price=price, quantity=qty)


@when(parsers.cfparse('the quantity of "{name}" is changed to {qty:d}'))
def change_quantity(state, name, qty):
    cart = state["cart"]
    item = next(i for i in cart.items if i.name == name)
    attempt(state, cart.update_quantity, str(item.id), qty, TODAY)


@when(parsers.cfparse('"{name}" is removed from the cart'))
def remove_item(state, name):
    attempt(state, state["cart"].remove_item, name, TODAY)


@when("the cart is cleared")
def clear_cart(state):
    state["cart"].clear()


@when(parsers.cfparse('coupon "{code}" is applied'))
def apply_coupon(state, code):
    attempt(state, state["cart"].apply_coupon, code, TODAY)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the request fails with "{code}"'))
def request_fails(state, code):
    assert state["exc"] is not None, "expected the step to fail"
    assert state["exc"].code == code


@then(parsers.re(r"the cart has (?P<count>\d+) items?"), converters={"count": int})
def cart_has_items(state, count):
    assert len(state["cart"].items) == count


@then(parsers.cfparse("the cart subtotal is {amount:f}"))
def cart_subtotal(state, amount):
    assert state["cart"].subtotal == amount


@then(parsers.cfparse("the discount is {amount:f}"))
def cart_discount(state, amount):
    assert state["cart"].coupon_discount(TODAY) == amount


@then(parsers.cfparse("the payable amount is {amount:f}"))
def cart_payable(state, amount):
    cart = state["cart"]
    assert round(cart.subtotal - cart.coupon_discount(TODAY), 2) == amount


@then(parsers.cfparse('coupon "{code}" is active'))
def coupon_active(state, code):
    assert state["cart"].coupon_code == code


@then("no coupon is active")
def no_coupon(state):
    assert state["cart"].coupon_code is None
