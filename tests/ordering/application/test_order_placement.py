"""Application tests for checkout."""

import pytest
from ordering.cart.cart import Cart
from ordering.cart.coupons import ApplyCoupon
from ordering.cart.items import AddCartItem
from ordering.order.order import Order
from ordering.order.placement import PlaceOrder
from protean import current_domain
from shared.errors import EmptyCart


def _add(customer_id, name, price, quantity=1):
    return current_domain.process(
        AddCartItem(
            customer_id=customer_id,
            name=name,
            original_price=price,
            discount_price=price,
            quantity=quantity,
        ),
        asynchronous=False,
    )


def _place(customer_id="cust-001"):
    return current_domain.process(PlaceOrder(customer_id=customer_id), asynchronous=False)


class TestPlaceOrder:
    def test_cart_becomes_order(self):
        _add("cust-001", "A", 100.0, 2)
        _add("cust-001", "B", 50.0, 1)

        order_id = _place()

        order = current_domain.repository_for(Order).get(order_id)
        assert order.customer_id == "cust-001"
        assert order.total_amount == 250.0
        assert order.payable_amount == 250.0
        assert order.delivery_status == "Pending"
        assert sorted((i.name, i.quantity) for i in order.items) == [("A", 2), ("B", 1)]

    def test_cart_is_emptied(self):
        _add("cust-001", "A", 100.0, 2)
        _place()

        cart = current_domain.repository_for(Cart).find_for_customer("cust-001")
        assert cart is not None
        assert len(cart.items) == 0
        assert cart.coupon_code is None

    def test_coupon_carries_over(self):
        _add("cust-001", "Thali", 400.0, 2)
        current_domain.process(ApplyCoupon(customer_id="cust-001", coupon_code="SAVE100"), asynchronous=False)

        order = current_domain.repository_for(Order).get(_place())

        assert order.total_amount == 800.0
        assert order.coupon_code == "SAVE100"
        assert order.coupon_discount == 100.0
        assert order.payable_amount == 700.0

    def test_empty_cart_is_rejected(self):
        with pytest.raises(EmptyCart) as exc:
            _place("cust-404")
        assert exc.value.message == "Cart is empty. Cannot create order."
        assert current_domain.repository_for(Order).placed_by("cust-404") == []

    def test_cart_emptied_by_previous_order(self):
        _add("cust-001", "A", 100.0)
        _place()
        with pytest.raises(EmptyCart):
            _place()

    def test_later_cart_changes_do_not_touch_order(self):
        _add("cust-001", "A", 100.0)
        order_id = _place()
        _add("cust-001", "A", 999.0, 5)

        order = current_domain.repository_for(Order).get(order_id)
        assert order.items[0].discount_price == 100.0
        assert order.items[0].quantity == 1

    def test_orders_of_a_customer_newest_first(self):
        _add("cust-001", "A", 100.0)
        first = _place()
        _add("cust-001", "B", 100.0)
        second = _place()

        orders = current_domain.repository_for(Order).placed_by("cust-001")
        assert [str(o.id) for o in orders] == [second, first]


class TestPlacementFailure:
    def test_cart_survives_when_the_order_cannot_be_saved(self, monkeypatch):
        _add("cust-001", "A", 100.0, 1)

        def unavailable(self, model_obj):
            raise RuntimeError("order store unavailable")

        monkeypatch.setattr(type(current_domain.repository_for(Order)._dao), "_create", unavailable)

        with pytest.raises(Exception, match="order store unavailable"):
            _place()
        monkeypatch.undo()

        cart = current_domain.repository_for(Cart).find_for_customer("cust-001")
        assert [(i.name, i.quantity) for i in cart.items] == [("A", 1)]
        assert current_domain.repository_for(Order).placed_by("cust-001") == []
