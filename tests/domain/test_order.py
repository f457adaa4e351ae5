"""Unit tests for the Order aggregate and its business rules."""

from datetime import timezone

import pytest

from ordering.domain.exceptions import ValidationError
from ordering.domain.model.order import Order, OrderLineItem, OrderStatus
from ordering.domain.model.product import Product
from ordering.domain.model.value_objects import Money


def _product(name="Burger", price="20", category_id="SANDWICH"):
    return Product(name=name, price=Money.of(price), category_id=category_id)


def _make_item(order: Order, qty: int = 1, price: str = "15.00", product_id: str = "p1") -> OrderLineItem:
    """Helper to build a line item owned by *order*."""
    return OrderLineItem(
        order_id=order.id,
        product_id=product_id,
        unit_price=Money.of(price),
        quantity=qty,
        product_name="Widget",
    )


class TestOrderConstruction:

    def test_defaults(self):
        order = Order(user_id="user-1")
        assert order.status == OrderStatus.CREATED
        assert order.items == []
        assert order.created_at.tzinfo == timezone.utc
        assert order.id

    def test_empty_order_is_invalid(self):
        order = Order(user_id="user-1")
        assert not order.is_valid
        assert order.notifications.messages == ["Order must contain at least one item"]

    def test_order_becomes_valid_when_item_added(self):
        order = Order(user_id="user-1")
        order.add_product(_product(), 1)
        assert order.is_valid

    def test_foreign_line_item_rejected(self):
        order = Order(user_id="user-1")
        other = Order(user_id="user-2")
        with pytest.raises(ValidationError, match="belongs to another order"):
            order.add_item(_make_item(other))


class TestOrderValidation:

    @pytest.mark.parametrize("user_id", ["", "   ", None])
    def test_missing_user(self, user_id):
        order = Order(user_id=user_id)
        order.add_product(_product(), 1)
        assert not order.is_valid
        assert order.notifications.messages == ["User is required"]

    @pytest.mark.parametrize("qty", [0, -2])
    def test_non_positive_quantity(self, qty):
        order = Order(user_id="user-1")
        order.add_item(_make_item(order, qty=qty, product_id="p9"))
        assert not order.is_valid
        assert order.notifications.messages == [
            "Quantity for product 'p9' must be greater than zero"
        ]

    def test_each_bad_item_reported(self):
        order = Order(user_id="user-1")
        order.add_item(_make_item(order, qty=0, product_id="p1"))
        order.add_item(_make_item(order, qty=0, product_id="p1"))
        assert len(order.notifications) == 2

    def test_all_rules_reported_together(self):
        order = Order(user_id="")
        assert [n.key for n in order.notifications] == ["items", "user_id"]


class TestOrderTotal:

    def test_single_item(self):
        order = Order(user_id="user-1")
        order.add_product(_product(price="20"), 1)
        assert order.total_price == Money.of("20")

    def test_many_items(self):
        order = Order(user_id="user-1")
        order.add_item(_make_item(order, qty=3, price="15.00"))
        order.add_item(_make_item(order, qty=5, price="25.00"))
        order.add_item(_make_item(order, qty=1, price="0.99"))
        assert order.total_price == Money.of("170.99")

    def test_empty_total_is_zero(self):
        assert Order(user_id="user-1").total_price == Money.of("0")


class TestOrderLineItem:

    def test_line_total_calculation(self):
        order = Order(user_id="user-1")
        assert _make_item(order, qty=3, price="15.00").line_total == Money.of("45.00")

    def test_price_is_snapshot(self):
        product = _product(price="20")
        order = Order(user_id="user-1")
        item = order.add_product(product, 2)

        product.price = Money.of("99")
        order.validate()

        assert item.unit_price == Money.of("20")
        assert order.total_price == Money.of("40")

    def test_snapshot_carries_display_fields(self):
        product = Product(
            name="Fries", price=Money.of("7"), category_id="SIDE", description="Crispy"
        )
        item = Order(user_id="u").add_product(product, 1)
        assert (item.product_name, item.product_description) == ("Fries", "Crispy")

    def test_line_items_are_immutable(self):
        order = Order(user_id="user-1")
        item = _make_item(order)
        with pytest.raises(AttributeError):
            item.quantity = 5
