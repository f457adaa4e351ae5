"""Unit tests for the Product aggregate and its validation rules."""

from dataclasses import replace

import pytest

from ordering.domain.model.product import Product, ProductCategory
from ordering.domain.model.value_objects import Money


def _product(name="Burger", price="20", category_id="SANDWICH", description="Big burger"):
    return Product(
        name=name,
        price=Money.of(price),
        category_id=category_id,
        description=description,
    )


class TestValidProduct:

    @pytest.mark.parametrize("category", [c.value for c in ProductCategory])
    def test_every_known_category_is_valid(self, category):
        product = _product(category_id=category)
        assert product.is_valid
        assert product.notifications.messages == []

    def test_category_lookup_is_case_insensitive(self):
        assert _product(category_id="dessert").category is ProductCategory.DESSERT

    def test_description_is_optional(self):
        assert _product(description="").is_valid

    def test_ids_are_unique(self):
        assert _product().id != _product().id


class TestInvalidProduct:

    @pytest.mark.parametrize("price", ["0", "-0.01", "-20"])
    def test_non_positive_price(self, price):
        product = _product(price=price)
        assert not product.is_valid
        assert product.notifications.messages == ["Product price must be greater than zero"]

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name(self, name):
        product = _product(name=name)
        assert not product.is_valid
        assert product.notifications.messages == ["Product name is required"]

    def test_unknown_category(self):
        product = _product(category_id="PIZZA")
        assert not product.is_valid
        assert product.notifications.messages == ["Unknown product category: 'PIZZA'"]

    def test_all_rules_reported_together(self):
        product = _product(name="", price="0", category_id="")
        assert [n.key for n in product.notifications] == ["name", "category_id", "price"]


class TestProductChanges:

    def test_replace_revalidates(self):
        product = _product()
        candidate = replace(product, price=Money.of("0"))
        assert product.is_valid
        assert not candidate.is_valid
        assert candidate.id == product.id

    def test_replace_can_fix_invalid_product(self):
        product = _product(name="")
        assert replace(product, name="Fixed").is_valid
