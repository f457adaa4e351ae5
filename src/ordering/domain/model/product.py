"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, products are added and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from uuid import uuid4

from ordering.domain.model.notification import NotificationLedger
from ordering.domain.model.value_objects import Money


class ProductCategory(Enum):
    SANDWICH = "SANDWICH"
    SIDE = "SIDE"
    DRINK = "DRINK"
    DESSERT = "DESSERT"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @classmethod
    def lookup(cls, category_id: str | None) -> ProductCategory | None:
        """Return the category named by *category_id*, or None."""
        if not category_id:
            return None
        try:
            return cls(category_id.strip().upper())
        except ValueError:
            return None


_CATEGORY_LABELS = {
    ProductCategory.SANDWICH: "Sandwich",
    ProductCategory.SIDE: "Side",
    ProductCategory.DRINK: "Drink",
    ProductCategory.DESSERT: "Dessert",
}


def new_product_id() -> str:
    return uuid4().hex


@dataclass
class Product:
    """A product in the catalog.

    Validates itself on construction; the result is readable through
    ``is_valid`` and ``notifications``.  Changes are made by building a
    candidate with ``dataclasses.replace`` so the rules run again before
    anything is persisted.
    """

    name: str
    price: Money
    category_id: str
    description: str = ""
    id: str = field(default_factory=new_product_id)
    notifications: NotificationLedger = field(
        default_factory=NotificationLedger, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self.validate()

    @property
    def category(self) -> ProductCategory | None:
        return ProductCategory.lookup(self.category_id)

    @property
    def is_valid(self) -> bool:
        return not self.notifications

    def validate(self) -> None:
        self.notifications.clear()

        if not self.name or not self.name.strip():
            self.notifications.add("Product name is required", "name")

        if self.category is None:
            self.notifications.add(
                f"Unknown product category: '{self.category_id}'", "category_id"
            )

        if not self.price.is_positive:
            self.notifications.add("Product price must be greater than zero", "price")
