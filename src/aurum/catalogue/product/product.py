"""Product aggregate — a purchasable item with a live stock count."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, Identifier, Integer, String, Text

from aurum.catalogue.product.events import (
    ProductAdded,
    ProductDetailsUpdated,
    ProductRecategorized,
    ProductRemoved,
    StockAdjusted,
)
from aurum.domain import aurum


@aurum.aggregate
class Product:
    """A catalogue item.

    Identity is a plain integer assigned as ``max(existing) + 1``. The product
    links to its category through ``category_id``; ``category`` holds the
    category's name for display and is rewritten whenever the category is
    renamed. A product added under an unknown category name keeps the name
    with an empty ``category_id``.

    Removing a product only deactivates it. When its id is handed out again
    the same aggregate is relisted with the new details.
    """

    id = Integer(identifier=True)
    name = String(required=True, max_length=150)
    description = Text()
    price = Integer(required=True, min_value=0)
    image = String(max_length=500)
    category = String(max_length=100)
    category_id = Identifier()
    stock = Integer(default=0, min_value=0)
    is_active = Boolean(default=True)

    @classmethod
    def create(cls, product_id, name, price, stock=0, description=None, image=None, category=None, category_id=None):
        product = cls(
            id=product_id,
            name=name,
            description=description,
            price=price,
            image=image,
            category=category,
            category_id=category_id,
            stock=stock,
        )
        product._raise_added()
        return product

    def relist(self, name, price, stock=0, description=None, image=None, category=None, category_id=None):
        """Bring a removed product back under its old id with new details."""
        if self.is_active:
            raise ValidationError({"id": [f"Product {self.id} is already listed"]})

        self.name = name
        self.description = description
        self.price = price
        self.image = image
        self.category = category
        self.category_id = category_id
        self.stock = stock
        self.is_active = True
        self._raise_added()

    def _raise_added(self):
        self.raise_(
            ProductAdded(
                product_id=self.id,
                name=self.name,
                price=self.price,
                category=self.category,
                category_id=self.category_id,
                stock=self.stock,
                added_at=datetime.now(UTC),
            )
        )

    def remove(self):
        if not self.is_active:
            raise ValidationError({"id": [f"Product {self.id} is already removed"]})

        self.is_active = False
        self.raise_(ProductRemoved(product_id=self.id, name=self.name, removed_at=datetime.now(UTC)))

    def replace_details(self, name, description, price, image, category, category_id, stock):
        """Overwrite every editable attribute in one step (the admin edit form)."""
        self.name = name
        self.description = description
        self.price = price
        self.image = image
        self.category = category
        self.category_id = category_id
        self.stock = stock

        self.raise_(
            ProductDetailsUpdated(
                product_id=self.id,
                name=name,
                price=price,
                category=category,
                stock=stock,
            )
        )

    def recategorize(self, category_id, category_name):
        previous = self.category
        self.category_id = category_id
        self.category = category_name

        self.raise_(
            ProductRecategorized(
                product_id=self.id,
                previous_category=previous,
                new_category=category_name,
                category_id=category_id,
            )
        )

    def adjust_stock(self, delta):
        """Move stock by ``delta``. Stock never drops below zero."""
        previous = self.stock or 0
        self.stock = max(0, previous + delta)

        self.raise_(
            StockAdjusted(
                product_id=self.id,
                delta=delta,
                previous_stock=previous,
                new_stock=self.stock,
            )
        )

    @property
    def in_stock(self):
        return (self.stock or 0) > 0
