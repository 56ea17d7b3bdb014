"""Category aggregate for grouping products in the catalogue."""

from protean.exceptions import ValidationError
from protean.fields import Boolean, String

from aurum.catalogue.category.events import CategoryAdded, CategoryDeleted, CategoryRenamed
from aurum.domain import aurum


@aurum.aggregate
class Category:
    """A flat grouping of products.

    Identity is a numeric-looking string (``"1"``, ``"2"``, ...). Names are
    free text and may repeat, which is why products link by ``category_id``
    and only fall back to the name when they carry no id.

    Deleting a category only deactivates it; a re-used id restores the same
    aggregate under its new name.
    """

    id = String(identifier=True, max_length=20)
    name = String(required=True, max_length=100)
    is_active = Boolean(default=True)

    @classmethod
    def create(cls, category_id, name):
        category = cls(id=category_id, name=name)
        category.raise_(CategoryAdded(category_id=category.id, name=name))
        return category

    def restore(self, name):
        if self.is_active:
            raise ValidationError({"id": [f"Category {self.id} already exists"]})

        self.name = name
        self.is_active = True
        self.raise_(CategoryAdded(category_id=self.id, name=name))

    def delete(self):
        if not self.is_active:
            raise ValidationError({"id": [f"Category {self.id} is already deleted"]})

        self.is_active = False
        self.raise_(CategoryDeleted(category_id=self.id, name=self.name))

    def rename(self, new_name, products_updated=0):
        previous_name = self.name
        self.name = new_name

        self.raise_(
            CategoryRenamed(
                category_id=self.id,
                previous_name=previous_name,
                new_name=new_name,
                products_updated=products_updated,
            )
        )
        return previous_name

    def is_referenced_by(self, product):
        """True when ``product`` belongs to this category.

        A product carrying a ``category_id`` belongs to that category alone,
        even when another category shares its name.
        """
        if product.category_id:
            return str(product.category_id) == str(self.id)
        return product.category == self.name
