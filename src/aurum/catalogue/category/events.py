"""Domain events for the Category aggregate."""

from protean.fields import Identifier, Integer, String

from aurum.domain import aurum


@aurum.event(part_of="Category")
class CategoryAdded:
    """A new category was created."""

    __version__ = "v1"

    category_id = Identifier(required=True)
    name = String(required=True, max_length=100)


@aurum.event(part_of="Category")
class CategoryRenamed:
    """A category was renamed; referencing products were rewritten alongside."""

    __version__ = "v1"

    category_id = Identifier(required=True)
    previous_name = String(required=True, max_length=100)
    new_name = String(required=True, max_length=100)
    products_updated = Integer(default=0)


@aurum.event(part_of="Category")
class CategoryDeleted:
    """An empty category was removed. Its id may be handed out again."""

    __version__ = "v1"

    category_id = Identifier(required=True)
    name = String(required=True, max_length=100)
