"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from aurum.domain import aurum


@aurum.event(part_of="Product")
class ProductAdded:
    """A new product was listed in the catalogue."""

    __version__ = "v1"

    product_id = Integer(required=True)
    name = String(required=True, max_length=150)
    price = Integer(required=True)
    category = String(max_length=100)
    category_id = Identifier()
    stock = Integer(required=True)
    added_at = DateTime(required=True)


@aurum.event(part_of="Product")
class ProductDetailsUpdated:
    """A product record was replaced through a full edit."""

    __version__ = "v1"

    product_id = Integer(required=True)
    name = String(required=True, max_length=150)
    price = Integer(required=True)
    category = String(max_length=100)
    stock = Integer(required=True)


@aurum.event(part_of="Product")
class ProductRecategorized:
    """A product's category link changed, usually through a category rename."""

    __version__ = "v1"

    product_id = Integer(required=True)
    previous_category = String(max_length=100)
    new_category = String(max_length=100)
    category_id = Identifier()


@aurum.event(part_of="Product")
class StockAdjusted:
    """Stock moved by ``delta``; ``new_stock`` is floored at zero."""

    __version__ = "v1"

    product_id = Integer(required=True)
    delta = Integer(required=True)
    previous_stock = Integer(required=True)
    new_stock = Integer(required=True)


@aurum.event(part_of="Product")
class ProductRemoved:
    """A product was taken off the catalogue. Its id may be listed again later."""

    __version__ = "v1"

    product_id = Integer(required=True)
    name = String(required=True, max_length=150)
    removed_at = DateTime(required=True)
