"""Domain events for the ShoppingCart aggregate."""

from protean.fields import Identifier, Integer

from aurum.domain import aurum


@aurum.event(part_of="ShoppingCart")
class CartItemAdded:
    """A product was added to the cart, or its line grew by one."""

    __version__ = "v1"

    cart_id = Identifier(required=True)
    product_id = Integer(required=True)
    quantity = Integer(required=True)


@aurum.event(part_of="ShoppingCart")
class CartQuantityUpdated:
    __version__ = "v1"

    cart_id = Identifier(required=True)
    product_id = Integer(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@aurum.event(part_of="ShoppingCart")
class CartItemRemoved:
    """A line dropped to zero and left the cart."""

    __version__ = "v1"

    cart_id = Identifier(required=True)
    product_id = Integer(required=True)


@aurum.event(part_of="ShoppingCart")
class CartCleared:
    __version__ = "v1"

    cart_id = Identifier(required=True)
    items_removed = Integer(required=True)
