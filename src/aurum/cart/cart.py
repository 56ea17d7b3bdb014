"""Shopping cart aggregate — the shopper's pending selection before checkout.

Each line is a snapshot of the product taken when it was first added, plus a
quantity. The quantity ceiling is always checked against the *live* product
passed in by the caller, never against the snapshot.
"""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, HasMany, Integer, String

from aurum.cart.events import CartCleared, CartItemAdded, CartItemRemoved, CartQuantityUpdated
from aurum.domain import aurum
from aurum.errors import InsufficientStock, OutOfStock


@aurum.entity(part_of="ShoppingCart")
class CartItem:
    product_id = Integer(required=True)
    name = String(required=True, max_length=150)
    price = Integer(required=True, min_value=0)
    image = String(max_length=500)
    category = String(max_length=100)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()

    @property
    def line_total(self):
        return self.price * self.quantity


@aurum.aggregate
class ShoppingCart:
    session_id = String(max_length=255)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, session_id=None):
        now = datetime.now(UTC)
        return cls(session_id=session_id, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    def line_for(self, product_id):
        return next((i for i in self.items if i.product_id == product_id), None)

    def quantity_of(self, product_id):
        line = self.line_for(product_id)
        return line.quantity if line else 0

    def total(self):
        return sum(item.price * item.quantity for item in self.items)

    def item_count(self):
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self):
        return not self.items

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def add_item(self, product):
        """Add one unit of ``product``.

        Raises ``OutOfStock`` when the product has no stock and
        ``InsufficientStock`` when one more unit would exceed it. The cart is
        left untouched in both cases.
        """
        if (product.stock or 0) <= 0:
            raise OutOfStock(product.id)

        existing = self.line_for(product.id)
        now = datetime.now(UTC)

        if existing:
            requested = existing.quantity + 1
            if requested > product.stock:
                raise InsufficientStock(product.id, requested, product.stock)
            existing.quantity = requested
            quantity = requested
        else:
            self.add_items(
                CartItem(
                    product_id=product.id,
                    name=product.name,
                    price=product.price,
                    image=product.image,
                    category=product.category,
                    quantity=1,
                    added_at=now,
                )
            )
            quantity = 1

        self.updated_at = now
        self.raise_(CartItemAdded(cart_id=str(self.id), product_id=product.id, quantity=quantity))

    def update_quantity(self, product, delta):
        """Move a line's quantity by ``delta`` against the live ``product``.

        Increases past the stock ceiling raise ``InsufficientStock``. Decreases
        are floored at zero and a line at zero is removed.
        """
        line = self.line_for(product.id)
        if line is None:
            raise ObjectNotFoundError(f"Product {product.id} is not in cart {self.id}")

        previous = line.quantity
        new_quantity = previous + delta
        if delta > 0 and new_quantity > (product.stock or 0):
            raise InsufficientStock(product.id, new_quantity, product.stock or 0)

        new_quantity = max(0, new_quantity)
        if new_quantity == 0:
            self.remove_items(line)
            self.raise_(CartItemRemoved(cart_id=str(self.id), product_id=product.id))
        else:
            line.quantity = new_quantity
            self.raise_(
                CartQuantityUpdated(
                    cart_id=str(self.id),
                    product_id=product.id,
                    previous_quantity=previous,
                    new_quantity=new_quantity,
                )
            )
        self.updated_at = datetime.now(UTC)

    def clear(self):
        removed = len(self.items)
        for item in list(self.items):
            self.remove_items(item)

        self.updated_at = datetime.now(UTC)
        self.raise_(CartCleared(cart_id=str(self.id), items_removed=removed))
        return removed
