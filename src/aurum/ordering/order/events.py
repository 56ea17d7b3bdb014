"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, Integer, String, Text

from aurum.domain import aurum


@aurum.event(part_of="Order")
class OrderPlaced:
    """Checkout committed: stock was debited and the cart cleared."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    customer_name = String(required=True, max_length=150)
    phone = String(required=True, max_length=20)
    items = Text(required=True)  # JSON: list of {product_id, name, price, quantity}
    total_amount = Integer(required=True)
    payment_method = String(required=True, max_length=10)
    placed_at = DateTime(required=True)


@aurum.event(part_of="Order")
class OrderStatusChanged:
    __version__ = "v1"

    order_id = Identifier(required=True)
    previous_status = String(required=True, max_length=20)
    new_status = String(required=True, max_length=20)
    changed_at = DateTime(required=True)
