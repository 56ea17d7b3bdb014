"""Order aggregate — an immutable snapshot of a cart taken at checkout.

Items, total and date are fixed when the order is placed. The only thing that
moves afterwards is the status:

    Pending → Confirmed → Delivered
    Pending → Delivered           ("mark as closed")

Delivered is terminal.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Integer, String, Text

from aurum.domain import aurum
from aurum.ordering.order.events import OrderPlaced, OrderStatusChanged


class OrderStatus(Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    DELIVERED = "Delivered"


class PaymentMethod(Enum):
    ONLINE = "ONLINE"
    COD = "COD"


_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.CONFIRMED, OrderStatus.DELIVERED},
    OrderStatus.CONFIRMED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),  # Terminal
}

OPEN_STATUSES = {OrderStatus.PENDING, OrderStatus.CONFIRMED}


@aurum.entity(part_of="Order")
class OrderItem:
    """A cart line frozen at checkout; later catalogue edits never reach it."""

    product_id = Integer(required=True)
    name = String(required=True, max_length=150)
    price = Integer(required=True, min_value=0)
    image = String(max_length=500)
    category = String(max_length=100)
    quantity = Integer(required=True, min_value=1)

    @property
    def line_total(self):
        return self.price * self.quantity


@aurum.aggregate
class Order:
    id = String(identifier=True, max_length=20)
    customer_name = String(required=True, max_length=150)
    phone = String(required=True, max_length=20)
    address = Text(required=True)
    items = HasMany(OrderItem)
    total_amount = Integer(required=True, min_value=0)
    payment_method = String(choices=PaymentMethod, default=PaymentMethod.ONLINE.value)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    date = DateTime(required=True)

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(
        cls,
        order_id,
        customer_name,
        phone,
        address,
        lines,
        payment_method=PaymentMethod.ONLINE.value,
        placed_at=None,
        status=OrderStatus.PENDING.value,
    ):
        """Snapshot ``lines`` (cart items or anything shaped like them) into a new order."""
        placed_at = placed_at or datetime.now(UTC)
        items = [
            OrderItem(
                product_id=line.product_id,
                name=line.name,
                price=line.price,
                image=line.image,
                category=line.category,
                quantity=line.quantity,
            )
            for line in lines
        ]
        total_amount = sum(item.price * item.quantity for item in items)

        order = cls(
            id=order_id,
            customer_name=customer_name,
            phone=phone,
            address=address,
            items=items,
            total_amount=total_amount,
            payment_method=payment_method,
            status=status,
            date=placed_at,
        )
        order.raise_(
            OrderPlaced(
                order_id=order.id,
                customer_name=customer_name,
                phone=phone,
                items=json.dumps(
                    [
                        {
                            "product_id": item.product_id,
                            "name": item.name,
                            "price": item.price,
                            "quantity": item.quantity,
                        }
                        for item in items
                    ]
                ),
                total_amount=total_amount,
                payment_method=order.payment_method,
                placed_at=placed_at,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status):
        current = OrderStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    def transition_to(self, new_status):
        try:
            target = OrderStatus(new_status)
        except ValueError:
            raise ValidationError({"status": [f"Unknown order status {new_status!r}"]}) from None

        self._assert_can_transition(target)

        previous = self.status
        self.status = target.value
        self.raise_(
            OrderStatusChanged(
                order_id=self.id,
                previous_status=previous,
                new_status=target.value,
                changed_at=datetime.now(UTC),
            )
        )

    def confirm(self):
        self.transition_to(OrderStatus.CONFIRMED.value)

    def close(self):
        """Mark the order delivered."""
        self.transition_to(OrderStatus.DELIVERED.value)

    @property
    def is_open(self):
        return OrderStatus(self.status) in OPEN_STATUSES

    @property
    def item_count(self):
        return sum(item.quantity for item in self.items)
