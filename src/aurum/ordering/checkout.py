"""Checkout — turns the shopper's cart into an order in one unit of work.

The handler reads the cart, snapshots it into an ``Order``, debits stock for
every line and empties the cart. All three aggregates are written in the same
unit of work, so either the whole checkout commits or none of it does.
"""

import random
import string

import structlog
from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from aurum import config
from aurum.cart.cart import ShoppingCart
from aurum.catalogue.product.product import Product
from aurum.domain import aurum
from aurum.errors import EmptyCart
from aurum.ordering.order.order import Order, PaymentMethod
from aurum.shared.queries import find

logger = structlog.get_logger(__name__)

_SUFFIX_ALPHABET = string.ascii_uppercase + string.digits
_SUFFIX_LENGTH = 6


def generate_order_id(prefix=None, rng=random):
    """Human-readable order number (``ORD-7KQ2ZD``) not already in the ledger."""
    prefix = config.order_id_prefix() if prefix is None else prefix
    while True:
        candidate = prefix + "".join(rng.choices(_SUFFIX_ALPHABET, k=_SUFFIX_LENGTH))
        if find(Order, candidate) is None:
            return candidate
        logger.debug("Order id collision, drawing again", order_id=candidate)


@aurum.command(part_of="Order")
class PlaceOrder:
    cart_id = Identifier(required=True)
    customer_name = String(required=True, max_length=150)
    phone = String(required=True, max_length=20)
    address = Text(required=True)
    payment_method = String(choices=PaymentMethod, default=PaymentMethod.ONLINE.value)


@aurum.command_handler(part_of=Order)
class CheckoutHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        cart_repo = current_domain.repository_for(ShoppingCart)
        product_repo = current_domain.repository_for(Product)

        cart = cart_repo.get(command.cart_id)
        if cart.is_empty:
            raise EmptyCart(str(cart.id))

        order = Order.place(
            order_id=generate_order_id(),
            customer_name=command.customer_name,
            phone=command.phone,
            address=command.address,
            lines=cart.items,
            payment_method=command.payment_method or PaymentMethod.ONLINE.value,
        )

        # Orders may exceed current stock; the debit floors at zero
        for item in order.items:
            product = find(Product, item.product_id)
            if product is None:
                logger.warning("Ordered product no longer listed", order_id=order.id, product_id=item.product_id)
                continue
            product.adjust_stock(-item.quantity)
            product_repo.add(product)

        cart.clear()

        current_domain.repository_for(Order).add(order)
        cart_repo.add(cart)

        logger.info(
            "Order placed",
            order_id=order.id,
            phone=order.phone,
            total_amount=order.total_amount,
            item_count=order.item_count,
            payment_method=order.payment_method,
        )
        return order.id
