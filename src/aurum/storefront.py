"""Shopper-facing façade: area check, browsing, cart and checkout.

Two calls carry a simulated latency (area verification and checkout). Both
await the delay first and then apply their change as a single synchronous
command, so nothing half-applied is ever visible while the delay is pending.
Cancelling the awaiting task before the delay elapses leaves state untouched.
"""

import asyncio

import structlog
from protean.utils.globals import current_domain

from aurum import config
from aurum.cart.cart import ShoppingCart
from aurum.cart.items import AddToCart, ClearCart, CreateCart, UpdateCartQuantity
from aurum.catalogue import queries as catalogue
from aurum.ordering.checkout import PlaceOrder
from aurum.ordering.ledger import get_order
from aurum.ordering.order.order import PaymentMethod
from aurum.service_area.registry import is_serviceable, list_service_areas
from aurum.utils.logging import add_context

logger = structlog.get_logger(__name__)


class Storefront:
    def __init__(self, session_id="guest", area_check_delay=None, checkout_delay=None):
        self.session_id = session_id
        self.area_check_delay = config.area_check_delay() if area_check_delay is None else area_check_delay
        self.checkout_delay = config.checkout_delay() if checkout_delay is None else checkout_delay
        self.pincode = None
        self._cart_id = None

    @staticmethod
    def _process(command):
        return current_domain.process(command, asynchronous=False)

    # -------------------------------------------------------------------
    # Entry gate
    # -------------------------------------------------------------------
    async def verify_pincode(self, code):
        """Check whether the store delivers to ``code``; remembers it on success."""
        code = (code or "").strip()
        await asyncio.sleep(self.area_check_delay)

        if not is_serviceable(code):
            logger.info("Pincode not serviceable", session_id=self.session_id, pincode=code)
            return False

        self.pincode = code
        add_context(session_id=self.session_id, pincode=code)
        return True

    @property
    def has_entered(self):
        return self.pincode is not None

    # -------------------------------------------------------------------
    # Catalogue
    # -------------------------------------------------------------------
    def list_products(self):
        return catalogue.list_products()

    def list_categories(self):
        return catalogue.list_categories()

    def list_service_areas(self):
        return list_service_areas()

    def browse(self):
        return catalogue.browse()

    def product(self, product_id):
        return catalogue.get_product(product_id)

    # -------------------------------------------------------------------
    # Cart
    # -------------------------------------------------------------------
    @property
    def cart_id(self):
        if self._cart_id is None:
            self._cart_id = self._process(CreateCart(session_id=self.session_id))
        return self._cart_id

    @property
    def cart(self):
        return current_domain.repository_for(ShoppingCart).get(self.cart_id)

    def add_to_cart(self, product_id):
        """Add one unit; returns the line's new quantity."""
        return self._process(AddToCart(cart_id=self.cart_id, product_id=product_id))

    def update_quantity(self, product_id, delta):
        """Move a line by ``delta``; returns the new quantity (0 once removed)."""
        return self._process(UpdateCartQuantity(cart_id=self.cart_id, product_id=product_id, delta=delta))

    def clear_cart(self):
        return self._process(ClearCart(cart_id=self.cart_id))

    def cart_items(self):
        return list(self.cart.items)

    def cart_total(self):
        return self.cart.total()

    def cart_item_count(self):
        return self.cart.item_count()

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    async def checkout(self, customer_name, phone, address, payment_method=PaymentMethod.ONLINE.value):
        """Simulated payment delay, then the checkout transaction. Returns the order."""
        await asyncio.sleep(self.checkout_delay)

        order_id = self._process(
            PlaceOrder(
                cart_id=self.cart_id,
                customer_name=customer_name,
                phone=phone,
                address=address,
                payment_method=payment_method,
            )
        )
        return get_order(order_id)
