"""Cart management — commands and handler.

Every handler loads the live product from the catalogue so stock ceilings are
checked against current stock, not against the snapshot held in the cart.
"""

import structlog
from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from aurum.cart.cart import ShoppingCart
from aurum.catalogue.product.product import Product
from aurum.domain import aurum
from aurum.shared.queries import load

logger = structlog.get_logger(__name__)


@aurum.command(part_of="ShoppingCart")
class CreateCart:
    session_id = String(max_length=255)


@aurum.command(part_of="ShoppingCart")
class AddToCart:
    cart_id = Identifier(required=True)
    product_id = Integer(required=True)


@aurum.command(part_of="ShoppingCart")
class UpdateCartQuantity:
    cart_id = Identifier(required=True)
    product_id = Integer(required=True)
    delta = Integer(required=True)


@aurum.command(part_of="ShoppingCart")
class ClearCart:
    cart_id = Identifier(required=True)


@aurum.command_handler(part_of=ShoppingCart)
class ManageCartHandler:
    @handle(CreateCart)
    def create_cart(self, command):
        cart = ShoppingCart.create(session_id=command.session_id)
        current_domain.repository_for(ShoppingCart).add(cart)
        return str(cart.id)

    @handle(AddToCart)
    def add_to_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        product = load(Product, command.product_id)

        cart.add_item(product)
        repo.add(cart)

        quantity = cart.quantity_of(product.id)
        logger.debug("Added to cart", cart_id=str(cart.id), product_id=product.id, quantity=quantity)
        return quantity

    @handle(UpdateCartQuantity)
    def update_cart_quantity(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        product = load(Product, command.product_id)

        cart.update_quantity(product, command.delta)
        repo.add(cart)
        return cart.quantity_of(product.id)

    @handle(ClearCart)
    def clear_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        removed = cart.clear()
        repo.add(cart)
        return removed
