"""Product management — commands and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from aurum.catalogue.category.category import Category
from aurum.catalogue.product.product import Product
from aurum.catalogue.queries import get_category, next_product_id, resolve_category
from aurum.domain import aurum
from aurum.shared.queries import find, find_any, load

logger = structlog.get_logger(__name__)


@aurum.command(part_of="Product")
class AddProduct:
    name = String(required=True, max_length=150)
    description = Text()
    price = Integer(required=True, min_value=0)
    image = String(max_length=500)
    category = String(max_length=100)
    category_id = Identifier()
    stock = Integer(default=0, min_value=0)


@aurum.command(part_of="Product")
class UpdateProduct:
    """Replace every editable attribute of an existing product."""

    product_id = Integer(required=True)
    name = String(required=True, max_length=150)
    description = Text()
    price = Integer(required=True, min_value=0)
    image = String(max_length=500)
    category = String(max_length=100)
    category_id = Identifier()
    stock = Integer(default=0, min_value=0)


@aurum.command(part_of="Product")
class DeleteProduct:
    product_id = Integer(required=True)


@aurum.command(part_of="Product")
class AdjustStock:
    product_id = Integer(required=True)
    delta = Integer(required=True)


def _category_link(category_name, category_id):
    """Resolve the (id, name) pair a product should carry.

    An id given on its own must exist. When a name comes with it, the id is
    kept only while it still names that category; otherwise the name wins,
    so a full edit that changes the category name is not undone by the
    product's previous id. A bare name links to the first category carrying
    it; unknown names are kept as-is with no id.
    """
    if category_id and not category_name:
        category = get_category(category_id)
        return category.id, category.name

    if category_id:
        category = find(Category, str(category_id))
        if category is not None and category.name == category_name:
            return category.id, category.name

    category = resolve_category(category_name)
    if category is None:
        return None, category_name
    return category.id, category.name


@aurum.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        repo = current_domain.repository_for(Product)
        category_id, category_name = _category_link(command.category, command.category_id)
        details = {
            "name": command.name,
            "description": command.description,
            "price": command.price,
            "image": command.image,
            "category": category_name,
            "category_id": category_id,
            "stock": command.stock or 0,
        }

        product_id = next_product_id()
        product = find_any(Product, product_id)
        if product is None:
            product = Product.create(product_id=product_id, **details)
        else:
            product.relist(**details)
        repo.add(product)

        if category_id is None and category_name:
            logger.warning("Product listed under unknown category", product_id=product.id, category=category_name)
        logger.info("Product added", product_id=product.id, name=product.name, stock=product.stock)
        return product.id

    @handle(UpdateProduct)
    def update_product(self, command):
        product = load(Product, command.product_id)

        category_id, category_name = _category_link(command.category, command.category_id)
        product.replace_details(
            name=command.name,
            description=command.description,
            price=command.price,
            image=command.image,
            category=category_name,
            category_id=category_id,
            stock=command.stock or 0,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("Product updated", product_id=product.id, category=product.category)

    @handle(DeleteProduct)
    def delete_product(self, command):
        product = find(Product, command.product_id)
        if product is None:
            logger.info("Product already absent", product_id=command.product_id)
            return False

        product.remove()
        current_domain.repository_for(Product).add(product)
        logger.info("Product deleted", product_id=command.product_id)
        return True

    @handle(AdjustStock)
    def adjust_stock(self, command):
        product = load(Product, command.product_id)
        product.adjust_stock(command.delta)
        current_domain.repository_for(Product).add(product)

        logger.info(
            "Stock adjusted",
            product_id=product.id,
            delta=command.delta,
            stock=product.stock,
        )
        return product.stock
