"""Category management — commands and handler.

Renaming cascades to every product in the category and deleting is refused
while any product still belongs to it. Both run inside the command's unit of
work, so the category and its products always change together.
"""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from aurum.catalogue.category.category import Category
from aurum.catalogue.product.product import Product
from aurum.catalogue.queries import next_category_id, referencing_products
from aurum.domain import aurum
from aurum.errors import CategoryInUse
from aurum.shared.queries import find, find_any, load

logger = structlog.get_logger(__name__)


@aurum.command(part_of="Category")
class AddCategory:
    name = String(required=True, max_length=100)


@aurum.command(part_of="Category")
class RenameCategory:
    category_id = Identifier(required=True)
    new_name = String(required=True, max_length=100)


@aurum.command(part_of="Category")
class DeleteCategory:
    category_id = Identifier(required=True)


@aurum.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(AddCategory)
    def add_category(self, command):
        category_id = next_category_id()
        category = find_any(Category, category_id)
        if category is None:
            category = Category.create(category_id=category_id, name=command.name)
        else:
            category.restore(command.name)
        current_domain.repository_for(Category).add(category)

        logger.info("Category added", category_id=category.id, name=category.name)
        return category.id

    @handle(RenameCategory)
    def rename_category(self, command):
        category_repo = current_domain.repository_for(Category)
        product_repo = current_domain.repository_for(Product)

        category = load(Category, str(command.category_id))

        # Membership is decided against the name held before the rename
        members = referencing_products(category)

        previous_name = category.rename(command.new_name, products_updated=len(members))
        category_repo.add(category)

        for product in members:
            product.recategorize(category.id, category.name)
            product_repo.add(product)

        logger.info(
            "Category renamed",
            category_id=category.id,
            previous_name=previous_name,
            new_name=category.name,
            products_updated=len(members),
        )
        return len(members)

    @handle(DeleteCategory)
    def delete_category(self, command):
        category = find(Category, str(command.category_id))
        if category is None:
            logger.info("Category already absent", category_id=str(command.category_id))
            return False

        members = referencing_products(category)
        if members:
            logger.warning(
                "Category delete refused",
                category_id=category.id,
                name=category.name,
                product_count=len(members),
            )
            raise CategoryInUse(category.id, category.name, len(members))

        category.delete()
        current_domain.repository_for(Category).add(category)
        logger.info("Category deleted", category_id=category.id, name=category.name)
        return True
