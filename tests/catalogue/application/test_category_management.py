"""Application tests for category commands: ids, rename cascade and delete guard."""

import pytest
from aurum.catalogue.category.category import Category
from aurum.catalogue.category.management import AddCategory, DeleteCategory, RenameCategory
from aurum.catalogue.product.management import AddProduct
from aurum.catalogue.product.product import Product
from aurum.catalogue.queries import list_categories
from aurum.errors import CategoryInUse, ReferencedError
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain


def _product(product_id):
    return current_domain.repository_for(Product).get(product_id)


class TestAddCategory:
    def test_ids_are_numeric_strings_in_sequence(self, process):
        assert process(AddCategory(name="Watches")) == "1"
        assert process(AddCategory(name="Fragrance")) == "2"

    def test_id_follows_numeric_not_lexical_order(self, process):
        for name in ["A", "B", "C", "D", "E", "F", "G", "H", "I", "J"]:
            process(AddCategory(name=name))
        assert process(AddCategory(name="K")) == "11"

    def test_duplicate_names_are_permitted(self, process):
        process(AddCategory(name="Watches"))
        process(AddCategory(name="Watches"))
        assert [c.name for c in list_categories()] == ["Watches", "Watches"]


class TestRenameCategory:
    def test_rename_cascades_to_products(self, process):
        category_id = process(AddCategory(name="Watches"))
        first = process(AddProduct(name="Royal Chronograph", price=12500, stock=5, category="Watches"))
        second = process(AddProduct(name="Diver Automatic", price=9000, stock=2, category="Watches"))

        updated = process(RenameCategory(category_id=category_id, new_name="Timepieces"))

        assert updated == 2
        assert current_domain.repository_for(Category).get(category_id).name == "Timepieces"
        assert _product(first).category == "Timepieces"
        assert _product(second).category == "Timepieces"

    def test_rename_leaves_other_categories_alone(self, process):
        watches = process(AddCategory(name="Watches"))
        process(AddCategory(name="Fragrance"))
        scent = process(AddProduct(name="Obsidian Essence", price=4500, stock=12, category="Fragrance"))

        process(RenameCategory(category_id=watches, new_name="Timepieces"))

        assert _product(scent).category == "Fragrance"

    def test_rename_onto_an_existing_name_does_not_merge(self, process):
        watches = process(AddCategory(name="Watches"))
        fragrance = process(AddCategory(name="Fragrance"))
        watch = process(AddProduct(name="Royal Chronograph", price=12500, stock=5, category="Watches"))
        scent = process(AddProduct(name="Obsidian Essence", price=4500, stock=12, category="Fragrance"))

        process(RenameCategory(category_id=watches, new_name="Fragrance"))
        process(RenameCategory(category_id=fragrance, new_name="Perfume"))

        # Each product follows its own category, even though the names collided
        assert _product(watch).category == "Fragrance"
        assert _product(scent).category == "Perfume"

    def test_rename_adopts_unlinked_products_with_the_old_name(self, process):
        product_id = process(AddProduct(name="Royal Chronograph", price=12500, stock=5, category="Watches"))
        category_id = process(AddCategory(name="Watches"))

        process(RenameCategory(category_id=category_id, new_name="Timepieces"))

        product = _product(product_id)
        assert product.category == "Timepieces"
        assert product.category_id == category_id

    def test_rename_missing_category_raises_not_found(self, process):
        with pytest.raises(ObjectNotFoundError):
            process(RenameCategory(category_id="99", new_name="Nothing"))


class TestDeleteCategory:
    def test_delete_refused_while_referenced(self, process):
        category_id = process(AddCategory(name="Watches"))
        process(AddProduct(name="Royal Chronograph", price=12500, stock=5, category="Watches"))

        with pytest.raises(ReferencedError) as exc:
            process(DeleteCategory(category_id=category_id))

        assert isinstance(exc.value, CategoryInUse)
        assert exc.value.count == 1
        assert exc.value.category_name == "Watches"
        assert [c.id for c in list_categories()] == [category_id]

    def test_delete_reports_every_blocking_product(self, process):
        category_id = process(AddCategory(name="Non-Alcoholic"))
        for name in ["Classic Cola", "Thumbs Up", "Artisan Lemonade"]:
            process(AddProduct(name=name, price=150, stock=10, category="Non-Alcoholic"))

        with pytest.raises(CategoryInUse) as exc:
            process(DeleteCategory(category_id=category_id))
        assert exc.value.count == 3

    def test_delete_unused_category(self, process):
        category_id = process(AddCategory(name="Seasonal"))
        assert process(DeleteCategory(category_id=category_id)) is True
        assert list_categories() == []

    def test_delete_missing_category_is_a_no_op(self, process):
        assert process(DeleteCategory(category_id="77")) is False


class TestCategoryIdReuse:
    def test_deleted_highest_id_is_handed_out_again(self, process):
        process(AddCategory(name="Watches"))
        seasonal = process(AddCategory(name="Seasonal"))
        process(DeleteCategory(category_id=seasonal))

        assert process(AddCategory(name="Limited Time")) == seasonal
        assert [(c.id, c.name) for c in list_categories()] == [("1", "Watches"), ("2", "Limited Time")]

    def test_reused_id_survives_repeated_cycles(self, process):
        category_id = process(AddCategory(name="Seasonal"))
        for name in ["Festive", "Monsoon", "Summer"]:
            process(DeleteCategory(category_id=category_id))
            assert process(AddCategory(name=name)) == category_id

        assert [c.name for c in list_categories()] == ["Summer"]

    def test_restored_category_takes_products_and_renames(self, process):
        category_id = process(AddCategory(name="Seasonal"))
        process(DeleteCategory(category_id=category_id))
        process(AddCategory(name="Festive"))
        product_id = process(AddProduct(name="Diya Set", price=900, stock=4, category="Festive"))

        assert _product(product_id).category_id == category_id
        assert process(RenameCategory(category_id=category_id, new_name="Diwali")) == 1
        with pytest.raises(CategoryInUse):
            process(DeleteCategory(category_id=category_id))

    def test_deleted_category_cannot_be_renamed(self, process):
        category_id = process(AddCategory(name="Seasonal"))
        process(DeleteCategory(category_id=category_id))

        with pytest.raises(ObjectNotFoundError):
            process(RenameCategory(category_id=category_id, new_name="Festive"))
        assert process(DeleteCategory(category_id=category_id)) is False


class TestDuplicateNamedCategories:
    """Products link to one category by id, so a same-named twin is not blocked by them."""

    def test_twin_with_no_linked_products_can_be_deleted(self, process):
        first = process(AddCategory(name="Watches"))
        twin = process(AddCategory(name="Watches"))
        product_id = process(AddProduct(name="Royal Chronograph", price=12500, stock=5, category="Watches"))

        assert _product(product_id).category_id == first
        assert process(DeleteCategory(category_id=twin)) is True
        assert _product(product_id).category == "Watches"

    def test_linked_category_is_still_guarded(self, process):
        first = process(AddCategory(name="Watches"))
        process(AddCategory(name="Watches"))
        process(AddProduct(name="Royal Chronograph", price=12500, stock=5, category="Watches"))

        with pytest.raises(CategoryInUse):
            process(DeleteCategory(category_id=first))
