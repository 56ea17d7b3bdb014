"""Catalogue reads: listings, category membership and identity allocation."""

from aurum.catalogue.category.category import Category
from aurum.catalogue.product.product import Product
from aurum.shared.queries import fetch_all, load


def _category_sort_key(category):
    try:
        return (0, int(category.id))
    except (TypeError, ValueError):
        return (1, str(category.id))


def list_products():
    return sorted(fetch_all(Product), key=lambda p: p.id)


def list_categories():
    return sorted(fetch_all(Category), key=_category_sort_key)


def get_product(product_id):
    """Return the product or raise ``ObjectNotFoundError``."""
    return load(Product, product_id)


def get_category(category_id):
    """Return the category or raise ``ObjectNotFoundError``."""
    return load(Category, str(category_id))


def next_product_id():
    return max((p.id for p in fetch_all(Product)), default=0) + 1


def next_category_id():
    numeric_ids = []
    for category in fetch_all(Category):
        try:
            numeric_ids.append(int(category.id))
        except (TypeError, ValueError):
            continue
    return str(max(numeric_ids, default=0) + 1)


def resolve_category(name):
    """First category (by id) carrying ``name``, or ``None``."""
    if not name:
        return None
    return next((c for c in list_categories() if c.name == name), None)


def referencing_products(category):
    return [p for p in list_products() if category.is_referenced_by(p)]


def products_in_category(category_name):
    """Products shown under a category heading in the store."""
    category = resolve_category(category_name)
    if category is None:
        return [p for p in list_products() if p.category == category_name]
    return referencing_products(category)


def browse():
    """Categories in display order, each paired with its products."""
    products = list_products()
    return [(category, [p for p in products if category.is_referenced_by(p)]) for category in list_categories()]
