"""Admin control plane — guarded mutations and reporting for the back office.

A thin façade: every mutation is a command processed synchronously, every
read is recomputed from the repositories. Authentication is not handled here;
callers are expected to have gated access already.
"""

from protean.utils.globals import current_domain

from aurum.admin import reports
from aurum.catalogue import queries as catalogue
from aurum.catalogue.category.management import AddCategory, DeleteCategory, RenameCategory
from aurum.catalogue.product.management import AddProduct, AdjustStock, DeleteProduct, UpdateProduct
from aurum.ordering import ledger
from aurum.ordering.order.status import CloseOrder, UpdateOrderStatus
from aurum.service_area.policy import RegionPolicy
from aurum.service_area.registry import AddServiceArea, RemoveServiceArea, list_service_areas


class AdminControlPlane:
    def __init__(self, region_policy=None):
        self.region_policy = region_policy or RegionPolicy()

    @staticmethod
    def _process(command):
        return current_domain.process(command, asynchronous=False)

    # -------------------------------------------------------------------
    # Products
    # -------------------------------------------------------------------
    def add_product(self, name, price, stock=0, category=None, description=None, image=None, category_id=None):
        product_id = self._process(
            AddProduct(
                name=name,
                price=price,
                stock=stock,
                category=category,
                category_id=category_id,
                description=description,
                image=image,
            )
        )
        return catalogue.get_product(product_id)

    def update_product(self, product):
        """Save a full edit of ``product`` (any object with the product's attributes)."""
        self._process(
            UpdateProduct(
                product_id=product.id,
                name=product.name,
                description=product.description,
                price=product.price,
                image=product.image,
                category=product.category,
                category_id=getattr(product, "category_id", None),
                stock=product.stock,
            )
        )

    def delete_product(self, product_id):
        return self._process(DeleteProduct(product_id=product_id))

    def adjust_stock(self, product_id, delta):
        return self._process(AdjustStock(product_id=product_id, delta=delta))

    def increment_stock(self, product_id):
        return self.adjust_stock(product_id, 1)

    def decrement_stock(self, product_id):
        return self.adjust_stock(product_id, -1)

    # -------------------------------------------------------------------
    # Categories
    # -------------------------------------------------------------------
    def add_category(self, name):
        category_id = self._process(AddCategory(name=name))
        return catalogue.get_category(category_id)

    def rename_category(self, category_id, new_name):
        """Rename and return how many products moved with it."""
        return self._process(RenameCategory(category_id=category_id, new_name=new_name))

    def delete_category(self, category_id):
        """Delete an unused category; raises ``CategoryInUse`` otherwise."""
        return self._process(DeleteCategory(category_id=category_id))

    # -------------------------------------------------------------------
    # Service areas
    # -------------------------------------------------------------------
    def add_pincode(self, code, region=None):
        """Validate against the region policy, then register the code.

        Returns ``False`` when the code was already served.
        """
        code = (code or "").strip()
        self.region_policy.validate(code, region)
        return self._process(AddServiceArea(code=code))

    def remove_pincode(self, code):
        return self._process(RemoveServiceArea(code=code))

    def pincodes(self, region=None):
        if region is None:
            return list_service_areas()
        return self.region_policy.codes_in(region)

    # -------------------------------------------------------------------
    # Orders
    # -------------------------------------------------------------------
    def update_order_status(self, order_id, status):
        self._process(UpdateOrderStatus(order_id=order_id, status=status))

    def mark_as_closed(self, order_id):
        self._process(CloseOrder(order_id=order_id))

    def orders(self):
        return ledger.list_orders()

    def active_orders(self):
        return reports.active_orders()

    def closed_orders(self):
        return reports.closed_orders()

    # -------------------------------------------------------------------
    # Reporting
    # -------------------------------------------------------------------
    def total_revenue(self):
        return reports.total_revenue()

    def unique_customers(self):
        return reports.unique_customers()

    def category_usage(self):
        return reports.category_usage()

    def products(self):
        return catalogue.list_products()

    def categories(self):
        return catalogue.list_categories()
