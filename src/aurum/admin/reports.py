"""Admin read models, recomputed from the ledger and catalogue on every call.

Nothing here is stored; each function derives its answer from the current
orders and products so it can never drift from them.
"""

from dataclasses import dataclass
from datetime import datetime

from aurum.catalogue.queries import browse
from aurum.ordering.ledger import list_orders, orders_with_status
from aurum.ordering.order.order import OrderStatus


@dataclass(frozen=True)
class CustomerSummary:
    """One customer, identified by phone number."""

    name: str
    phone: str
    address: str
    last_order_date: datetime
    order_count: int


@dataclass(frozen=True)
class CategoryUsage:
    category_id: str
    name: str
    product_count: int


def total_revenue(orders=None) -> int:
    """Sum of order totals across every status."""
    orders = list_orders() if orders is None else orders
    return sum(order.total_amount for order in orders)


def unique_customers(orders=None) -> list[CustomerSummary]:
    """Group orders by phone.

    The first order of each group in ledger order (most recent first) supplies
    name and address; the latest order date and the group size complete the
    record. Customers are returned most recently active first.
    """
    orders = list_orders() if orders is None else orders

    groups: dict[str, list] = {}
    for order in orders:
        groups.setdefault(order.phone, []).append(order)

    customers = [
        CustomerSummary(
            name=group[0].customer_name,
            phone=phone,
            address=group[0].address,
            last_order_date=max(o.date for o in group),
            order_count=len(group),
        )
        for phone, group in groups.items()
    ]
    return sorted(customers, key=lambda c: c.last_order_date, reverse=True)


def active_orders():
    """Orders still being worked: Pending or Confirmed."""
    return orders_with_status(OrderStatus.PENDING, OrderStatus.CONFIRMED)


def closed_orders():
    return orders_with_status(OrderStatus.DELIVERED)


def category_usage() -> list[CategoryUsage]:
    return [
        CategoryUsage(category_id=category.id, name=category.name, product_count=len(products))
        for category, products in browse()
    ]
