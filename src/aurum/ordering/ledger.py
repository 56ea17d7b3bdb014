"""Order ledger reads. Listings are most-recent-first."""

from protean.utils.globals import current_domain

from aurum.ordering.order.order import Order, OrderStatus
from aurum.shared.queries import fetch_all


def list_orders():
    return sorted(fetch_all(Order), key=lambda o: o.date, reverse=True)


def get_order(order_id):
    """Return the order or raise ``ObjectNotFoundError``."""
    return current_domain.repository_for(Order).get(order_id)


def orders_with_status(*statuses):
    wanted = {OrderStatus(s).value for s in statuses}
    return [o for o in list_orders() if o.status in wanted]
