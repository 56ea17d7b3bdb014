"""Admin reporting over the seeded ledger and catalogue."""

from datetime import UTC, datetime, timedelta
from types import SimpleNamespace

from aurum.admin import reports
from aurum.catalogue.product.management import AddProduct
from aurum.ordering.ledger import list_orders
from aurum.ordering.order.order import Order
from protean.utils.globals import current_domain


def _record_order(order_id, name, phone, address, placed_at, price=1000):
    line = SimpleNamespace(product_id=1, name="Royal Chronograph", price=price, image=None, category=None, quantity=1)
    current_domain.repository_for(Order).add(
        Order.place(
            order_id=order_id,
            customer_name=name,
            phone=phone,
            address=address,
            lines=[line],
            placed_at=placed_at,
        )
    )


class TestSeededLedger:
    def test_total_revenue(self, seeded):
        assert reports.total_revenue() == 60200

    def test_ledger_is_most_recent_first(self, seeded):
        assert [o.id for o in list_orders()] == [
            "ORD-5566-AB",
            "ORD-7829-XJ",
            "ORD-9921-MC",
            "ORD-1122-PL",
            "ORD-3344-GQ",
        ]

    def test_active_and_closed_partition_the_ledger(self, seeded):
        active = {o.id for o in reports.active_orders()}
        closed = {o.id for o in reports.closed_orders()}

        assert active == {"ORD-5566-AB", "ORD-7829-XJ", "ORD-9921-MC"}
        assert closed == {"ORD-1122-PL", "ORD-3344-GQ"}

    def test_every_seeded_customer_is_distinct(self, seeded):
        customers = reports.unique_customers()
        assert len(customers) == 5
        assert customers[0].name == "Siddharth Malhotra"
        assert all(c.order_count == 1 for c in customers)


class TestUniqueCustomers:
    def test_groups_by_phone(self):
        t1 = datetime(2024, 5, 1, 9, 0, tzinfo=UTC)
        t2 = t1 + timedelta(days=1)
        _record_order("ORD-AAAAAA", "A", "111", "Addr-1", t1)
        _record_order("ORD-BBBBBB", "B", "111", "Addr-2", t2)

        (customer,) = reports.unique_customers()

        assert customer.phone == "111"
        assert customer.order_count == 2
        assert customer.last_order_date == t2
        assert customer.name == "B"
        assert customer.address == "Addr-2"

    def test_sorted_by_last_activity(self):
        base = datetime(2024, 5, 1, tzinfo=UTC)
        _record_order("ORD-CCCCCC", "Old", "222", "X", base)
        _record_order("ORD-DDDDDD", "New", "333", "Y", base + timedelta(hours=1))

        assert [c.phone for c in reports.unique_customers()] == ["333", "222"]

    def test_empty_ledger(self):
        assert reports.unique_customers() == []
        assert reports.total_revenue() == 0


class TestCategoryUsage:
    def test_seeded_counts(self, seeded):
        usage = {u.name: u.product_count for u in reports.category_usage()}

        assert len(usage) == 10
        assert usage["Non-Alcoholic"] == 4
        assert usage["Watches"] == 1
        assert usage["Seasonal"] == 1

    def test_counts_follow_new_products(self, seeded, process):
        process(AddProduct(name="Sapphire Diver", price=22000, stock=2, category="Watches"))

        usage = {u.name: u.product_count for u in reports.category_usage()}
        assert usage["Watches"] == 2
