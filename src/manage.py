"""Aurum management CLI.

Boots the domain, loads the sample data and prints views of the in-memory
state. Nothing persists between runs.

Usage:
    python src/manage.py catalog            # Categories with their products
    python src/manage.py report             # Revenue, customers and open orders
    python src/manage.py demo --pincode 411001
"""

import argparse
import asyncio
import sys


def _boot():
    from aurum.domain import aurum

    aurum.init()
    return aurum


def show_catalog():
    from aurum.catalogue.queries import browse

    for category, products in browse():
        print(f"[{category.id}] {category.name} ({len(products)} items)")
        for product in products:
            print(f"    #{product.id:<3} {product.name:<30} {product.price:>7}  stock {product.stock}")


def show_report():
    from aurum.admin.control_plane import AdminControlPlane

    admin = AdminControlPlane()
    print(f"Total revenue: {admin.total_revenue()}")
    print("Customers:")
    for customer in admin.unique_customers():
        print(f"    {customer.name:<22} {customer.phone}  orders={customer.order_count}  last={customer.last_order_date:%Y-%m-%d %H:%M}")
    print("Open orders:")
    for order in admin.active_orders():
        print(f"    {order.id:<12} {order.status:<10} {order.total_amount:>7}  {order.customer_name}")


async def run_demo(pincode):
    from aurum.storefront import Storefront

    shop = Storefront(session_id="demo", area_check_delay=0, checkout_delay=0)
    if not await shop.verify_pincode(pincode):
        print(f"We currently do not offer our exclusive services in {pincode}.")
        return 1

    shop.add_to_cart(1)
    shop.add_to_cart(5)
    shop.update_quantity(5, 1)
    print(f"Cart: {shop.cart_item_count()} item(s), total {shop.cart_total()}")

    order = await shop.checkout("Demo Shopper", "9000000000", "Suite 1, Demo Towers", "COD")
    print(f"Placed {order.id}: {order.total_amount} via {order.payment_method}")
    return 0


def main():
    parser = argparse.ArgumentParser(description="Aurum storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("catalog", help="Print the seeded catalogue")
    subparsers.add_parser("report", help="Print admin reports over the seeded ledger")
    demo_parser = subparsers.add_parser("demo", help="Run a shopper checkout against the sample data")
    demo_parser.add_argument("--pincode", default="411001", help="Delivery pincode (default: 411001)")

    args = parser.parse_args()

    domain = _boot()
    with domain.domain_context():
        from aurum.seed import seed

        seed()

        if args.command == "catalog":
            show_catalog()
        elif args.command == "report":
            show_report()
        elif args.command == "demo":
            return asyncio.run(run_demo(args.pincode))
    return 0


if __name__ == "__main__":
    sys.exit(main())
