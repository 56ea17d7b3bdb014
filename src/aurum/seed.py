"""Sample data loaded at process start.

State is volatile: the catalogue, service areas and order history below are
what every fresh process begins with.
"""

from datetime import UTC, datetime, timedelta
from types import SimpleNamespace

import structlog
from protean.utils.globals import current_domain

from aurum.catalogue.category.category import Category
from aurum.catalogue.product.product import Product
from aurum.ordering.order.order import Order, OrderStatus, PaymentMethod
from aurum.service_area.area import ServiceArea
from aurum.shared.queries import fetch_all

logger = structlog.get_logger(__name__)

SERVICEABLE_PINCODES = [
    # Pune
    "411001",
    "411004",
    "411007",
    "411038",
    "411045",
    # Kolhapur
    "416001",
    "416002",
    "416003",
    "416012",
    "416229",
]

CATEGORIES = [
    ("1", "Watches"),
    ("2", "Fragrance"),
    ("3", "Accessories"),
    ("4", "Apparel"),
    ("5", "Jewelry"),
    ("6", "Footwear"),
    ("7", "Alcoholic"),
    ("8", "Non-Alcoholic"),
    ("9", "Limited Time"),
    ("10", "Seasonal"),
]

PRODUCTS = [
    (1, "Royal Chronograph", "A masterpiece of timekeeping in 18k gold plating.", 12500, "Watches", 5),
    (2, "Obsidian Essence", "Rare oud and amber fragrance for the discerning soul.", 4500, "Fragrance", 12),
    (3, "Golden Weave Clutch", "Hand-stitched silk clutch with golden thread embroidery.", 8900, "Accessories", 3),
    (4, "Heritage Silk Scarf", "100% pure silk scarf with ancient royal patterns.", 2100, "Apparel", 20),
    (5, "Aurum Cufflinks", "Minimalist design, maximum impact. Solid brass core.", 1500, "Jewelry", 15),
    (6, "Midnight Velvet Loafers", "Italian velvet loafers with gold-plated bits.", 6700, "Footwear", 8),
    (7, "Vintage Reserve Merlot", "Aged 12 years, notes of oak and blackberry.", 3200, "Alcoholic", 25),
    (
        8,
        "Blue Mountain Estate Coffee",
        "Single-origin beans roasted to perfection, distinct floral notes.",
        4100,
        "Non-Alcoholic",
        10,
    ),
    (9, "Himalayan Crystal Water", "Bottled at the source in glass decanters. Limited edition.", 800, "Non-Alcoholic", 50),
    (10, "Classic Cola", "Refreshing carbonated beverage served in crystal glass.", 150, "Non-Alcoholic", 100),
    (11, "Thumbs Up", "Strong, spicy, fizzy cola. The taste of thunder.", 150, "Non-Alcoholic", 100),
    (12, "Artisan Lemonade", "Freshly squeezed lemons with a hint of mint and ginger.", 250, "Seasonal", 40),
    (13, "Gold Flake Champagne", "Sparkling wine infused with edible 24k gold flakes.", 15000, "Limited Time", 5),
]

# (id, name, phone, address, [(product_id, quantity)], payment, status, age)
ORDER_HISTORY = [
    (
        "ORD-7829-XJ",
        "Vikram Rathore",
        "9876543210",
        "Villa 45, Koregaon Park, Pune",
        [(1, 1), (7, 2)],
        PaymentMethod.ONLINE,
        OrderStatus.PENDING,
        timedelta(minutes=30),
    ),
    (
        "ORD-9921-MC",
        "Ananya Desai",
        "9988776655",
        "Flat 1202, The Royal Gardens, Kolhapur",
        [(4, 1)],
        PaymentMethod.COD,
        OrderStatus.CONFIRMED,
        timedelta(hours=2),
    ),
    (
        "ORD-1122-PL",
        "Rohan Kulkarni",
        "9123456789",
        "Plot 88, Viman Nagar, Pune",
        [(8, 1), (2, 1)],
        PaymentMethod.ONLINE,
        OrderStatus.DELIVERED,
        timedelta(days=2),
    ),
    (
        "ORD-3344-GQ",
        "Priya Sharma",
        "9000011111",
        "Penthouse 1, Baner, Pune",
        [(13, 1)],
        PaymentMethod.COD,
        OrderStatus.DELIVERED,
        timedelta(days=5),
    ),
    (
        "ORD-5566-AB",
        "Siddharth Malhotra",
        "9822098220",
        "Bungalow 7, Kalyani Nagar, Pune",
        [(3, 1), (6, 1)],
        PaymentMethod.ONLINE,
        OrderStatus.PENDING,
        timedelta(minutes=5),
    ),
]


def _image_for(product_id):
    return f"https://picsum.photos/400/400?random={product_id}"


def seed(now=None):
    """Load the sample data into an empty domain. Returns ``False`` if data already exists."""
    if fetch_all(Product) or fetch_all(Category):
        logger.info("Sample data already present, skipping seed")
        return False

    now = now or datetime.now(UTC)

    area_repo = current_domain.repository_for(ServiceArea)
    for code in SERVICEABLE_PINCODES:
        area_repo.add(ServiceArea(code=code, added_at=now))

    category_repo = current_domain.repository_for(Category)
    category_ids = {}
    for category_id, name in CATEGORIES:
        category_repo.add(Category(id=category_id, name=name))
        category_ids.setdefault(name, category_id)

    product_repo = current_domain.repository_for(Product)
    products = {}
    for product_id, name, description, price, category, stock in PRODUCTS:
        product = Product(
            id=product_id,
            name=name,
            description=description,
            price=price,
            image=_image_for(product_id),
            category=category,
            category_id=category_ids.get(category),
            stock=stock,
        )
        product_repo.add(product)
        products[product_id] = product

    order_repo = current_domain.repository_for(Order)
    for order_id, name, phone, address, lines, payment, status, age in ORDER_HISTORY:
        snapshot = [
            SimpleNamespace(
                product_id=products[product_id].id,
                name=products[product_id].name,
                price=products[product_id].price,
                image=products[product_id].image,
                category=products[product_id].category,
                quantity=quantity,
            )
            for product_id, quantity in lines
        ]
        order_repo.add(
            Order.place(
                order_id=order_id,
                customer_name=name,
                phone=phone,
                address=address,
                lines=snapshot,
                payment_method=payment.value,
                status=status.value,
                placed_at=now - age,
            )
        )

    logger.info(
        "Sample data loaded",
        service_areas=len(SERVICEABLE_PINCODES),
        categories=len(CATEGORIES),
        products=len(PRODUCTS),
        orders=len(ORDER_HISTORY),
    )
    return True
