"""Business rejections raised by the Aurum domain.

Each error is a ``ValidationError`` so callers can catch business outcomes
uniformly. ``messages`` follows Protean's ``{field: [message]}`` shape and the
extra attributes carry what a caller needs to render a message.
"""

from protean.exceptions import ValidationError


class ReferencedError(ValidationError):
    """A record cannot be removed while other records still point at it."""


class CategoryInUse(ReferencedError):
    def __init__(self, category_id, category_name, count):
        self.category_id = category_id
        self.category_name = category_name
        self.count = count
        super().__init__(
            {
                "category": [
                    f'Cannot delete category "{category_name}". '
                    f"It still contains {count} product(s). Please reassign or delete them first."
                ]
            }
        )


class InsufficientStock(ValidationError):
    """The requested cart quantity exceeds what is in stock."""

    def __init__(self, product_id, requested, available):
        self.product_id = product_id
        self.requested = requested
        self.available = available
        super().__init__(
            {"quantity": [f"Only {available} unit(s) of product {product_id} available, {requested} requested"]}
        )


class OutOfStock(InsufficientStock):
    def __init__(self, product_id):
        super().__init__(product_id, requested=1, available=0)
        self.messages = {"stock": [f"Product {product_id} is out of stock"]}


class EmptyCart(ValidationError):
    def __init__(self, cart_id):
        self.cart_id = cart_id
        super().__init__({"cart": ["Cannot place an order for an empty cart"]})


class InvalidPincode(ValidationError):
    def __init__(self, code, reason):
        self.code = code
        super().__init__({"pincode": [reason]})


class InvalidRegion(InvalidPincode):
    def __init__(self, code, region, expected_prefix):
        self.region = region
        self.expected_prefix = expected_prefix
        super().__init__(code, f"{region} pincodes typically start with {expected_prefix}.")
