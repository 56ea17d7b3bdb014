"""Order status management — commands and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from aurum.domain import aurum
from aurum.ordering.order.order import Order, OrderStatus

logger = structlog.get_logger(__name__)


@aurum.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, choices=OrderStatus)


@aurum.command(part_of="Order")
class CloseOrder:
    """Admin's "mark as closed": move the order to Delivered."""

    order_id = Identifier(required=True)


@aurum.command_handler(part_of=Order)
class OrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        previous = order.status
        order.transition_to(command.status)
        repo.add(order)

        logger.info("Order status changed", order_id=order.id, previous_status=previous, new_status=order.status)

    @handle(CloseOrder)
    def close_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.close()
        repo.add(order)

        logger.info("Order closed", order_id=order.id)
