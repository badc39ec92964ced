"""Order settlement: checkout and cancellation commands and handler.

Both run the role check before the order is loaded, then the country
check against the order's owner.
"""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from dining.access.policy import Action, authorize
from dining.access.user import Country, Role, requester_of
from dining.domain import dining
from dining.order.order import Order

logger = structlog.get_logger(__name__)


@dining.command(part_of="Order")
class CheckoutOrder:
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    user_role = String(required=True, choices=Role)
    user_country = String(required=True, choices=Country)


@dining.command(part_of="Order")
class CancelOrder:
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    user_role = String(required=True, choices=Role)
    user_country = String(required=True, choices=Country)


@dining.command_handler(part_of=Order)
class SettleOrderHandler:
    @handle(CheckoutOrder)
    def checkout_order(self, command):
        user = requester_of(command)
        authorize(user, Action.CHECKOUT_ORDER)

        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        if order.is_settled:
            logger.warning("Overwriting settled order status", order_id=str(order.id), status=order.status)

        order.mark_paid(actor=user)
        repo.add(order)

        logger.info("Order paid", order_id=str(order.id), paid_by=user.id)
        return str(order.id)

    @handle(CancelOrder)
    def cancel_order(self, command):
        user = requester_of(command)
        authorize(user, Action.CANCEL_ORDER)

        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        if order.is_settled:
            logger.warning("Overwriting settled order status", order_id=str(order.id), status=order.status)

        order.cancel(actor=user)
        repo.add(order)

        logger.info("Order cancelled", order_id=str(order.id), cancelled_by=user.id)
        return str(order.id)
