"""Order placement: command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from dining.access.policy import Action, authorize
from dining.access.user import Country, Role, requester_of
from dining.domain import dining
from dining.line_items import parse_line_items
from dining.menu.catalogue import quote_menu_items
from dining.order.order import Order

logger = structlog.get_logger(__name__)


@dining.command(part_of="Order")
class PlaceOrder:
    """Place an order for menu items of restaurants in the requester's country.

    Any price sent by a client is ignored; totals come from the menu.
    """

    user_id = Identifier(required=True)
    user_role = String(required=True, choices=Role)
    user_country = String(required=True, choices=Country)
    items = Text(required=True)  # JSON: list of {menu_item_id, quantity}


@dining.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        user = requester_of(command)
        lines = parse_line_items(command.items)
        authorize(user, Action.CREATE_ORDER)

        quotes = quote_menu_items(line["menu_item_id"] for line in lines)
        order = Order.place(owner=user, lines=lines, quotes=quotes)
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            owner_id=user.id,
            country=order.owner_country,
            item_count=len(lines),
            total=order.total,
        )
        return str(order.id)
