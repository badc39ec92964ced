"""Shared cart item merging: command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from dining.access.user import Country, Role, requester_of
from dining.domain import dining
from dining.line_items import parse_line_items
from dining.menu.catalogue import ensure_menu_items_exist
from dining.shared_cart.shared_cart import SharedCart

logger = structlog.get_logger(__name__)


@dining.command(part_of="SharedCart")
class AddItemsToSharedCart:
    shared_cart_id = Identifier(required=True)
    user_id = Identifier(required=True)
    user_role = String(required=True, choices=Role)
    user_country = String(required=True, choices=Country)
    items = Text(required=True)  # JSON: list of {menu_item_id, quantity}


@dining.command_handler(part_of=SharedCart)
class SharedCartItemsHandler:
    @handle(AddItemsToSharedCart)
    def add_items_to_shared_cart(self, command):
        user = requester_of(command)
        lines = parse_line_items(command.items)

        # The read-modify-write below runs in this handler's unit of work
        repo = current_domain.repository_for(SharedCart)
        cart = repo.get(command.shared_cart_id)
        cart.ensure_visible_to(user)
        ensure_menu_items_exist(line["menu_item_id"] for line in lines)

        cart.merge_items(lines, contributor=user)
        repo.add(cart)

        logger.info(
            "Items added to shared cart",
            shared_cart_id=str(cart.id),
            added_by=user.id,
            line_count=len(lines),
        )
        return str(cart.id)
