"""Shared cart management: creation and deletion commands and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from dining.access.user import Country, Role, requester_of
from dining.domain import dining
from dining.line_items import parse_line_items
from dining.menu.catalogue import ensure_menu_items_exist
from dining.shared_cart.share_code import allocate_share_code
from dining.shared_cart.shared_cart import SharedCart, SharedCartItem

logger = structlog.get_logger(__name__)


@dining.command(part_of="SharedCart")
class CreateSharedCart:
    """Open a shared cart visible to everyone in ``country``."""

    user_id = Identifier(required=True)
    user_email = String(max_length=254)
    user_role = String(required=True, choices=Role)
    user_country = String(required=True, choices=Country)
    country = String(required=True, choices=Country)
    items = Text(required=True)  # JSON: list of {menu_item_id, quantity}


@dining.command(part_of="SharedCart")
class DeleteSharedCart:
    """Delete a shared cart. Only its creator may do this."""

    shared_cart_id = Identifier(required=True)
    user_id = Identifier(required=True)


def share_code_taken(code) -> bool:
    return bool(current_domain.repository_for(SharedCart)._dao.query.filter(share_code=code).all().items)


@dining.command_handler(part_of=SharedCart)
class ManageSharedCartHandler:
    @handle(CreateSharedCart)
    def create_shared_cart(self, command):
        user = requester_of(command)
        lines = parse_line_items(command.items)
        ensure_menu_items_exist(line["menu_item_id"] for line in lines)

        cart = SharedCart.share(
            creator=user,
            country=command.country,
            share_code=allocate_share_code(share_code_taken),
            lines=lines,
        )
        current_domain.repository_for(SharedCart).add(cart)

        logger.info(
            "Shared cart created",
            shared_cart_id=str(cart.id),
            country=cart.country,
            created_by=user.id,
            item_count=len(cart.items),
        )
        return str(cart.id)

    @handle(DeleteSharedCart)
    def delete_shared_cart(self, command):
        repo = current_domain.repository_for(SharedCart)
        cart = repo.get(command.shared_cart_id)
        cart.ensure_deletable_by(command.user_id)

        snapshot = cart.snapshot()

        # Item rows live in their own table and are not removed with the cart
        item_dao = current_domain.repository_for(SharedCartItem)._dao
        for item in list(cart.items):
            item_dao.delete(item)
        repo._dao.delete(cart)

        logger.info("Shared cart deleted", shared_cart_id=snapshot["id"], deleted_by=str(command.user_id))
        return snapshot
