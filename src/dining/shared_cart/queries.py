"""Shared cart reads.

Listing is limited to the requester's country. Looking a cart up by share
code applies the same country rule.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from dining.access.scope import shared_cart_scope
from dining.access.user import User
from dining.menu.restaurant import MenuItem
from dining.shared_cart.shared_cart import SharedCart


def _newest_first(**criteria) -> list[SharedCart]:
    return (
        current_domain.repository_for(SharedCart)
        ._dao.query.filter(**criteria)
        .order_by("-created_at")
        .limit(None)
        .all()
        .items
    )


def list_shared_carts(user: User) -> list[SharedCart]:
    return _newest_first(**shared_cart_scope(user))


def list_my_shared_carts(user_id) -> list[SharedCart]:
    return _newest_first(created_by_id=str(user_id))


def get_shared_cart_by_code(code, user: User) -> SharedCart:
    matches = current_domain.repository_for(SharedCart)._dao.query.filter(share_code=code).all().items
    if not matches:
        raise ObjectNotFoundError("Shared cart not found")

    cart = matches[0]
    cart.ensure_visible_to(user)
    return cart


def describe_shared_cart(cart_or_snapshot) -> dict:
    """Snapshot of a cart with each item's menu name and current price."""
    snapshot = cart_or_snapshot if isinstance(cart_or_snapshot, dict) else cart_or_snapshot.snapshot()
    repo = current_domain.repository_for(MenuItem)

    items = []
    for item in snapshot["items"]:
        try:
            menu_item = repo.get(item["menu_item_id"])
        except ObjectNotFoundError:
            menu_item = None
        items.append(
            {
                **item,
                "name": menu_item.name if menu_item else None,
                "price": menu_item.price if menu_item else None,
            }
        )
    return {**snapshot, "items": items}
