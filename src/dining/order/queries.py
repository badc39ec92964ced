"""Order reads, filtered by the requester's tenant scope."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from dining.access.policy import Action, authorize
from dining.access.scope import order_scope, within_scope
from dining.access.user import User
from dining.order.order import Order


def list_orders(user: User) -> list[Order]:
    """Orders visible to ``user``, most recent first."""
    authorize(user, Action.VIEW_OWN_ORDERS)

    # limit(None) goes last: a cloned queryset falls back to the default page size
    return (
        current_domain.repository_for(Order)
        ._dao.query.filter(**order_scope(user))
        .order_by("-created_at")
        .limit(None)
        .all()
        .items
    )


def get_order(order_id, user: User) -> Order:
    """Load one order; orders outside the requester's scope read as missing."""
    authorize(user, Action.VIEW_OWN_ORDERS)
    order = current_domain.repository_for(Order).get(order_id)
    if not within_scope(order, order_scope(user)):
        raise ObjectNotFoundError(f"Order {order_id} not found")
    return order
