"""Role-based permission table.

Every role check in the domain goes through ``is_allowed``; scope
differences between roles (which rows a role may see) live in
``dining.access.scope``.
"""

from enum import Enum

from dining.access.user import Role, User
from dining.exceptions import ForbiddenError


class Action(Enum):
    CREATE_ORDER = "create_order"
    VIEW_OWN_ORDERS = "view_own_orders"
    VIEW_ALL_ORDERS_IN_COUNTRY = "view_all_orders_in_country"
    CHECKOUT_ORDER = "checkout_order"
    CANCEL_ORDER = "cancel_order"
    CREATE_RESTAURANT = "create_restaurant"
    CREATE_PAYMENT_METHOD = "create_payment_method"
    VIEW_PAYMENT_METHODS = "view_payment_methods"


_EVERYONE = frozenset(Role)
_STAFF = frozenset({Role.ADMIN, Role.MANAGER})
_ADMIN_ONLY = frozenset({Role.ADMIN})

PERMISSIONS = {
    Action.CREATE_ORDER: _EVERYONE,
    Action.VIEW_OWN_ORDERS: _EVERYONE,
    Action.VIEW_ALL_ORDERS_IN_COUNTRY: _STAFF,
    Action.CHECKOUT_ORDER: _STAFF,
    Action.CANCEL_ORDER: _STAFF,
    Action.CREATE_RESTAURANT: _STAFF,
    Action.CREATE_PAYMENT_METHOD: _ADMIN_ONLY,
    Action.VIEW_PAYMENT_METHODS: _ADMIN_ONLY,
}


def is_allowed(role, action) -> bool:
    return Role(role) in PERMISSIONS[Action(action)]


def authorize(user: User, action: Action) -> None:
    """Raise ``ForbiddenError`` unless the user's role may perform ``action``."""
    if not is_allowed(user.role, action):
        raise ForbiddenError({"role": [f"{user.role.value} is not allowed to {action.value.replace('_', ' ')}"]})
