"""Tenant scope: the country/ownership boundary of every read.

Orders, restaurants, shared carts and payment methods of all countries share
the same tables, so each query filters with the criteria computed here.
Nothing in this module touches storage.
"""

from enum import Enum

from dining.access.policy import Action, is_allowed
from dining.access.user import User


class Resource(Enum):
    ORDERS = "orders"
    RESTAURANTS = "restaurants"
    SHARED_CARTS = "shared_carts"
    PAYMENT_METHODS = "payment_methods"


def order_scope(user: User) -> dict:
    """Roles allowed to view every order of their country get the country;
    everyone else sees only their own orders.
    """
    if is_allowed(user.role, Action.VIEW_ALL_ORDERS_IN_COUNTRY):
        return {"owner_country": user.country.value}
    return {"owner_id": user.id}


def restaurant_scope(user: User) -> dict:
    return {"country": user.country.value}


def shared_cart_scope(user: User) -> dict:
    return {"country": user.country.value}


def payment_method_scope(user: User) -> dict:
    return {"country": user.country.value}


_RESOLVERS = {
    Resource.ORDERS: order_scope,
    Resource.RESTAURANTS: restaurant_scope,
    Resource.SHARED_CARTS: shared_cart_scope,
    Resource.PAYMENT_METHODS: payment_method_scope,
}


def scope_for(user: User, resource: Resource) -> dict:
    return _RESOLVERS[Resource(resource)](user)


def within_scope(record, criteria: dict) -> bool:
    """Check an already loaded record against scope criteria."""
    return all(str(getattr(record, field)) == str(value) for field, value in criteria.items())
