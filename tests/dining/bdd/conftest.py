"""Shared BDD fixtures and step definitions for the Dining domain."""

import json

import pytest
from dining.access.user import User
from dining.exceptions import ForbiddenError
from dining.order.order import Order
from dining.order.placement import PlaceOrder
from protean import current_domain
from pytest_bdd import given, parsers, then


@pytest.fixture()
def requester():
    def _requester(role, country):
        return User.of(id=f"user-{country.lower()}-{role.lower()}", role=role, country=country)

    return _requester


@pytest.fixture()
def outcome():
    """Container for the result or error of the last When step."""
    return {"result": None, "exc": None}


@pytest.fixture()
def attempt(outcome):
    """Run a step action, capturing a ForbiddenError instead of raising it."""

    def _attempt(fn, *args, **kwargs):
        try:
            outcome["result"] = fn(*args, **kwargs)
        except ForbiddenError as exc:
            outcome["exc"] = exc
        return outcome["result"]

    return _attempt


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a member in "{country}"'), target_fixture="member")
def _(menu, country):
    return User.of(id="bdd-member", role="MEMBER", country=country, email="member@example.com")


@given("they have placed an order", target_fixture="order_id")
def _(menu, member, requester_fields):
    command = PlaceOrder(
        **requester_fields(member),
        items=json.dumps([{"menu_item_id": menu["butter_chicken"], "quantity": 1}]),
    )
    return current_domain.process(command, asynchronous=False)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the request is forbidden")
def _(outcome):
    assert isinstance(outcome["exc"], ForbiddenError)


@then(parsers.cfparse('the order is "{status}"'))
def _(order_id, status):
    assert current_domain.repository_for(Order).get(order_id).status == status
