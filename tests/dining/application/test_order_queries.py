"""Order listing and lookup under tenant scope."""

import json

import pytest
from dining.order.placement import PlaceOrder
from dining.order.queries import get_order, list_orders
from protean import current_domain
from protean.exceptions import ObjectNotFoundError


@pytest.fixture()
def orders(menu, india_member, india_member_2, america_member, requester_fields):
    def _place(user, dish):
        command = PlaceOrder(
            **requester_fields(user),
            items=json.dumps([{"menu_item_id": menu[dish], "quantity": 1}]),
        )
        return current_domain.process(command, asynchronous=False)

    return {
        "asha": _place(india_member, "butter_chicken"),
        "ravi": _place(india_member_2, "paneer_tikka"),
        "travis": _place(america_member, "fries"),
    }


class TestListOrders:
    def test_member_sees_only_own_orders(self, orders, india_member):
        assert [str(o.id) for o in list_orders(india_member)] == [orders["asha"]]

    def test_manager_sees_every_order_in_country(self, orders, india_manager):
        assert {str(o.id) for o in list_orders(india_manager)} == {orders["asha"], orders["ravi"]}

    def test_admin_is_country_scoped_too(self, orders, india_admin):
        assert orders["travis"] not in {str(o.id) for o in list_orders(india_admin)}

    def test_newest_first(self, orders, india_manager):
        listed = list_orders(india_manager)
        assert listed[0].created_at >= listed[1].created_at

    def test_no_orders(self, menu, america_manager):
        assert list_orders(america_manager) == []


class TestGetOrder:
    def test_owner_reads_order(self, orders, india_member):
        assert str(get_order(orders["asha"], india_member).id) == orders["asha"]

    def test_member_cannot_read_someone_elses_order(self, orders, india_member):
        with pytest.raises(ObjectNotFoundError):
            get_order(orders["ravi"], india_member)

    def test_manager_reads_country_order(self, orders, india_manager):
        assert get_order(orders["ravi"], india_manager).owner_id == "user-in-member-2"

    def test_other_country_reads_as_missing(self, orders, america_manager):
        with pytest.raises(ObjectNotFoundError):
            get_order(orders["asha"], america_manager)


class TestLargeListings:
    @pytest.fixture()
    def many_orders(self, menu, india_member, requester_fields):
        line = json.dumps([{"menu_item_id": menu["paneer_tikka"], "quantity": 1}])
        return [
            current_domain.process(PlaceOrder(**requester_fields(india_member), items=line), asynchronous=False)
            for _ in range(105)
        ]

    def test_member_sees_every_own_order(self, many_orders, india_member):
        assert len(list_orders(india_member)) == 105

    def test_manager_sees_every_country_order(self, many_orders, india_manager):
        assert {str(o.id) for o in list_orders(india_manager)} == set(many_orders)
