"""Shared cart lookups."""

import json

import pytest
from dining.exceptions import ForbiddenError
from dining.shared_cart.management import CreateSharedCart
from dining.shared_cart.queries import (
    describe_shared_cart,
    get_shared_cart_by_code,
    list_my_shared_carts,
    list_shared_carts,
)
from dining.shared_cart.shared_cart import SharedCart
from protean import current_domain
from protean.exceptions import ObjectNotFoundError


@pytest.fixture()
def carts(menu, india_member, india_member_2, america_member, requester_fields):
    def _create(user, dish):
        command = CreateSharedCart(
            **requester_fields(user),
            user_email=user.email,
            country=user.country.value,
            items=json.dumps([{"menu_item_id": menu[dish], "quantity": 1}]),
        )
        return current_domain.process(command, asynchronous=False)

    return {
        "asha": _create(india_member, "butter_chicken"),
        "ravi": _create(india_member_2, "paneer_tikka"),
        "travis": _create(america_member, "cheeseburger"),
    }


def _code(cart_id):
    return current_domain.repository_for(SharedCart).get(cart_id).share_code


class TestFindByCode:
    def test_same_country_finds_cart(self, carts, india_member_2):
        cart = get_shared_cart_by_code(_code(carts["asha"]), india_member_2)
        assert str(cart.id) == carts["asha"]

    def test_other_country_is_forbidden(self, carts, america_manager):
        with pytest.raises(ForbiddenError):
            get_shared_cart_by_code(_code(carts["asha"]), america_manager)

    def test_unknown_code_is_not_found(self, carts, india_member):
        with pytest.raises(ObjectNotFoundError):
            get_shared_cart_by_code("000000000000", india_member)


class TestListings:
    def test_country_listing(self, carts, india_manager):
        assert {str(c.id) for c in list_shared_carts(india_manager)} == {carts["asha"], carts["ravi"]}

    def test_country_listing_for_america(self, carts, america_member):
        assert [str(c.id) for c in list_shared_carts(america_member)] == [carts["travis"]]

    def test_my_carts(self, carts, india_member):
        assert [str(c.id) for c in list_my_shared_carts(india_member.id)] == [carts["asha"]]

    def test_my_carts_empty(self, carts, india_admin):
        assert list_my_shared_carts(india_admin.id) == []


class TestDescribe:
    def test_items_carry_menu_name_and_price(self, carts, menu):
        cart = current_domain.repository_for(SharedCart).get(carts["asha"])
        described = describe_shared_cart(cart)
        assert described["items"] == [
            {"menu_item_id": menu["butter_chicken"], "quantity": 1, "name": "Butter Chicken", "price": 14.50}
        ]
        assert described["created_by"]["email"] == "asha@example.in"

    def test_missing_menu_item_is_described_without_details(self, carts):
        snapshot = {"id": "x", "items": [{"menu_item_id": "gone", "quantity": 2}]}
        assert describe_shared_cart(snapshot)["items"][0]["name"] is None


class TestLargeListings:
    @pytest.fixture()
    def many_carts(self, carts, menu, india_member, requester_fields):
        line = json.dumps([{"menu_item_id": menu["butter_chicken"], "quantity": 1}])
        created = [
            current_domain.process(
                CreateSharedCart(
                    **requester_fields(india_member),
                    user_email=india_member.email,
                    country="INDIA",
                    items=line,
                ),
                asynchronous=False,
            )
            for _ in range(105)
        ]
        return [carts["asha"], *created]

    def test_country_listing_is_not_truncated(self, many_carts, india_member_2):
        assert len(list_shared_carts(india_member_2)) == 107

    def test_my_carts_are_not_truncated(self, many_carts, india_member):
        assert {str(c.id) for c in list_my_shared_carts(india_member.id)} == set(many_carts)
