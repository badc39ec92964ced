"""Integration tests for the order endpoints."""


def _place(client, headers, user, items):
    return client.post("/orders", json={"items": items}, headers=headers(user))


class TestPlaceOrderEndpoint:
    def test_place_order(self, client, headers, menu, india_member):
        response = _place(
            client,
            headers,
            india_member,
            [{"menu_item_id": menu["butter_chicken"], "quantity": 2}],
        )
        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "PENDING"
        assert data["total"] == 29.0
        assert data["owner_id"] == india_member.id
        assert data["items"][0]["name"] == "Butter Chicken"

    def test_missing_identity_is_unauthorized(self, client, menu):
        response = client.post("/orders", json={"items": [{"menu_item_id": menu["fries"], "quantity": 1}]})
        assert response.status_code == 401

    def test_unknown_role_is_unauthorized(self, client, menu):
        response = client.post(
            "/orders",
            json={"items": [{"menu_item_id": menu["fries"], "quantity": 1}]},
            headers={"X-User-Id": "u", "X-User-Role": "CHEF", "X-User-Country": "INDIA"},
        )
        assert response.status_code == 401

    def test_cross_country_item_is_forbidden(self, client, headers, menu, india_member):
        response = _place(client, headers, india_member, [{"menu_item_id": menu["fries"], "quantity": 1}])
        assert response.status_code == 403
        assert "error" in response.json()

    def test_unknown_item_is_not_found(self, client, headers, menu, india_member):
        response = _place(client, headers, india_member, [{"menu_item_id": "no-such-dish", "quantity": 1}])
        assert response.status_code == 404

    def test_zero_quantity_is_rejected(self, client, headers, menu, india_member):
        response = _place(client, headers, india_member, [{"menu_item_id": menu["fries"], "quantity": 0}])
        assert response.status_code in (400, 422)


class TestOrderReads:
    def test_member_lists_own_orders(self, client, headers, menu, india_member, india_member_2):
        _place(client, headers, india_member, [{"menu_item_id": menu["paneer_tikka"], "quantity": 1}])
        _place(client, headers, india_member_2, [{"menu_item_id": menu["paneer_tikka"], "quantity": 1}])

        response = client.get("/orders", headers=headers(india_member))
        assert response.status_code == 200
        assert [o["owner_id"] for o in response.json()] == [india_member.id]

    def test_manager_lists_country_orders(self, client, headers, menu, india_member, india_member_2, india_manager):
        _place(client, headers, india_member, [{"menu_item_id": menu["paneer_tikka"], "quantity": 1}])
        _place(client, headers, india_member_2, [{"menu_item_id": menu["paneer_tikka"], "quantity": 1}])

        response = client.get("/orders", headers=headers(india_manager))
        assert len(response.json()) == 2

    def test_other_country_order_is_not_found(self, client, headers, menu, india_member, america_manager):
        order_id = _place(client, headers, india_member, [{"menu_item_id": menu["paneer_tikka"], "quantity": 1}]).json()[
            "id"
        ]
        response = client.get(f"/orders/{order_id}", headers=headers(america_manager))
        assert response.status_code == 404


class TestSettlementEndpoints:
    def _order_id(self, client, headers, menu, user):
        return _place(client, headers, user, [{"menu_item_id": menu["butter_chicken"], "quantity": 1}]).json()["id"]

    def test_manager_checkout(self, client, headers, menu, india_member, india_manager):
        order_id = self._order_id(client, headers, menu, india_member)
        response = client.put(f"/orders/{order_id}/checkout", headers=headers(india_manager))
        assert response.status_code == 200
        assert response.json()["status"] == "PAID"

    def test_member_checkout_is_forbidden(self, client, headers, menu, india_member):
        order_id = self._order_id(client, headers, menu, india_member)
        response = client.put(f"/orders/{order_id}/checkout", headers=headers(india_member))
        assert response.status_code == 403

    def test_cross_country_cancel_is_forbidden(self, client, headers, menu, india_member, america_manager):
        order_id = self._order_id(client, headers, menu, india_member)
        response = client.put(f"/orders/{order_id}/cancel", headers=headers(america_manager))
        assert response.status_code == 403

    def test_cancel(self, client, headers, menu, india_member, india_admin):
        order_id = self._order_id(client, headers, menu, india_member)
        response = client.put(f"/orders/{order_id}/cancel", headers=headers(india_admin))
        assert response.json()["status"] == "CANCELLED"

    def test_checkout_unknown_order(self, client, headers, menu, india_manager):
        response = client.put("/orders/missing-order/checkout", headers=headers(india_manager))
        assert response.status_code == 404
