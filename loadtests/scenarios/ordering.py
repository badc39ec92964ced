"""Order load test scenarios.

Stateful SequentialTaskSet journeys: a member places an order that a
manager of the same country checks out, an order cancelled by an admin,
and a probe that a manager abroad cannot settle it.
"""

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import order_data, other_country, requester
from loadtests.helpers.menu import seed_menu
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import OrderState


class _OrderJourney(SequentialTaskSet):
    def on_start(self):
        self.member = requester("MEMBER")
        self.menu = seed_menu(self.client, self.member.country)
        if self.menu is None:
            self.interrupt()
        self.state = OrderState()

    def place_order(self):
        with self.client.post(
            "/orders",
            json=order_data(self.menu.menu_item_ids),
            headers=self.member.headers(),
            catch_response=True,
            name="POST /orders",
        ) as resp:
            if resp.status_code == 201:
                data = resp.json()
                self.state.order_id = data["id"]
                self.state.total = data["total"]
            else:
                resp.failure(f"Place order failed: {resp.status_code} | {extract_error_detail(resp)}")
                self.interrupt()

    def list_own_orders(self):
        with self.client.get(
            "/orders",
            headers=self.member.headers(),
            catch_response=True,
            name="GET /orders",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"List orders failed: {extract_error_detail(resp)}")
            elif any(o["owner_id"] != self.member.user_id for o in resp.json()):
                resp.failure("Member listing leaked another member's order")

    def settle(self, action: str, role: str):
        staff = requester(role, self.member.country)
        with self.client.put(
            f"/orders/{self.state.order_id}/{action}",
            headers=staff.headers(),
            catch_response=True,
            name=f"PUT /orders/{{id}}/{action}",
        ) as resp:
            if resp.status_code == 200:
                self.state.current_status = resp.json()["status"]
            else:
                resp.failure(f"{action.capitalize()} failed: {resp.status_code} | {extract_error_detail(resp)}")


class OrderCheckoutJourney(_OrderJourney):
    """Place Order -> List Own Orders -> Manager Checkout."""

    @task
    def place(self):
        self.place_order()

    @task
    def list_orders(self):
        self.list_own_orders()

    @task
    def checkout(self):
        self.settle("checkout", "MANAGER")

    @task
    def done(self):
        self.interrupt()


class OrderCancellationJourney(_OrderJourney):
    """Place Order -> Foreign Manager Refused -> Admin Cancel."""

    @task
    def place(self):
        self.place_order()

    @task
    def foreign_manager_is_refused(self):
        outsider = requester("MANAGER", other_country(self.member.country))
        with self.client.put(
            f"/orders/{self.state.order_id}/cancel",
            headers=outsider.headers(),
            catch_response=True,
            name="PUT /orders/{id}/cancel [cross-country]",
        ) as resp:
            if resp.status_code == 403:
                resp.success()
            else:
                resp.failure(f"Expected 403 across countries, got {resp.status_code}")

    @task
    def cancel(self):
        self.settle("cancel", "ADMIN")

    @task
    def done(self):
        self.interrupt()


class OrderingUser(HttpUser):
    """Locust user simulating order placement and settlement.

    Weighted distribution:
    - 70% Place and check out
    - 30% Place and cancel
    """

    wait_time = between(0.5, 2.0)
    tasks = {
        OrderCheckoutJourney: 7,
        OrderCancellationJourney: 3,
    }
