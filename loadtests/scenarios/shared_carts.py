"""Shared cart load test scenarios.

One person shares a cart, colleagues in the same country find it by its
share code and add items, and the creator finally deletes it. Concurrent
contributions exercise the quantity merge.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import line_items, other_country, requester, shared_cart_data
from loadtests.helpers.menu import seed_menu
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import SharedCartState


class SharedCartJourney(SequentialTaskSet):
    """Share Cart -> Lookup by Code -> Contribute (x2) -> Foreign Lookup -> Delete."""

    def on_start(self):
        self.creator = requester(random.choice(["MEMBER", "MANAGER", "ADMIN"]))
        self.menu = seed_menu(self.client, self.creator.country)
        if self.menu is None:
            self.interrupt()
        self.state = SharedCartState()

    @task
    def share_cart(self):
        with self.client.post(
            "/shared-carts",
            json=shared_cart_data(self.creator.country, self.menu.menu_item_ids),
            headers=self.creator.headers(),
            catch_response=True,
            name="POST /shared-carts",
        ) as resp:
            if resp.status_code == 201:
                data = resp.json()
                self.state.shared_cart_id = data["id"]
                self.state.share_code = data["share_code"]
            else:
                resp.failure(f"Share cart failed: {resp.status_code} | {extract_error_detail(resp)}")
                self.interrupt()

    def _contribute(self):
        colleague = requester("MEMBER", self.creator.country)
        with self.client.get(
            f"/shared-carts/code/{self.state.share_code}",
            headers=colleague.headers(),
            catch_response=True,
            name="GET /shared-carts/code/{code}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Lookup by code failed: {resp.status_code} | {extract_error_detail(resp)}")
                return

        with self.client.post(
            f"/shared-carts/{self.state.shared_cart_id}/items",
            json={"items": line_items(self.menu.menu_item_ids)},
            headers=colleague.headers(),
            catch_response=True,
            name="POST /shared-carts/{id}/items",
        ) as resp:
            if resp.status_code == 200:
                self.state.contributions += 1
            else:
                resp.failure(f"Add items failed: {resp.status_code} | {extract_error_detail(resp)}")

    @task
    def first_contribution(self):
        self._contribute()

    @task
    def second_contribution(self):
        self._contribute()

    @task
    def foreign_lookup_is_refused(self):
        outsider = requester("ADMIN", other_country(self.creator.country))
        with self.client.get(
            f"/shared-carts/code/{self.state.share_code}",
            headers=outsider.headers(),
            catch_response=True,
            name="GET /shared-carts/code/{code} [cross-country]",
        ) as resp:
            if resp.status_code == 403:
                resp.success()
            else:
                resp.failure(f"Expected 403 across countries, got {resp.status_code}")

    @task
    def list_mine(self):
        with self.client.get(
            "/shared-carts/mine",
            headers=self.creator.headers(),
            catch_response=True,
            name="GET /shared-carts/mine",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"List my carts failed: {extract_error_detail(resp)}")

    @task
    def delete_cart(self):
        with self.client.delete(
            f"/shared-carts/{self.state.shared_cart_id}",
            headers=self.creator.headers(),
            catch_response=True,
            name="DELETE /shared-carts/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Delete cart failed: {resp.status_code} | {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class SharedCartUser(HttpUser):
    wait_time = between(0.5, 2.0)
    tasks = [SharedCartJourney]
