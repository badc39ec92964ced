"""Restaurant seeding shared by the journeys."""

from loadtests.data_generators import requester, restaurant_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import MenuState


def seed_menu(client, country: str) -> MenuState | None:
    """Register a restaurant in ``country`` and read back its menu item ids.

    Returns None when either call fails; the failure is recorded on the
    Locust request.
    """
    manager = requester("MANAGER", country)
    with client.post(
        "/restaurants",
        json=restaurant_data(country),
        headers=manager.headers(),
        catch_response=True,
        name="POST /restaurants",
    ) as resp:
        if resp.status_code != 201:
            resp.failure(f"Register restaurant failed: {resp.status_code} | {extract_error_detail(resp)}")
            return None
        restaurant_id = resp.json()["restaurant_id"]

    with client.get("/restaurants", headers=manager.headers(), catch_response=True, name="GET /restaurants") as resp:
        if resp.status_code != 200:
            resp.failure(f"List restaurants failed: {resp.status_code} | {extract_error_detail(resp)}")
            return None
        restaurant = next((r for r in resp.json() if r["id"] == restaurant_id), None)
        if restaurant is None:
            resp.failure("Registered restaurant missing from country listing")
            return None

    return MenuState(
        restaurant_id=restaurant_id,
        menu_item_ids=[item["id"] for item in restaurant["menu_items"]],
    )
