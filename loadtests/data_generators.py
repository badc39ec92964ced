"""Faker-based data generators for Locust load test scenarios.

Payloads match the field names of the API's Pydantic request schemas.
"""

import random
import uuid

from faker import Faker

from loadtests.helpers.state import Requester

fake = Faker()

COUNTRIES = ("INDIA", "AMERICA")

_DISHES = {
    "INDIA": ["Butter Chicken", "Paneer Tikka", "Masala Dosa", "Chole Bhature", "Biryani", "Samosa"],
    "AMERICA": ["Cheeseburger", "Fries", "Buffalo Wings", "Mac and Cheese", "Clam Chowder", "Apple Pie"],
}


def requester(role: str = "MEMBER", country: str | None = None) -> Requester:
    """A fresh simulated person; ids are unique per call."""
    return Requester(
        user_id=f"lt-{role.lower()}-{uuid.uuid4().hex[:8]}",
        role=role,
        country=country or random.choice(COUNTRIES),
        email=f"{fake.user_name()[:20]}.{uuid.uuid4().hex[:4]}@{fake.free_email_domain()}",
    )


def other_country(country: str) -> str:
    return next(c for c in COUNTRIES if c != country)


def restaurant_data(country: str) -> dict:
    """Generate RegisterRestaurantRequest payload with a small menu."""
    dishes = random.sample(_DISHES[country], k=4)
    return {
        "name": f"{fake.last_name()}'s {fake.word().capitalize()} Kitchen"[:255],
        "country": country,
        "menu_items": [
            {
                "name": dish,
                "price": round(random.uniform(2.0, 25.0), 2),
                "description": fake.sentence(nb_words=8),
            }
            for dish in dishes
        ],
    }


def line_items(menu_item_ids: list[str], max_lines: int = 3) -> list[dict]:
    """Pick 1..max_lines menu items with small quantities."""
    picked = random.sample(menu_item_ids, k=random.randint(1, min(max_lines, len(menu_item_ids))))
    return [{"menu_item_id": menu_item_id, "quantity": random.randint(1, 4)} for menu_item_id in picked]


def order_data(menu_item_ids: list[str]) -> dict:
    """Generate PlaceOrderRequest payload."""
    return {"items": line_items(menu_item_ids)}


def shared_cart_data(country: str, menu_item_ids: list[str]) -> dict:
    """Generate CreateSharedCartRequest payload."""
    return {"country": country, "items": line_items(menu_item_ids, max_lines=2)}
