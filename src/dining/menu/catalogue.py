"""Menu price lookups and the country-scoped restaurant listing."""

from dataclasses import dataclass

from protean.utils.globals import current_domain

from dining.access.scope import restaurant_scope
from dining.access.user import User
from dining.menu.restaurant import MenuItem, Restaurant


@dataclass(frozen=True)
class PriceQuote:
    """A menu item's price and country as observed right now."""

    menu_item_id: str
    name: str
    price: float
    restaurant_id: str
    country: str


def quote_menu_items(menu_item_ids) -> dict[str, PriceQuote]:
    """Quote every distinct menu item id.

    Raises ``ObjectNotFoundError`` for the first id that does not exist.
    """
    item_repo = current_domain.repository_for(MenuItem)
    restaurant_repo = current_domain.repository_for(Restaurant)

    restaurants = {}
    quotes = {}
    for menu_item_id in dict.fromkeys(str(i) for i in menu_item_ids):
        item = item_repo.get(menu_item_id)
        restaurant_id = str(item.restaurant_id)
        if restaurant_id not in restaurants:
            restaurants[restaurant_id] = restaurant_repo.get(restaurant_id)

        quotes[menu_item_id] = PriceQuote(
            menu_item_id=menu_item_id,
            name=item.name,
            price=item.price,
            restaurant_id=restaurant_id,
            country=restaurants[restaurant_id].country,
        )
    return quotes


def ensure_menu_items_exist(menu_item_ids) -> None:
    repo = current_domain.repository_for(MenuItem)
    for menu_item_id in dict.fromkeys(str(i) for i in menu_item_ids):
        repo.get(menu_item_id)


def list_restaurants(user: User) -> list[Restaurant]:
    """Restaurants of the user's country, alphabetically."""
    return (
        current_domain.repository_for(Restaurant)
        ._dao.query.filter(**restaurant_scope(user))
        .order_by("name")
        .limit(None)
        .all()
        .items
    )


def menu_of(restaurant_id) -> list[MenuItem]:
    return (
        current_domain.repository_for(MenuItem)
        ._dao.query.filter(restaurant_id=str(restaurant_id))
        .order_by("name")
        .limit(None)
        .all()
        .items
    )
