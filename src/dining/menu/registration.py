"""Restaurant registration: command and handler.

Seeds a restaurant together with its menu. Only admins and managers may
register restaurants.
"""

import json

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from dining.access.policy import Action, authorize
from dining.access.user import Country, Role, requester_of
from dining.domain import dining
from dining.menu.restaurant import MenuItem, Restaurant

logger = structlog.get_logger(__name__)


@dining.command(part_of="Restaurant")
class RegisterRestaurant:
    user_id = Identifier(required=True)
    user_role = String(required=True, choices=Role)
    user_country = String(required=True, choices=Country)
    name = String(required=True, max_length=255)
    country = String(required=True, choices=Country)
    menu_items = Text(required=True)  # JSON: list of {name, price, description}


@dining.command_handler(part_of=Restaurant)
class RegisterRestaurantHandler:
    @handle(RegisterRestaurant)
    def register_restaurant(self, command):
        user = requester_of(command)
        authorize(user, Action.CREATE_RESTAURANT)

        menu = json.loads(command.menu_items) if isinstance(command.menu_items, str) else command.menu_items
        if not isinstance(menu, list):
            raise ValidationError({"menu_items": ["Menu items must be a list"]})

        restaurant = Restaurant.register(name=command.name, country=command.country)
        menu_items = [
            MenuItem(
                restaurant_id=str(restaurant.id),
                name=entry.get("name"),
                description=entry.get("description"),
                price=entry.get("price"),
            )
            for entry in menu
        ]

        current_domain.repository_for(Restaurant).add(restaurant)
        item_repo = current_domain.repository_for(MenuItem)
        for item in menu_items:
            item_repo.add(item)

        logger.info(
            "Restaurant registered",
            restaurant_id=str(restaurant.id),
            country=restaurant.country,
            menu_size=len(menu_items),
            registered_by=user.id,
        )
        return str(restaurant.id)
