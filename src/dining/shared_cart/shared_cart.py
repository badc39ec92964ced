"""SharedCart aggregate: a cart anyone in one country can look up and add to.

The cart is found by its share code, but the code never bypasses the
country partition: only people in the cart's country can read it or add
items. Only the creator can delete it.
"""

import json
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String

from dining.access.user import Country, User
from dining.domain import dining
from dining.exceptions import ForbiddenError
from dining.line_items import merge_line_items
from dining.shared_cart.events import SharedCartCreated, SharedCartItemsAdded


@dining.entity(part_of="SharedCart")
class SharedCartItem:
    menu_item_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()


@dining.aggregate
class SharedCart:
    share_code = String(required=True, max_length=32, unique=True)
    country = String(required=True, choices=Country)
    created_by_id = Identifier(required=True)
    created_by_email = String(max_length=254)
    items = HasMany(SharedCartItem)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_row_per_menu_item(self):
        menu_item_ids = [str(item.menu_item_id) for item in self.items]
        if len(menu_item_ids) != len(set(menu_item_ids)):
            raise ValidationError({"items": ["Each menu item may appear only once in a shared cart"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def share(cls, creator: User, country, share_code, lines):
        """Open a cart for ``country``, merging repeated menu items in ``lines``."""
        now = datetime.now(UTC)
        merged = merge_line_items(lines)

        cart = cls(
            share_code=share_code,
            country=Country(country).value,
            created_by_id=creator.id,
            created_by_email=creator.email,
            created_at=now,
            updated_at=now,
        )
        for line in merged:
            cart.add_items(
                SharedCartItem(
                    menu_item_id=line["menu_item_id"],
                    quantity=line["quantity"],
                    added_at=now,
                )
            )

        cart.raise_(
            SharedCartCreated(
                shared_cart_id=str(cart.id),
                share_code=share_code,
                country=cart.country,
                created_by_id=creator.id,
                items=json.dumps(merged),
                created_at=now,
            )
        )
        return cart

    # -------------------------------------------------------------------
    # Access rules
    # -------------------------------------------------------------------
    def ensure_visible_to(self, user: User):
        if self.country != user.country.value:
            raise ForbiddenError({"shared_cart": ["This shared cart is not available in your country"]})

    def ensure_deletable_by(self, user_id):
        if str(self.created_by_id) != str(user_id):
            raise ForbiddenError({"shared_cart": ["You can only delete your own shared carts"]})

    # -------------------------------------------------------------------
    # Collaboration
    # -------------------------------------------------------------------
    def merge_items(self, lines, contributor: User):
        """Add quantities to existing rows, or append rows for new menu items.

        Anyone in the cart's country may contribute, not just the creator.
        """
        if self.country != contributor.country.value:
            raise ForbiddenError({"shared_cart": ["You can only add items to shared carts in your country"]})

        now = datetime.now(UTC)
        merged = merge_line_items(lines)
        for line in merged:
            existing = next(
                (i for i in self.items if str(i.menu_item_id) == line["menu_item_id"]),
                None,
            )
            if existing:
                existing.quantity += line["quantity"]
            else:
                self.add_items(
                    SharedCartItem(
                        menu_item_id=line["menu_item_id"],
                        quantity=line["quantity"],
                        added_at=now,
                    )
                )

        self.updated_at = now

        self.raise_(
            SharedCartItemsAdded(
                shared_cart_id=str(self.id),
                added_by=contributor.id,
                items=json.dumps(merged),
                added_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Read model
    # -------------------------------------------------------------------
    def quantity_of(self, menu_item_id) -> int:
        return sum(i.quantity for i in self.items if str(i.menu_item_id) == str(menu_item_id))

    def snapshot(self) -> dict:
        return {
            "id": str(self.id),
            "share_code": self.share_code,
            "country": self.country,
            "created_by": {"id": str(self.created_by_id), "email": self.created_by_email},
            "items": [{"menu_item_id": str(i.menu_item_id), "quantity": i.quantity} for i in self.items],
            "created_at": self.created_at,
        }
