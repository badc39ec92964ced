"""Order aggregate: a member's order, priced from the menu at placement time.

State Machine:
    PENDING → PAID
    PENDING → CANCELLED

Paying or cancelling overwrites the status whatever it was, so a
CANCELLED order can still be marked PAID.
Only admins and managers of the owner's country settle orders.
"""

import json
from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from dining.access.user import Country, User
from dining.domain import dining
from dining.exceptions import ForbiddenError
from dining.order.events import OrderCancelled, OrderPaid, OrderPlaced


class OrderStatus(Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    CANCELLED = "CANCELLED"


TERMINAL_STATES = {OrderStatus.PAID, OrderStatus.CANCELLED}

_CENT = Decimal("0.01")


def order_total(lines) -> float:
    """Sum of unit_price × quantity, computed in decimal and rounded to cents."""
    total = sum(
        (Decimal(str(line["unit_price"])) * line["quantity"] for line in lines),
        Decimal("0"),
    )
    return float(total.quantize(_CENT, rounding=ROUND_HALF_UP))


@dining.entity(part_of="Order")
class OrderItem:
    """A menu item line, with the name and price captured when the order was placed."""

    menu_item_id = Identifier(required=True)
    name = String(max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)


@dining.aggregate
class Order:
    owner_id = Identifier(required=True)
    owner_country = String(required=True, choices=Country)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    items = HasMany(OrderItem)
    total = Float(required=True, min_value=0.0)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, owner: User, lines, quotes):
        """Price ``lines`` with ``quotes`` and open a PENDING order.

        Args:
            owner: The requester placing the order.
            lines: Validated ``{menu_item_id, quantity}`` dicts, in order.
            quotes: ``PriceQuote`` objects keyed by menu item id.

        Raises ``ForbiddenError`` on the first item served by a restaurant
        outside the owner's country; no order is built in that case.
        """
        priced = []
        for line in lines:
            quote = quotes[line["menu_item_id"]]
            if quote.country != owner.country.value:
                raise ForbiddenError(
                    {"items": [f"Cannot order {quote.name} from a restaurant in {quote.country}"]}
                )
            priced.append(
                {
                    "menu_item_id": quote.menu_item_id,
                    "name": quote.name,
                    "unit_price": quote.price,
                    "quantity": line["quantity"],
                }
            )

        now = datetime.now(UTC)
        order = cls(
            owner_id=owner.id,
            owner_country=owner.country.value,
            status=OrderStatus.PENDING.value,
            total=order_total(priced),
            created_at=now,
            updated_at=now,
        )
        for line in priced:
            order.add_items(OrderItem(**line))

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                owner_id=owner.id,
                owner_country=owner.country.value,
                items=json.dumps(priced),
                total=order.total,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Settlement
    # -------------------------------------------------------------------
    def _ensure_settled_in_own_country(self, actor: User):
        if actor.country.value != self.owner_country:
            raise ForbiddenError({"order": ["Cannot manage an order from another country"]})

    def mark_paid(self, actor: User):
        """Record payment. The previous status is not checked."""
        self._ensure_settled_in_own_country(actor)

        previous = self.status
        now = datetime.now(UTC)
        self.status = OrderStatus.PAID.value
        self.updated_at = now

        self.raise_(
            OrderPaid(
                order_id=str(self.id),
                previous_status=previous,
                paid_by=actor.id,
                paid_at=now,
            )
        )

    def cancel(self, actor: User):
        """Cancel the order. The previous status is not checked."""
        self._ensure_settled_in_own_country(actor)

        previous = self.status
        now = datetime.now(UTC)
        self.status = OrderStatus.CANCELLED.value
        self.updated_at = now

        self.raise_(
            OrderCancelled(
                order_id=str(self.id),
                previous_status=previous,
                cancelled_by=actor.id,
                cancelled_at=now,
            )
        )

    @property
    def is_settled(self) -> bool:
        return OrderStatus(self.status) in TERMINAL_STATES

    def snapshot(self) -> dict:
        return {
            "id": str(self.id),
            "owner_id": str(self.owner_id),
            "owner_country": self.owner_country,
            "status": self.status,
            "total": self.total,
            "items": [
                {
                    "menu_item_id": str(i.menu_item_id),
                    "name": i.name,
                    "unit_price": i.unit_price,
                    "quantity": i.quantity,
                }
                for i in self.items
            ],
            "created_at": self.created_at,
        }
