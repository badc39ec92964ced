"""Restaurant and MenuItem aggregates: the authoritative source of prices.

Orders and shared carts only reference menu items by id; the price and the
owning restaurant's country are always re-read from here.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, Identifier, String, Text

from dining.access.user import Country
from dining.domain import dining


@dining.aggregate
class Restaurant:
    name = String(required=True, max_length=255)
    country = String(required=True, choices=Country)
    created_at = DateTime()

    @classmethod
    def register(cls, name, country):
        return cls(name=name, country=Country(country).value, created_at=datetime.now(UTC))


@dining.aggregate
class MenuItem:
    restaurant_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
