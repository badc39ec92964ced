"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, String, Text

from dining.domain import dining


@dining.event(part_of="Order")
class OrderPlaced:
    """A member placed an order priced from the current menu."""

    __version__ = 1

    order_id = Identifier(required=True)
    owner_id = Identifier(required=True)
    owner_country = String(required=True)
    items = Text(required=True)  # JSON: list of {menu_item_id, name, unit_price, quantity}
    total = Float(required=True)
    placed_at = DateTime(required=True)


@dining.event(part_of="Order")
class OrderPaid:
    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    paid_by = Identifier(required=True)
    paid_at = DateTime(required=True)


@dining.event(part_of="Order")
class OrderCancelled:
    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    cancelled_by = Identifier(required=True)
    cancelled_at = DateTime(required=True)
