"""Domain events for the SharedCart aggregate."""

from protean.fields import DateTime, Identifier, String, Text

from dining.domain import dining


@dining.event(part_of="SharedCart")
class SharedCartCreated:
    """A cart was opened for everyone in ``country`` to see and add to."""

    __version__ = 1

    shared_cart_id = Identifier(required=True)
    share_code = String(required=True)
    country = String(required=True)
    created_by_id = Identifier(required=True)
    items = Text(required=True)  # JSON: list of {menu_item_id, quantity}
    created_at = DateTime(required=True)


@dining.event(part_of="SharedCart")
class SharedCartItemsAdded:
    """Items were merged into a shared cart by someone in its country."""

    __version__ = 1

    shared_cart_id = Identifier(required=True)
    added_by = Identifier(required=True)
    items = Text(required=True)  # JSON: list of {menu_item_id, quantity}
    added_at = DateTime(required=True)
