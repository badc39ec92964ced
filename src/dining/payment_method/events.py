"""Domain events for the PaymentMethod aggregate."""

from protean.fields import DateTime, Identifier, String

from dining.domain import dining


@dining.event(part_of="PaymentMethod")
class PaymentMethodAdded:
    __version__ = 1

    payment_method_id = Identifier(required=True)
    user_id = Identifier(required=True)
    method_type = String(required=True)
    country = String(required=True)
    added_by = Identifier(required=True)
    added_at = DateTime(required=True)
