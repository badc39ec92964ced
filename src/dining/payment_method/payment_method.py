"""PaymentMethod aggregate: a stored way for a user to pay.

Only the method's type and an opaque details string are kept; charging
and settlement happen outside this system.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, String

from dining.access.user import Country, User
from dining.domain import dining
from dining.payment_method.events import PaymentMethodAdded


@dining.aggregate
class PaymentMethod:
    user_id = Identifier(required=True)
    method_type = String(required=True, max_length=50)  # credit_card, upi, bank_transfer
    details = String(required=True, max_length=500)
    country = String(required=True, choices=Country)
    added_by = Identifier(required=True)
    created_at = DateTime()

    @classmethod
    def add(cls, admin: User, user_id, method_type, details):
        """Record a method for ``user_id``, filed under the admin's country."""
        now = datetime.now(UTC)
        method = cls(
            user_id=str(user_id),
            method_type=method_type,
            details=details,
            country=admin.country.value,
            added_by=admin.id,
            created_at=now,
        )
        method.raise_(
            PaymentMethodAdded(
                payment_method_id=str(method.id),
                user_id=str(user_id),
                method_type=method_type,
                country=method.country,
                added_by=admin.id,
                added_at=now,
            )
        )
        return method

    def snapshot(self) -> dict:
        return {
            "id": str(self.id),
            "user_id": str(self.user_id),
            "method_type": self.method_type,
            "details": self.details,
            "country": self.country,
            "created_at": self.created_at,
        }
