"""Payment method registration: command and handler. Admins only."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from dining.access.policy import Action, authorize
from dining.access.user import Country, Role, requester_of
from dining.domain import dining
from dining.payment_method.payment_method import PaymentMethod

logger = structlog.get_logger(__name__)


@dining.command(part_of="PaymentMethod")
class AddPaymentMethod:
    user_id = Identifier(required=True)
    user_role = String(required=True, choices=Role)
    user_country = String(required=True, choices=Country)
    owner_id = Identifier(required=True)
    method_type = String(required=True, max_length=50)
    details = String(required=True, max_length=500)


@dining.command_handler(part_of=PaymentMethod)
class AddPaymentMethodHandler:
    @handle(AddPaymentMethod)
    def add_payment_method(self, command):
        admin = requester_of(command)
        authorize(admin, Action.CREATE_PAYMENT_METHOD)

        method = PaymentMethod.add(
            admin=admin,
            user_id=command.owner_id,
            method_type=command.method_type,
            details=command.details,
        )
        current_domain.repository_for(PaymentMethod).add(method)

        logger.info(
            "Payment method added",
            payment_method_id=str(method.id),
            user_id=str(command.owner_id),
            method_type=method.method_type,
            added_by=admin.id,
        )
        return str(method.id)
