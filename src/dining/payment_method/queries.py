"""Payment method listing for admins, limited to their country."""

from protean.utils.globals import current_domain

from dining.access.policy import Action, authorize
from dining.access.scope import payment_method_scope
from dining.access.user import User
from dining.payment_method.payment_method import PaymentMethod


def list_payment_methods(user: User) -> list[PaymentMethod]:
    authorize(user, Action.VIEW_PAYMENT_METHODS)
    return (
        current_domain.repository_for(PaymentMethod)
        ._dao.query.filter(**payment_method_scope(user))
        .order_by("-created_at")
        .limit(None)
        .all()
        .items
    )
