"""Requester resolution for HTTP calls.

Token verification happens at the gateway, which forwards the verified
identity in ``X-User-*`` headers. Routes receive the requester as an
explicit ``User`` argument.
"""

from fastapi import Header, HTTPException

from dining.access.user import User
from dining.utils.logging import bind_requester


def current_user(
    x_user_id: str | None = Header(default=None),
    x_user_role: str | None = Header(default=None),
    x_user_country: str | None = Header(default=None),
    x_user_email: str | None = Header(default=None),
) -> User:
    if not (x_user_id and x_user_role and x_user_country):
        raise HTTPException(status_code=401, detail="Missing requester identity")

    try:
        user = User.of(id=x_user_id, role=x_user_role.upper(), country=x_user_country.upper(), email=x_user_email)
    except ValueError as exc:
        raise HTTPException(status_code=401, detail="Unrecognised requester role or country") from exc

    bind_requester(user_id=user.id, role=user.role.value, country=user.country.value)
    return user
