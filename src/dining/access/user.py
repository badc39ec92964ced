"""The requester an operation runs on behalf of.

Identity is resolved upstream (token verification, session lookup); the
domain trusts the supplied role and country for the duration of one call.
"""

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    MEMBER = "MEMBER"


class Country(Enum):
    INDIA = "INDIA"
    AMERICA = "AMERICA"


@dataclass(frozen=True)
class User:
    id: str
    role: Role
    country: Country
    email: str | None = None

    @classmethod
    def of(cls, id, role, country, email=None):
        """Build a requester from raw values, coercing the enum fields."""
        return cls(id=str(id), role=Role(role), country=Country(country), email=email)

    @property
    def is_member(self) -> bool:
        return self.role == Role.MEMBER


def requester_of(command) -> User:
    """Rebuild the requester carried on a command's ``user_*`` fields."""
    return User.of(
        id=command.user_id,
        role=command.user_role,
        country=command.user_country,
        email=getattr(command, "user_email", None),
    )
