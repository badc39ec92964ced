"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance keeps its own state. Menu item ids come from the
restaurant the journey registers in ``on_start``.
"""

from dataclasses import dataclass, field


@dataclass
class Requester:
    """Identity headers for one simulated person."""

    user_id: str
    role: str
    country: str
    email: str | None = None

    def headers(self) -> dict:
        values = {"X-User-Id": self.user_id, "X-User-Role": self.role, "X-User-Country": self.country}
        if self.email:
            values["X-User-Email"] = self.email
        return values


@dataclass
class MenuState:
    restaurant_id: str | None = None
    menu_item_ids: list[str] = field(default_factory=list)


@dataclass
class OrderState:
    """Tracks state for a single order lifecycle."""

    order_id: str | None = None
    current_status: str = "PENDING"
    total: float = 0.0


@dataclass
class SharedCartState:
    shared_cart_id: str | None = None
    share_code: str | None = None
    contributions: int = 0
