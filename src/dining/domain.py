"""Dining bounded context: country-partitioned orders and shared carts.

Handles order placement and settlement, shared carts that are visible to
everyone in a country, and the menu price lookups both of them rely on.
"""

from protean.domain import Domain

from dining.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

dining = Domain(name="dining")
