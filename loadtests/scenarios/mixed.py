"""Mixed workload scenario.

Combines the order and shared cart journeys with weights that model a
lunchtime rush: mostly orders, with a steady stream of team carts.
"""

from locust import HttpUser, between

from loadtests.scenarios.ordering import OrderCancellationJourney, OrderCheckoutJourney
from loadtests.scenarios.shared_carts import SharedCartJourney


class MixedWorkloadUser(HttpUser):
    """Realistic mixed workload across both countries.

    Every journey seeds its own restaurant, so the country partition is
    exercised from both sides at once.
    """

    wait_time = between(0.5, 3.0)
    tasks = {
        OrderCheckoutJourney: 6,
        OrderCancellationJourney: 2,
        SharedCartJourney: 4,
    }
