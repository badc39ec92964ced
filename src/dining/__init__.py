"""Dining Hub: country-partitioned food ordering with shared carts."""
