"""Scenario steps."""

from .cancel_bookings_step import CancelBookingsStep
from .collect_statistics_step import CollectStatisticsStep
from .create_bookings_step import CreateBookingsStep
from .seed_inventory_step import SeedInventoryStep

__all__ = [
    "SeedInventoryStep",
    "CreateBookingsStep",
    "CancelBookingsStep",
    "CollectStatisticsStep",
]
