"""Inventory loading package."""

from hotel_booking.loaders.inventory_loader import InventoryLoader

__all__ = ["InventoryLoader"]
