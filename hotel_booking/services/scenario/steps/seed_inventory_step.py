"""Step to seed the hotel inventory and its services."""

from datetime import date
from pathlib import Path
from typing import Any, Callable, Optional

from hotel_booking.loaders import InventoryLoader
from hotel_booking.services.booking_service import BookingService
from hotel_booking.services.report_service import HotelReportService
from hotel_booking.services.scenario import ScenarioContext, ScenarioStep


class SeedInventoryStep(ScenarioStep):
    """Load the hotel inventory and attach booking and report services."""

    def __init__(
        self,
        payload: Optional[dict[str, Any]] = None,
        inventory_file: Optional[str | Path] = None,
        today: Callable[[], date] = date.today,
    ):
        """Initialize the step.

        Args:
            payload: Inventory payload, used when no file is given
            inventory_file: Path to a JSON inventory payload
            today: Clock handed to the booking service
        """
        super().__init__("SeedInventory")
        self.payload = payload
        self.inventory_file = inventory_file
        self.today = today

    def execute(self, context: ScenarioContext) -> bool:
        if self.inventory_file:
            hotel = InventoryLoader.load_file(self.inventory_file)
        elif self.payload is not None:
            hotel = InventoryLoader.load(self.payload)
        else:
            self.logger.error("No inventory payload or file configured")
            return False

        context.hotel = hotel
        context.booking_service = BookingService(hotel, today=self.today)
        context.report_service = HotelReportService(hotel, context.booking_service)
        context.stats["inventory"] = {
            "total_rooms": hotel.total_room_count,
            "available_rooms": hotel.available_room_count,
        }

        self.logger.info(
            "Inventory seeded",
            hotel_id=hotel.hotel_id,
            total_rooms=hotel.total_room_count,
        )
        return hotel.total_room_count > 0
