"""Scenario context for sharing state between steps."""

from datetime import datetime
from typing import Any, Optional

from hotel_booking.models import Booking, Hotel
from hotel_booking.services.booking_service import BookingService
from hotel_booking.services.report_service import HotelReportService


class ScenarioContext:
    """Context object passed to each scenario step.

    Holds the hotel and its services once seeded, and accumulates
    booking outcomes as the scenario progresses.
    """

    def __init__(self, name: str):
        """Initialize scenario context.

        Args:
            name: Scenario name used in results and logs
        """
        self.name = name
        self.start_time = datetime.utcnow()

        # Seeded by SeedInventoryStep
        self.hotel: Optional[Hotel] = None
        self.booking_service: Optional[BookingService] = None
        self.report_service: Optional[HotelReportService] = None

        # Booking outcomes
        self.bookings: list[dict[str, Any]] = []
        self.rejections: list[dict[str, str]] = []
        self.cancellations: list[dict[str, Any]] = []

        # Processing statistics
        self.stats: dict[str, Any] = {}

        # Errors encountered during processing
        self.errors: list[dict[str, str]] = []

        self.success: bool = False

    @property
    def hotel_id(self) -> Optional[str]:
        return self.hotel.hotel_id if self.hotel is not None else None

    def add_error(self, step_name: str, error_message: str) -> None:
        """Add an error to the context.

        Args:
            step_name: Name of the step where error occurred
            error_message: Error message
        """
        self.errors.append({
            "step": step_name,
            "message": error_message,
            "timestamp": datetime.utcnow().isoformat(),
        })

    def add_booking(self, booking: Booking) -> None:
        self.bookings.append({
            "booking_id": booking.booking_id,
            "guest_name": booking.guest_name,
            "room_number": booking.room_number,
            "check_in": booking.check_in.isoformat(),
            "check_out": booking.check_out.isoformat(),
            "nights": booking.nights,
            "total_price": round(booking.total_price, 2),
            "status": booking.status.value,
        })

    def add_rejection(self, booking_id: str, error: Exception) -> None:
        """Record a booking request the engine refused.

        Args:
            booking_id: Identifier of the refused request
            error: Exception raised by the booking service
        """
        self.rejections.append({
            "booking_id": booking_id,
            "error_type": type(error).__name__,
            "message": str(error),
        })

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def get_results(self) -> dict[str, Any]:
        """Get final results dictionary.

        Returns:
            Dictionary containing all outcomes and statistics
        """
        end_time = datetime.utcnow()
        duration = (end_time - self.start_time).total_seconds()

        return {
            "scenario": self.name,
            "hotel_id": self.hotel_id,
            "success": self.success,
            "start_time": self.start_time.isoformat(),
            "end_time": end_time.isoformat(),
            "duration_seconds": duration,
            "bookings": self.bookings,
            "rejections": self.rejections,
            "cancellations": self.cancellations,
            "errors": self.errors,
            "stats": self.stats,
        }
