"""Step to cancel bookings."""

from hotel_booking.services.scenario import ScenarioContext, ScenarioStep


class CancelBookingsStep(ScenarioStep):
    """Cancel bookings by id and record whether each cancellation took effect."""

    def __init__(self, booking_ids: list[str]):
        super().__init__("CancelBookings")
        self.booking_ids = booking_ids

    def execute(self, context: ScenarioContext) -> bool:
        if context.booking_service is None:
            self.logger.warning("No booking service available, skipping cancellations")
            return False

        for booking_id in self.booking_ids:
            cancelled = context.booking_service.cancel_booking(booking_id)
            context.cancellations.append({"booking_id": booking_id, "cancelled": cancelled})

        return True

    def is_required(self) -> bool:
        """Cancellations are optional, statistics are still worth collecting."""
        return False
