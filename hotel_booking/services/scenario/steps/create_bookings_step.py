"""Step to submit booking requests to the booking service."""

from hotel_booking.exceptions import HotelError
from hotel_booking.models.payload import BookingRequest
from hotel_booking.services.scenario import ScenarioContext, ScenarioStep


class CreateBookingsStep(ScenarioStep):
    """Submit booking requests in order, recording accepted and refused ones.

    A refused request is an expected outcome, not a step failure.
    """

    def __init__(self, requests: list[BookingRequest]):
        """Initialize the step.

        Args:
            requests: Booking requests to submit in order
        """
        super().__init__("CreateBookings")
        self.requests = requests

    def execute(self, context: ScenarioContext) -> bool:
        if context.booking_service is None:
            self.logger.warning("No booking service available, skipping bookings")
            return False

        for request in self.requests:
            try:
                booking = context.booking_service.create_booking(
                    request.booking_id,
                    request.guest_name,
                    request.room_number,
                    request.check_in,
                    request.check_out,
                )
            except HotelError as e:
                context.add_rejection(request.booking_id, e)
                continue
            context.add_booking(booking)

        context.stats["bookings"] = {
            "requested": len(self.requests),
            "created": len(context.bookings),
            "rejected": len(context.rejections),
        }
        return True
