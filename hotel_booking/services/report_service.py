"""Read-only reporting over the hotel inventory and its bookings."""

from datetime import date
from typing import Any, Optional

from structlog import get_logger

from hotel_booking.exceptions import InvalidArgumentError
from hotel_booking.models import BookingStatus, Hotel, Room, RoomStatus, RoomType
from hotel_booking.services.booking_service import BookingService

logger = get_logger(__name__)


class HotelReportService:
    """Aggregations over a hotel's rooms and the booking service's reservations.

    Nothing here mutates state. Each query holds the hotel lock so it never
    sees a booking without the matching room status change.
    """

    def __init__(self, hotel: Hotel, booking_service: BookingService):
        """Initialize the report service.

        Args:
            hotel: Hotel to report on
            booking_service: Booking service managing the hotel's reservations
        """
        if hotel is None:
            raise InvalidArgumentError("Hotel cannot be null")
        if booking_service is None:
            raise InvalidArgumentError("Booking service cannot be null")
        self.hotel = hotel
        self.booking_service = booking_service

    def check_availability(self, check_in: date, check_out: date) -> list[Room]:
        """List rooms that can be booked for the date range.

        Args:
            check_in: Requested check-in date
            check_out: Requested check-out date

        Returns:
            Bookable rooms in inventory order

        Raises:
            InvalidArgumentError: If a date is missing or check-out is not after check-in
        """
        if check_in is None or check_out is None:
            raise InvalidArgumentError("Check-in and check-out dates cannot be null")
        if check_out <= check_in:
            raise InvalidArgumentError("Check-out date must be after check-in date")

        with self.hotel.lock:
            return [
                room
                for room in self.hotel.get_all_rooms()
                if self.booking_service.can_book(room, check_in, check_out)
            ]

    def get_available_rooms_by_type(self, room_type: RoomType) -> list[Room]:
        if room_type is None:
            raise InvalidArgumentError("Room type cannot be null")
        return [room for room in self.hotel.get_available_rooms() if room.room_type == room_type]

    def get_rooms_by_status(self, status: RoomStatus) -> list[Room]:
        return self.hotel.get_rooms_by_status(status)

    def average_price_of_available_rooms(self) -> float:
        """Mean nightly price of AVAILABLE rooms, 0.0 when there are none."""
        available = self.hotel.get_available_rooms()
        if not available:
            return 0.0
        return sum(room.price_per_night for room in available) / len(available)

    def find_cheapest_available_room(self) -> Optional[Room]:
        """Cheapest AVAILABLE room; ties go to the first in inventory order."""
        cheapest = None
        for room in self.hotel.get_available_rooms():
            if cheapest is None or room.price_per_night < cheapest.price_per_night:
                cheapest = room
        return cheapest

    def find_most_expensive_available_room(self) -> Optional[Room]:
        """Most expensive AVAILABLE room; ties go to the first in inventory order."""
        most_expensive = None
        for room in self.hotel.get_available_rooms():
            if most_expensive is None or room.price_per_night > most_expensive.price_per_night:
                most_expensive = room
        return most_expensive

    def occupancy_rate(self) -> float:
        """Percentage of rooms whose status is OCCUPIED.

        MAINTENANCE and RESERVED rooms do not count as occupied.
        """
        with self.hotel.lock:
            total = self.hotel.total_room_count
            if total == 0:
                return 0.0
            occupied = len(self.hotel.get_rooms_by_status(RoomStatus.OCCUPIED))
        return occupied * 100.0 / total

    def total_revenue(self) -> float:
        """Sum of total prices of bookings that were not cancelled."""
        return sum(
            booking.total_price
            for booking in self.booking_service.get_all_bookings()
            if booking.status != BookingStatus.CANCELLED
        )

    def average_booking_value(self) -> float:
        bookings = [
            booking
            for booking in self.booking_service.get_all_bookings()
            if booking.status != BookingStatus.CANCELLED
        ]
        if not bookings:
            return 0.0
        return sum(booking.total_price for booking in bookings) / len(bookings)

    def summary(self) -> dict[str, Any]:
        """Collect the hotel statistics into a single dictionary."""
        with self.hotel.lock:
            cheapest = self.find_cheapest_available_room()
            most_expensive = self.find_most_expensive_available_room()
            result = {
                "hotel_id": self.hotel.hotel_id,
                "hotel_name": self.hotel.name,
                "total_rooms": self.hotel.total_room_count,
                "available_rooms": self.hotel.available_room_count,
                "occupancy_rate": round(self.occupancy_rate(), 1),
                "average_available_price": round(self.average_price_of_available_rooms(), 2),
                "cheapest_available_room": cheapest.number if cheapest else None,
                "most_expensive_available_room": most_expensive.number if most_expensive else None,
                "total_bookings": self.booking_service.total_bookings,
                "active_bookings": len(self.booking_service.get_active_bookings()),
                "total_revenue": round(self.total_revenue(), 2),
                "average_booking_value": round(self.average_booking_value(), 2),
            }

        logger.debug("Hotel summary computed", **result)
        return result
