"""Single-hotel room inventory and booking engine."""

from hotel_booking.exceptions import (
    HotelError,
    InvalidArgumentError,
    InvalidBookingError,
    InvalidRoomError,
    RoomNotAvailableError,
)
from hotel_booking.models import Booking, BookingStatus, Hotel, Room, RoomStatus, RoomType
from hotel_booking.services import BookingService, HotelReportService

__all__ = [
    "Booking",
    "BookingService",
    "BookingStatus",
    "Hotel",
    "HotelError",
    "HotelReportService",
    "InvalidArgumentError",
    "InvalidBookingError",
    "InvalidRoomError",
    "Room",
    "RoomNotAvailableError",
    "RoomStatus",
    "RoomType",
]
