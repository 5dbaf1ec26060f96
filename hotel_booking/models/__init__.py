"""Domain models for hotel inventory and bookings."""

from hotel_booking.models.booking import Booking
from hotel_booking.models.hotel import Hotel
from hotel_booking.models.room import Room
from hotel_booking.models.room_type import ROOM_CATALOG, RoomType, RoomTypeInfo, get_room_type_info
from hotel_booking.models.status import BookingStatus, RoomStatus

__all__ = [
    "Booking",
    "BookingStatus",
    "Hotel",
    "Room",
    "RoomStatus",
    "RoomType",
    "RoomTypeInfo",
    "ROOM_CATALOG",
    "get_room_type_info",
]
