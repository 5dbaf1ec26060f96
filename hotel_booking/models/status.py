"""Room and booking status enums."""

from enum import Enum


class RoomStatus(str, Enum):
    """Occupancy status of a room.

    Only AVAILABLE lets a new booking attempt proceed to the
    date conflict scan, except for rooms whose OCCUPIED status is
    held by the booking engine itself.
    """

    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"
    RESERVED = "reserved"

    @property
    def display_name(self) -> str:
        return _ROOM_STATUS_NAMES[self]


class BookingStatus(str, Enum):
    """Lifecycle status of a booking.

    Only CONFIRMED bookings occupy a room and take part in conflict
    checks. CANCELLED bookings are kept for history.
    """

    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"
    PENDING = "pending"

    @property
    def display_name(self) -> str:
        return _BOOKING_STATUS_NAMES[self]


_ROOM_STATUS_NAMES = {
    RoomStatus.AVAILABLE: "Available",
    RoomStatus.OCCUPIED: "Occupied",
    RoomStatus.MAINTENANCE: "Under Maintenance",
    RoomStatus.RESERVED: "Reserved",
}

_BOOKING_STATUS_NAMES = {
    BookingStatus.CONFIRMED: "Confirmed",
    BookingStatus.CANCELLED: "Cancelled",
    BookingStatus.COMPLETED: "Completed",
    BookingStatus.PENDING: "Pending",
}
