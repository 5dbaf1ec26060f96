"""Availability and booking engine for a single hotel."""

from datetime import date, datetime
from typing import Callable, Optional

from structlog import get_logger

from hotel_booking.exceptions import (
    InvalidArgumentError,
    InvalidBookingError,
    RoomNotAvailableError,
)
from hotel_booking.models import Booking, BookingStatus, Hotel, Room, RoomStatus
from hotel_booking.models.hotel import require_text

logger = get_logger(__name__)


def _require_date(value: Optional[date], label: str) -> date:
    """Return value as a calendar date, rejecting None."""
    if value is None:
        raise InvalidArgumentError(f"{label} cannot be null")
    if isinstance(value, datetime):
        return value.date()
    return value


def dates_conflict(
    check_in: date,
    check_out: date,
    existing_check_in: date,
    existing_check_out: date,
) -> bool:
    """Check whether two stays overlap.

    Ranges that only touch at a boundary date count as overlapping,
    so a room cannot be checked into on the day another stay checks out.
    """
    return not check_out < existing_check_in and not check_in > existing_check_out


class BookingService:
    """Creates, cancels and queries bookings for one hotel.

    The service is the only writer of reservation state and, apart from
    administrative calls on the hotel, of room occupancy. Every mutation
    and every read runs under the hotel lock, so a booking append and
    the matching room status change are observed together.
    """

    def __init__(self, hotel: Hotel, today: Callable[[], date] = date.today):
        """Initialize the booking service.

        Args:
            hotel: Hotel whose rooms are booked
            today: Clock returning the current date, resolved once per call
        """
        if hotel is None:
            raise InvalidArgumentError("Hotel cannot be null")
        self.hotel = hotel
        self._today = today
        self._bookings: list[Booking] = []
        self.logger = logger.bind(hotel_id=hotel.hotel_id)

    def create_booking(
        self,
        booking_id: str,
        guest_name: str,
        room_number: str,
        check_in: date,
        check_out: date,
    ) -> Booking:
        """Book a room for a guest.

        Args:
            booking_id: Unique booking identifier
            guest_name: Guest name, at least 2 characters
            room_number: Number of the room to book
            check_in: First night of the stay
            check_out: Departure date, after check_in

        Returns:
            The confirmed booking

        Raises:
            InvalidArgumentError: If a required argument is missing or blank
            InvalidBookingError: If check-in is in the past, check-out is not
                after check-in, or the room does not exist
            RoomNotAvailableError: If the room is out of service or already
                booked for overlapping dates
        """
        booking_id = require_text(booking_id, "Booking ID")
        guest_name = require_text(guest_name, "Guest name")
        room_number = require_text(room_number, "Room number")
        check_in = _require_date(check_in, "Check-in date")
        check_out = _require_date(check_out, "Check-out date")

        if check_in < self._today():
            self._reject("Check-in date in the past", booking_id, room_number)
            raise InvalidBookingError("Check-in date cannot be in the past")
        if check_out <= check_in:
            self._reject("Check-out not after check-in", booking_id, room_number)
            raise InvalidBookingError("Check-out date must be after check-in date")

        with self.hotel.lock:
            room = self.hotel.get_room_by_number(room_number)
            if room is None:
                self._reject("Unknown room", booking_id, room_number)
                raise InvalidBookingError(f"Room not found: {room_number}")

            if not self._accepts_new_bookings(room):
                self._reject(
                    "Room not bookable in current status",
                    booking_id,
                    room_number,
                    room_status=room.status.value,
                )
                raise RoomNotAvailableError(f"Room {room_number} is not available")

            if self._find_conflict(room_number, check_in, check_out) is not None:
                self._reject("Date conflict", booking_id, room_number)
                raise RoomNotAvailableError(
                    f"Room {room_number} is not available for the specified dates"
                )

            booking = Booking(
                booking_id=booking_id,
                guest_name=guest_name,
                room_number=room.number,
                check_in=check_in,
                check_out=check_out,
                total_price=self.calculate_total_price(room, check_in, check_out),
                status=BookingStatus.CONFIRMED,
            )

            self._bookings.append(booking)
            room.status = RoomStatus.OCCUPIED

        self.logger.info(
            "Booking created",
            booking_id=booking.booking_id,
            room_number=booking.room_number,
            check_in=booking.check_in.isoformat(),
            check_out=booking.check_out.isoformat(),
            nights=booking.nights,
            total_price=booking.total_price,
        )
        return booking

    def is_room_available_for_dates(
        self,
        room_number: str,
        check_in: date,
        check_out: date,
    ) -> bool:
        """Check the room's confirmed bookings for a date conflict.

        Returns:
            True if no confirmed booking of the room overlaps the range
        """
        room_number = require_text(room_number, "Room number")
        check_in = _require_date(check_in, "Check-in date")
        check_out = _require_date(check_out, "Check-out date")

        with self.hotel.lock:
            return self._find_conflict(room_number, check_in, check_out) is None

    def can_book(self, room: Room, check_in: date, check_out: date) -> bool:
        """Check whether create_booking would accept the room for the range."""
        with self.hotel.lock:
            return self._accepts_new_bookings(room) and self.is_room_available_for_dates(
                room.number, check_in, check_out
            )

    @staticmethod
    def calculate_total_price(room: Room, check_in: date, check_out: date) -> float:
        """Price of a stay: price per night times the number of nights."""
        if room is None:
            raise InvalidArgumentError("Room cannot be null")
        check_in = _require_date(check_in, "Check-in date")
        check_out = _require_date(check_out, "Check-out date")
        return room.calculate_total_cost((check_out - check_in).days)

    def cancel_booking(self, booking_id: str) -> bool:
        """Cancel a booking and release its room.

        The stored booking is replaced by a copy with CANCELLED status.

        Returns:
            True if cancelled, False if unknown or already cancelled
        """
        booking_id = require_text(booking_id, "Booking ID")

        with self.hotel.lock:
            for index, booking in enumerate(self._bookings):
                if booking.booking_id != booking_id:
                    continue

                if booking.status == BookingStatus.CANCELLED:
                    self.logger.warning("Booking already cancelled", booking_id=booking_id)
                    return False

                self._bookings[index] = booking.with_status(BookingStatus.CANCELLED)
                room = self.hotel.get_room_by_number(booking.room_number)
                if room is not None:
                    room.status = RoomStatus.AVAILABLE

                self.logger.info(
                    "Booking cancelled",
                    booking_id=booking_id,
                    room_number=booking.room_number,
                )
                return True

        self.logger.warning("Booking not found for cancellation", booking_id=booking_id)
        return False

    def get_booking_by_id(self, booking_id: str) -> Optional[Booking]:
        booking_id = require_text(booking_id, "Booking ID")
        with self.hotel.lock:
            return next(
                (booking for booking in self._bookings if booking.booking_id == booking_id),
                None,
            )

    def get_bookings_by_guest(self, guest_name: str) -> list[Booking]:
        """Bookings whose guest name matches, ignoring case."""
        guest_name = require_text(guest_name, "Guest name").casefold()
        with self.hotel.lock:
            return [
                booking
                for booking in self._bookings
                if booking.guest_name.casefold() == guest_name
            ]

    def get_active_bookings(self) -> list[Booking]:
        with self.hotel.lock:
            return [booking for booking in self._bookings if booking.is_active]

    def get_all_bookings(self) -> list[Booking]:
        with self.hotel.lock:
            return list(self._bookings)

    @property
    def total_bookings(self) -> int:
        with self.hotel.lock:
            return len(self._bookings)

    def _accepts_new_bookings(self, room: Room) -> bool:
        """Status gate applied before the date conflict scan.

        An OCCUPIED room still accepts bookings when its occupancy comes
        from confirmed bookings held here; the conflict scan then decides.
        """
        if room.status == RoomStatus.AVAILABLE:
            return True
        if room.status == RoomStatus.OCCUPIED:
            return any(
                booking.room_number == room.number and booking.is_active
                for booking in self._bookings
            )
        return False

    def _find_conflict(
        self,
        room_number: str,
        check_in: date,
        check_out: date,
    ) -> Optional[Booking]:
        for booking in self._bookings:
            if booking.room_number != room_number or not booking.is_active:
                continue
            if dates_conflict(check_in, check_out, booking.check_in, booking.check_out):
                return booking
        return None

    def _reject(self, reason: str, booking_id: str, room_number: str, **context) -> None:
        self.logger.warning(
            "Booking rejected",
            reason=reason,
            booking_id=booking_id,
            room_number=room_number,
            **context,
        )
