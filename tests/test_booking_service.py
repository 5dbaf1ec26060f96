"""Unit tests for BookingService."""

import threading
from datetime import datetime

import pytest

from conftest import TODAY, days
from hotel_booking.exceptions import (
    HotelError,
    InvalidArgumentError,
    InvalidBookingError,
    RoomNotAvailableError,
)
from hotel_booking.models import BookingStatus, Room, RoomStatus, RoomType
from hotel_booking.services import BookingService, dates_conflict


class TestDatesConflict:
    """Tests for the date overlap rule."""

    @pytest.mark.parametrize(
        "new_range,existing_range,expected",
        [
            ((1, 3), (5, 8), False),
            ((9, 12), (5, 8), False),
            ((3, 5), (5, 8), True),  # new check-out on existing check-in
            ((8, 10), (5, 8), True),  # new check-in on existing check-out
            ((6, 7), (5, 8), True),
            ((4, 9), (5, 8), True),
            ((5, 8), (5, 8), True),
        ],
    )
    def test_overlap_rule(self, new_range, existing_range, expected):
        """Test that touching boundaries count as a conflict."""
        assert dates_conflict(
            days(new_range[0]), days(new_range[1]),
            days(existing_range[0]), days(existing_range[1]),
        ) is expected


class TestCreateBooking:
    """Tests for booking creation."""

    def test_create_booking_success(self, booking_service, hotel):
        """Test a valid booking is confirmed, priced and occupies the room."""
        booking = booking_service.create_booking("B001", "John Doe", "201", days(1), days(3))

        assert booking.booking_id == "B001"
        assert booking.room_number == "201"
        assert booking.status == BookingStatus.CONFIRMED
        assert booking.nights == 2
        assert booking.total_price == pytest.approx(259.98)
        assert hotel.get_room_by_number("201").status == RoomStatus.OCCUPIED
        assert booking_service.total_bookings == 1

    def test_check_in_today_accepted(self, booking_service):
        booking = booking_service.create_booking("B001", "John Doe", "101", TODAY, days(1))

        assert booking.total_price == pytest.approx(79.99)

    def test_datetime_arguments_use_calendar_date(self, booking_service):
        booking = booking_service.create_booking(
            "B001", "John Doe", "101", datetime(2030, 3, 2, 15, 0), datetime(2030, 3, 4, 11, 0)
        )

        assert booking.check_in == days(1)
        assert booking.nights == 2

    def test_arguments_are_trimmed(self, booking_service):
        booking = booking_service.create_booking(" B001 ", " John Doe ", " 201 ", days(1), days(2))

        assert booking.booking_id == "B001"
        assert booking.guest_name == "John Doe"
        assert booking.room_number == "201"

    def test_past_check_in_rejected(self, booking_service, hotel):
        """Test that a past check-in is refused even for a free room."""
        with pytest.raises(InvalidBookingError, match="past"):
            booking_service.create_booking("B001", "John Doe", "201", days(-1), days(2))

        assert booking_service.total_bookings == 0
        assert hotel.get_room_by_number("201").status == RoomStatus.AVAILABLE

    @pytest.mark.parametrize("check_out_offset", [3, 2])
    def test_check_out_not_after_check_in_rejected(self, booking_service, check_out_offset):
        with pytest.raises(InvalidBookingError, match="Check-out date must be after check-in date"):
            booking_service.create_booking("B001", "John Doe", "201", days(3), days(check_out_offset))

    def test_unknown_room_rejected(self, booking_service):
        with pytest.raises(InvalidBookingError, match="Room not found"):
            booking_service.create_booking("B001", "John Doe", "999", days(1), days(2))

    @pytest.mark.parametrize(
        "status",
        [RoomStatus.MAINTENANCE, RoomStatus.RESERVED, RoomStatus.OCCUPIED],
    )
    def test_room_out_of_service_rejected(self, booking_service, hotel, status):
        """Test that rooms set out of service by administration refuse bookings."""
        hotel.set_room_status("201", status)

        with pytest.raises(RoomNotAvailableError):
            booking_service.create_booking("B001", "John Doe", "201", days(1), days(2))

        assert booking_service.total_bookings == 0
        assert hotel.get_room_by_number("201").status == status

    @pytest.mark.parametrize(
        "booking_id,guest_name,room_number",
        [
            ("", "John Doe", "201"),
            ("B001", "   ", "201"),
            ("B001", "John Doe", None),
            (None, "John Doe", "201"),
        ],
    )
    def test_missing_arguments_rejected(self, booking_service, booking_id, guest_name, room_number):
        with pytest.raises(InvalidArgumentError, match="cannot be null or empty"):
            booking_service.create_booking(booking_id, guest_name, room_number, days(1), days(2))

    def test_missing_dates_rejected(self, booking_service):
        with pytest.raises(InvalidArgumentError):
            booking_service.create_booking("B001", "John Doe", "201", None, days(2))
        with pytest.raises(InvalidArgumentError):
            booking_service.create_booking("B001", "John Doe", "201", days(1), None)

    def test_short_guest_name_rejected(self, booking_service, hotel):
        """Test that a one character guest name is refused without side effects."""
        with pytest.raises(InvalidArgumentError, match="at least 2 characters"):
            booking_service.create_booking("B001", " J ", "201", days(1), days(2))

        assert booking_service.total_bookings == 0
        assert hotel.get_room_by_number("201").status == RoomStatus.AVAILABLE

    def test_errors_share_base_class(self, booking_service):
        with pytest.raises(HotelError):
            booking_service.create_booking("B001", "John Doe", "999", days(1), days(2))


class TestDateConflicts:
    """Tests for overlapping requests on the same room."""

    def test_overlapping_booking_rejected(self, booking_service, hotel):
        """Test that a rejected overlap leaves existing state untouched."""
        first = booking_service.create_booking("B001", "John Doe", "201", days(1), days(3))

        with pytest.raises(RoomNotAvailableError, match="not available for the specified dates"):
            booking_service.create_booking("B002", "Jane Doe", "201", days(2), days(4))

        assert booking_service.get_all_bookings() == [first]
        assert hotel.get_room_by_number("201").status == RoomStatus.OCCUPIED

    def test_check_in_on_previous_check_out_rejected(self, booking_service):
        booking_service.create_booking("B001", "John Doe", "201", days(1), days(3))

        with pytest.raises(RoomNotAvailableError):
            booking_service.create_booking("B002", "Jane Doe", "201", days(3), days(5))

    def test_disjoint_booking_on_booked_room_accepted(self, booking_service, hotel):
        """Test that a room held by this service accepts a later, disjoint stay."""
        booking_service.create_booking("B001", "John Doe", "201", days(1), days(3))
        second = booking_service.create_booking("B002", "Jane Doe", "201", days(4), days(6))

        assert second.status == BookingStatus.CONFIRMED
        assert len(booking_service.get_active_bookings()) == 2
        assert hotel.get_room_by_number("201").status == RoomStatus.OCCUPIED

    def test_other_rooms_unaffected(self, booking_service):
        booking_service.create_booking("B001", "John Doe", "201", days(1), days(3))
        booking = booking_service.create_booking("B002", "Jane Doe", "101", days(1), days(3))

        assert booking.room_number == "101"

    def test_is_room_available_for_dates(self, booking_service):
        booking_service.create_booking("B001", "John Doe", "201", days(1), days(3))

        assert not booking_service.is_room_available_for_dates("201", days(2), days(5))
        assert not booking_service.is_room_available_for_dates("201", days(3), days(5))
        assert booking_service.is_room_available_for_dates("201", days(4), days(5))
        assert booking_service.is_room_available_for_dates("101", days(2), days(5))

    def test_can_book_applies_status_gate(self, booking_service, hotel):
        room = hotel.get_room_by_number("101")
        assert booking_service.can_book(room, days(1), days(2))

        hotel.set_room_status("101", RoomStatus.MAINTENANCE)
        assert not booking_service.can_book(room, days(1), days(2))

    def test_calculate_total_price(self):
        room = Room(number="301", room_type=RoomType.SUITE, price_per_night=199.99)

        assert BookingService.calculate_total_price(room, days(0), days(3)) == pytest.approx(599.97)
        with pytest.raises(InvalidArgumentError):
            BookingService.calculate_total_price(room, days(3), days(3))


class TestCancelBooking:
    """Tests for booking cancellation."""

    def test_cancel_booking(self, booking_service, hotel):
        """Test cancellation marks the booking cancelled and frees the room."""
        booking_service.create_booking("B001", "John Doe", "201", days(1), days(3))

        assert booking_service.cancel_booking("B001") is True

        booking = booking_service.get_booking_by_id("B001")
        assert booking.status == BookingStatus.CANCELLED
        assert not booking.is_active
        assert hotel.get_room_by_number("201").status == RoomStatus.AVAILABLE
        assert booking_service.total_bookings == 1
        assert booking_service.get_active_bookings() == []

    def test_cancel_twice_returns_false(self, booking_service):
        booking_service.create_booking("B001", "John Doe", "201", days(1), days(3))

        assert booking_service.cancel_booking("B001") is True
        assert booking_service.cancel_booking("B001") is False

    def test_cancel_unknown_booking(self, booking_service):
        assert booking_service.cancel_booking("NOPE") is False

    def test_cancel_blank_id_rejected(self, booking_service):
        with pytest.raises(InvalidArgumentError):
            booking_service.cancel_booking("  ")

    def test_cancelled_dates_can_be_rebooked(self, booking_service):
        booking_service.create_booking("B001", "John Doe", "201", days(1), days(3))
        booking_service.cancel_booking("B001")

        booking = booking_service.create_booking("B002", "Jane Doe", "201", days(1), days(3))

        assert booking.status == BookingStatus.CONFIRMED

    def test_room_scenario(self, booking_service, hotel):
        """Test the full lifecycle of a double room with overlapping requests."""
        first = booking_service.create_booking("BK001", "John Anderson", "201", days(7), days(9))
        second = booking_service.create_booking("BK003", "Michael Brown", "201", days(10), days(13))

        with pytest.raises(RoomNotAvailableError):
            booking_service.create_booking("BK004", "Test Guest", "201", days(8), days(10))

        assert first.total_price == pytest.approx(259.98)
        assert second.total_price == pytest.approx(389.97)

        assert booking_service.cancel_booking("BK001") is True
        assert hotel.get_room_by_number("201").status == RoomStatus.AVAILABLE
        assert [b.booking_id for b in booking_service.get_active_bookings()] == ["BK003"]


class TestBookingQueries:
    """Tests for booking lookups."""

    @pytest.fixture
    def populated_service(self, booking_service):
        booking_service.create_booking("B001", "John Doe", "201", days(1), days(3))
        booking_service.create_booking("B002", "jane doe", "101", days(1), days(2))
        booking_service.create_booking("B003", "Jane Doe", "201", days(5), days(6))
        booking_service.cancel_booking("B002")
        return booking_service

    def test_get_booking_by_id(self, populated_service):
        assert populated_service.get_booking_by_id("B003").guest_name == "Jane Doe"
        assert populated_service.get_booking_by_id(" B001 ").room_number == "201"
        assert populated_service.get_booking_by_id("B999") is None

    def test_get_bookings_by_guest_ignores_case(self, populated_service):
        bookings = populated_service.get_bookings_by_guest("JANE DOE")

        assert [b.booking_id for b in bookings] == ["B002", "B003"]

    def test_get_active_bookings(self, populated_service):
        assert [b.booking_id for b in populated_service.get_active_bookings()] == ["B001", "B003"]

    def test_get_all_bookings_is_a_snapshot(self, populated_service):
        bookings = populated_service.get_all_bookings()
        bookings.clear()

        assert [b.booking_id for b in populated_service.get_all_bookings()] == ["B001", "B002", "B003"]
        assert populated_service.total_bookings == 3


def test_concurrent_requests_for_same_room(hotel, today):
    """Test that only one of many simultaneous overlapping requests succeeds."""
    service = BookingService(hotel, today=today)
    workers = 8
    barrier = threading.Barrier(workers)
    results = []
    results_lock = threading.Lock()

    def book(index):
        barrier.wait()
        try:
            service.create_booking(f"B{index:03d}", f"Guest {index}", "201", days(1), days(4))
            outcome = "created"
        except RoomNotAvailableError:
            outcome = "rejected"
        with results_lock:
            results.append(outcome)

    threads = [threading.Thread(target=book, args=(i,)) for i in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results.count("created") == 1
    assert results.count("rejected") == workers - 1
    assert len(service.get_active_bookings()) == 1
    assert hotel.get_room_by_number("201").status == RoomStatus.OCCUPIED
