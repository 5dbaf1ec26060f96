import json
from datetime import date, timedelta
from pathlib import Path

import pytest

from hotel_booking.models import Hotel, Room, RoomType
from hotel_booking.services import BookingService, HotelReportService

FIXTURES_DIR = Path(__file__).parent / "fixtures"

TODAY = date(2030, 3, 1)


def days(offset: int) -> date:
    """Date offset from the fixed test clock."""
    return TODAY + timedelta(days=offset)


@pytest.fixture
def today():
    """Fixed clock handed to the booking service."""
    return lambda: TODAY


@pytest.fixture
def hotel():
    """Hotel with a single and a double room."""
    hotel = Hotel(hotel_id="H001", name="Test Hotel", location="Test City", star_rating=4)
    hotel.add_room(Room(number="101", room_type=RoomType.SINGLE, price_per_night=79.99))
    hotel.add_room(Room(number="201", room_type=RoomType.DOUBLE, price_per_night=129.99))
    return hotel


@pytest.fixture
def booking_service(hotel, today):
    return BookingService(hotel, today=today)


@pytest.fixture
def report_service(hotel, booking_service):
    return HotelReportService(hotel, booking_service)


@pytest.fixture
def inventory_payload():
    """Load a valid inventory payload from fixture."""
    with open(FIXTURES_DIR / "inventory.json") as f:
        return json.load(f)


@pytest.fixture
def inventory_with_bad_rooms_payload():
    """Load an inventory payload containing malformed and duplicate rooms."""
    with open(FIXTURES_DIR / "inventory_with_bad_rooms.json") as f:
        return json.load(f)
