"""Demo entry point running a booking scenario against the engine."""

import json
import sys
from datetime import date, timedelta
from typing import Any, Callable

from hotel_booking.config import configure_logging, get_logger, settings
from hotel_booking.models.payload import BookingRequest
from hotel_booking.services.scenario import ScenarioContext, ScenarioPipeline
from hotel_booking.services.scenario.steps import (
    CancelBookingsStep,
    CollectStatisticsStep,
    CreateBookingsStep,
    SeedInventoryStep,
)

logger = get_logger(__name__)

DEMO_ROOMS: list[dict[str, Any]] = [
    {"number": "101", "type": "SINGLE", "price_per_night": 79.99},
    {"number": "102", "type": "SINGLE", "price_per_night": 79.99},
    {"number": "201", "type": "DOUBLE", "price_per_night": 129.99},
    {"number": "202", "type": "DOUBLE", "price_per_night": 129.99},
    {"number": "203", "type": "DOUBLE", "price_per_night": 129.99},
    {"number": "301", "type": "SUITE", "price_per_night": 199.99},
    {"number": "302", "type": "DELUXE", "price_per_night": 159.99},
]


def demo_inventory_payload() -> dict[str, Any]:
    """Inventory payload for the configured demo hotel."""
    return {
        "hotel": {
            "hotel_id": settings.hotel.id,
            "name": settings.hotel.name,
            "location": settings.hotel.location,
            "star_rating": settings.hotel.star_rating,
        },
        "rooms": DEMO_ROOMS,
    }


def demo_booking_requests(today: date, offset_days: int) -> list[BookingRequest]:
    """Booking requests exercising acceptance, overlap and past-date refusal.

    Args:
        today: Current date
        offset_days: Days from today to the first check-in

    Returns:
        Booking requests in submission order
    """
    first_check_in = today + timedelta(days=offset_days)
    return [
        BookingRequest(
            booking_id="BK001",
            guest_name="John Anderson",
            room_number="201",
            check_in=first_check_in,
            check_out=first_check_in + timedelta(days=2),
        ),
        BookingRequest(
            booking_id="BK002",
            guest_name="Emma Wilson",
            room_number="301",
            check_in=first_check_in + timedelta(days=3),
            check_out=first_check_in + timedelta(days=4),
        ),
        # Same room as BK001, starting after its check-out day
        BookingRequest(
            booking_id="BK003",
            guest_name="Michael Brown",
            room_number="201",
            check_in=first_check_in + timedelta(days=3),
            check_out=first_check_in + timedelta(days=6),
        ),
        # Overlaps BK001
        BookingRequest(
            booking_id="BK004",
            guest_name="Test Guest",
            room_number="201",
            check_in=first_check_in + timedelta(days=1),
            check_out=first_check_in + timedelta(days=3),
        ),
        BookingRequest(
            booking_id="BK005",
            guest_name="Test Guest",
            room_number="102",
            check_in=today - timedelta(days=1),
            check_out=today + timedelta(days=1),
        ),
    ]


def build_demo_pipeline(today: Callable[[], date] = date.today) -> ScenarioPipeline:
    """Build the demo scenario pipeline from settings."""
    inventory_file = settings.demo.inventory_file
    return ScenarioPipeline(
        "demo",
        [
            SeedInventoryStep(
                payload=None if inventory_file else demo_inventory_payload(),
                inventory_file=inventory_file,
                today=today,
            ),
            CreateBookingsStep(
                demo_booking_requests(today(), settings.demo.first_booking_offset_days)
            ),
            CancelBookingsStep(["BK001"]),
            CollectStatisticsStep(),
        ],
    )


def main() -> int:
    """Run the demo scenario and print its results as JSON.

    Returns:
        Process exit code
    """
    logger.info("Starting hotel booking demo", environment=settings.environment)

    try:
        context = build_demo_pipeline().execute(ScenarioContext("demo"))
    except Exception as e:
        logger.error("Fatal error in demo scenario", error=str(e), exc_info=True)
        return 1

    print(json.dumps(context.get_results(), indent=2, default=str))
    return 0 if context.success else 1


def run() -> None:
    """Configure logging, run the demo and exit with its code."""
    configure_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
