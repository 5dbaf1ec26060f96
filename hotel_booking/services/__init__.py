"""Booking and reporting services package."""

from hotel_booking.services.booking_service import BookingService, dates_conflict
from hotel_booking.services.report_service import HotelReportService

__all__ = [
    "BookingService",
    "HotelReportService",
    "dates_conflict",
]
