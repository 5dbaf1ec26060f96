"""Pydantic models for inventory payloads and booking requests."""

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, Field


class HotelInfoPayload(BaseModel):
    """Hotel section of an inventory payload."""

    hotel_id: str = Field(alias="hotelId")
    name: str
    location: str
    star_rating: int = Field(alias="starRating")

    class Config:
        extra = "allow"
        populate_by_name = True


class RoomPayload(BaseModel):
    """Single room entry of an inventory payload."""

    number: str
    type: str  # Room type name, e.g. "DOUBLE"
    price_per_night: float = Field(alias="pricePerNight")
    description: str = ""
    status: Optional[str] = None  # Defaults to AVAILABLE

    class Config:
        extra = "allow"
        populate_by_name = True


class InventoryPayload(BaseModel):
    """Complete inventory payload: one hotel and its rooms.

    Rooms are kept as raw dictionaries so a malformed entry can be
    skipped without rejecting the whole payload.
    """

    hotel: HotelInfoPayload
    rooms: list[dict[str, Any]] = Field(default_factory=list)

    class Config:
        extra = "allow"
        populate_by_name = True


class BookingRequest(BaseModel):
    """Booking request fed to the booking service by the scenario runner."""

    booking_id: str = Field(alias="bookingId")
    guest_name: str = Field(alias="guestName")
    room_number: str = Field(alias="roomNumber")
    check_in: date = Field(alias="checkIn")
    check_out: date = Field(alias="checkOut")

    class Config:
        populate_by_name = True
