"""Booking model."""

from datetime import date
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from hotel_booking.exceptions import InvalidArgumentError, validation_message
from hotel_booking.models.status import BookingStatus


class Booking(BaseModel):
    """An immutable reservation of one room for a date range.

    The room is referenced by number; the booking service resolves it
    against the hotel inventory when current status is needed.
    Two bookings are equal when id, guest name and check-in date match.
    """

    booking_id: str
    guest_name: str
    room_number: str
    check_in: date
    check_out: date
    total_price: float = Field(ge=0)
    status: BookingStatus

    class Config:
        frozen = True

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise InvalidArgumentError(validation_message(e)) from e

    @field_validator("booking_id", "room_number", mode="before")
    @classmethod
    def strip_identifier(cls, v, info):
        if v is None or not str(v).strip():
            raise ValueError(f"{info.field_name} cannot be null or empty")
        return str(v).strip()

    @field_validator("guest_name", mode="before")
    @classmethod
    def validate_guest_name(cls, v):
        """Trim the guest name and require at least 2 characters."""
        if v is None or not str(v).strip():
            raise ValueError("Guest name cannot be null or empty")
        name = str(v).strip()
        if len(name) < 2:
            raise ValueError("Guest name must be at least 2 characters")
        return name

    @model_validator(mode="after")
    def check_out_after_check_in(self) -> "Booking":
        if self.check_out <= self.check_in:
            raise ValueError("Check-out date must be after check-in date")
        return self

    @property
    def nights(self) -> int:
        """Number of nights between check-in and check-out."""
        return (self.check_out - self.check_in).days

    @property
    def is_active(self) -> bool:
        return self.status == BookingStatus.CONFIRMED

    def with_status(self, status: BookingStatus) -> "Booking":
        """Return a copy of this booking carrying a different status."""
        return self.model_copy(update={"status": status})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Booking):
            return NotImplemented
        return (
            self.booking_id == other.booking_id
            and self.guest_name == other.guest_name
            and self.check_in == other.check_in
        )

    def __hash__(self) -> int:
        return hash((self.booking_id, self.guest_name, self.check_in))

    def __str__(self) -> str:
        return (
            f"Booking(id={self.booking_id}, guest={self.guest_name}, room={self.room_number}, "
            f"check_in={self.check_in}, check_out={self.check_out}, "
            f"price={self.total_price:.2f}, status={self.status.display_name})"
        )
