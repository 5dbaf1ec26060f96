"""Room model."""

from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from hotel_booking.exceptions import InvalidArgumentError, InvalidRoomError, validation_message
from hotel_booking.models.room_type import RoomType
from hotel_booking.models.status import RoomStatus


class Room(BaseModel):
    """A room in the hotel inventory.

    Status and description are mutable; equality and hashing use the
    room number alone.
    """

    number: str
    room_type: RoomType
    price_per_night: float = Field(ge=0)
    status: RoomStatus = RoomStatus.AVAILABLE
    description: str = ""

    class Config:
        validate_assignment = True

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise InvalidRoomError(validation_message(e)) from e

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except ValidationError as e:
            raise InvalidRoomError(validation_message(e)) from e

    @field_validator("number", mode="before")
    @classmethod
    def strip_number(cls, v):
        """Trim the room number and reject blank values."""
        if v is None or not str(v).strip():
            raise ValueError("Room number cannot be null or empty")
        return str(v).strip()

    @property
    def is_available(self) -> bool:
        return self.status == RoomStatus.AVAILABLE

    def calculate_total_cost(self, nights: int) -> float:
        """Calculate the cost of staying a number of nights.

        Args:
            nights: Number of nights, must be positive

        Returns:
            price_per_night multiplied by nights

        Raises:
            InvalidArgumentError: If nights is not positive
        """
        if nights <= 0:
            raise InvalidArgumentError("Number of nights must be positive")
        return self.price_per_night * nights

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Room):
            return NotImplemented
        return self.number == other.number

    def __hash__(self) -> int:
        return hash(self.number)

    def __str__(self) -> str:
        return (
            f"Room(number={self.number}, type={self.room_type.display_name}, "
            f"price={self.price_per_night:.2f}, status={self.status.display_name})"
        )
