"""Hotel model owning the room inventory."""

import threading
from typing import Any, Optional

from pydantic import BaseModel, Field, PrivateAttr, ValidationError, field_validator
from structlog import get_logger

from hotel_booking.exceptions import InvalidArgumentError, validation_message
from hotel_booking.models.room import Room
from hotel_booking.models.room_type import RoomType
from hotel_booking.models.status import RoomStatus

logger = get_logger(__name__)


def require_text(value: Optional[str], label: str) -> str:
    """Trim a required string argument.

    Args:
        value: Raw argument
        label: Human readable argument name used in the error message

    Returns:
        The trimmed value

    Raises:
        InvalidArgumentError: If value is None or blank
    """
    if value is None or not str(value).strip():
        raise InvalidArgumentError(f"{label} cannot be null or empty")
    return str(value).strip()


class Hotel(BaseModel):
    """A hotel and its room inventory.

    Rooms are keyed by room number and enumerated in insertion order.
    The re-entrant ``lock`` guards the inventory together with the
    reservations of the booking service built on top of it.
    """

    hotel_id: str
    name: str
    location: str
    star_rating: int = Field(ge=1, le=5)

    _rooms: dict[str, Room] = PrivateAttr(default_factory=dict)
    _lock: Any = PrivateAttr(default_factory=threading.RLock)

    class Config:
        validate_assignment = True

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise InvalidArgumentError(validation_message(e)) from e

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except ValidationError as e:
            raise InvalidArgumentError(validation_message(e)) from e

    @field_validator("hotel_id", "name", "location", mode="before")
    @classmethod
    def strip_text(cls, v, info):
        if v is None or not str(v).strip():
            raise ValueError(f"{info.field_name} cannot be null or empty")
        return str(v).strip()

    @property
    def lock(self) -> Any:
        return self._lock

    def add_room(self, room: Room) -> bool:
        """Add a room to the inventory.

        Args:
            room: Room to add

        Returns:
            True if added, False if a room with the same number already exists

        Raises:
            InvalidArgumentError: If room is None
        """
        if room is None:
            raise InvalidArgumentError("Room cannot be null")

        with self._lock:
            if room.number in self._rooms:
                logger.warning(
                    "Duplicate room number rejected",
                    hotel_id=self.hotel_id,
                    room_number=room.number,
                )
                return False
            self._rooms[room.number] = room

        logger.debug("Room added", hotel_id=self.hotel_id, room_number=room.number)
        return True

    def remove_room(self, room_number: str) -> bool:
        """Remove a room by number.

        Returns:
            True if a room was removed, False if none matched
        """
        number = require_text(room_number, "Room number")
        with self._lock:
            removed = self._rooms.pop(number, None)
        return removed is not None

    def get_room_by_number(self, room_number: str) -> Optional[Room]:
        """Look up a room by number, returning None when it does not exist."""
        number = require_text(room_number, "Room number")
        with self._lock:
            return self._rooms.get(number)

    def get_all_rooms(self) -> list[Room]:
        with self._lock:
            return list(self._rooms.values())

    def get_available_rooms(self) -> list[Room]:
        with self._lock:
            return [room for room in self._rooms.values() if room.is_available]

    def get_rooms_by_type(self, room_type: RoomType) -> list[Room]:
        if room_type is None:
            raise InvalidArgumentError("Room type cannot be null")
        with self._lock:
            return [room for room in self._rooms.values() if room.room_type == room_type]

    def get_rooms_by_status(self, status: RoomStatus) -> list[Room]:
        if status is None:
            raise InvalidArgumentError("Room status cannot be null")
        with self._lock:
            return [room for room in self._rooms.values() if room.status == status]

    def set_room_status(self, room_number: str, status: RoomStatus) -> Room:
        """Administratively change a room's status (e.g. maintenance).

        Raises:
            InvalidArgumentError: If the room does not exist or status is None
        """
        if status is None:
            raise InvalidArgumentError("Room status cannot be null")
        with self._lock:
            room = self.get_room_by_number(room_number)
            if room is None:
                raise InvalidArgumentError(f"Room not found: {room_number}")
            previous = room.status
            room.status = status

        logger.info(
            "Room status changed",
            hotel_id=self.hotel_id,
            room_number=room.number,
            previous_status=previous.value,
            status=room.status.value,
        )
        return room

    @property
    def total_room_count(self) -> int:
        with self._lock:
            return len(self._rooms)

    @property
    def available_room_count(self) -> int:
        return len(self.get_available_rooms())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hotel):
            return NotImplemented
        return self.hotel_id == other.hotel_id

    def __hash__(self) -> int:
        return hash(self.hotel_id)

    def __str__(self) -> str:
        return (
            f"Hotel(id={self.hotel_id}, name={self.name}, location={self.location}, "
            f"rating={self.star_rating}, rooms={self.total_room_count})"
        )
