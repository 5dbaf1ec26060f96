"""Room type catalog.

The catalog is a fixed, process-wide lookup table. Capacity is
informational and is not enforced against bookings.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel


class RoomTypeInfo(BaseModel):
    """Display name and guest capacity of a room type."""

    display_name: str
    capacity: int

    class Config:
        frozen = True


class RoomType(str, Enum):
    """Room types offered by the hotel."""

    SINGLE = "single"
    DOUBLE = "double"
    SUITE = "suite"
    DELUXE = "deluxe"

    @property
    def display_name(self) -> str:
        return ROOM_CATALOG[self].display_name

    @property
    def capacity(self) -> int:
        return ROOM_CATALOG[self].capacity

    @classmethod
    def from_value(cls, value: "str | RoomType") -> "RoomType":
        """Parse a room type from its name or value, ignoring case.

        Args:
            value: Room type, or text such as "DOUBLE" / "double"

        Returns:
            Matching RoomType

        Raises:
            ValueError: If the text does not name a room type
        """
        if isinstance(value, RoomType):
            return value
        normalized = str(value).strip().lower()
        for room_type in cls:
            if normalized in (room_type.value, room_type.name.lower()):
                return room_type
        raise ValueError(f"Unknown room type: {value!r}")


ROOM_CATALOG: Mapping[RoomType, RoomTypeInfo] = MappingProxyType(
    {
        RoomType.SINGLE: RoomTypeInfo(display_name="Single Room", capacity=1),
        RoomType.DOUBLE: RoomTypeInfo(display_name="Double Room", capacity=2),
        RoomType.SUITE: RoomTypeInfo(display_name="Suite", capacity=4),
        RoomType.DELUXE: RoomTypeInfo(display_name="Deluxe Suite", capacity=2),
    }
)


def get_room_type_info(room_type: RoomType) -> RoomTypeInfo:
    """Look up catalog details for a room type."""
    return ROOM_CATALOG[room_type]
