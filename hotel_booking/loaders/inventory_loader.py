"""Loader building a hotel inventory from a plain payload."""

import json
from pathlib import Path
from typing import Any

from structlog import get_logger

from hotel_booking.exceptions import InvalidArgumentError
from hotel_booking.models import Hotel, Room, RoomStatus, RoomType
from hotel_booking.models.payload import InventoryPayload, RoomPayload

logger = get_logger(__name__)


class InventoryLoader:
    """Builds a Hotel with its rooms from an inventory payload."""

    @staticmethod
    def _build_room(room_data: dict[str, Any]) -> Room:
        """Convert one payload room entry into a Room.

        Args:
            room_data: Raw room dictionary from the payload

        Returns:
            Room with the requested type, price, description and status

        Raises:
            ValueError: If the entry is malformed
        """
        room_payload = RoomPayload(**room_data)
        status = RoomStatus(room_payload.status.strip().lower()) if room_payload.status else RoomStatus.AVAILABLE

        return Room(
            number=room_payload.number,
            room_type=RoomType.from_value(room_payload.type),
            price_per_night=room_payload.price_per_night,
            description=room_payload.description,
            status=status,
        )

    @staticmethod
    def load(payload: dict[str, Any] | InventoryPayload) -> Hotel:
        """Build a hotel from an inventory payload.

        Malformed or duplicate room entries are logged and skipped.

        Args:
            payload: Inventory payload (dict or InventoryPayload model)

        Returns:
            Hotel populated with the valid rooms of the payload

        Raises:
            InvalidArgumentError: If the hotel section is missing or malformed
        """
        if isinstance(payload, dict):
            try:
                payload = InventoryPayload(**payload)
            except Exception as e:
                logger.error("Failed to parse inventory payload", error=str(e))
                raise InvalidArgumentError(f"Invalid inventory payload format: {str(e)}") from e

        hotel_info = payload.hotel
        hotel = Hotel(
            hotel_id=hotel_info.hotel_id,
            name=hotel_info.name,
            location=hotel_info.location,
            star_rating=hotel_info.star_rating,
        )

        logger.info(
            "Loading hotel inventory",
            hotel_id=hotel.hotel_id,
            room_entry_count=len(payload.rooms),
        )

        skipped = 0
        for room_data in payload.rooms:
            try:
                room = InventoryLoader._build_room(room_data)
            except Exception as e:
                logger.warning(
                    "Failed to load room",
                    hotel_id=hotel.hotel_id,
                    room_number=room_data.get("number") if isinstance(room_data, dict) else None,
                    error=str(e),
                )
                skipped += 1
                continue

            if not hotel.add_room(room):
                skipped += 1

        logger.info(
            "Hotel inventory loaded",
            hotel_id=hotel.hotel_id,
            room_count=hotel.total_room_count,
            skipped=skipped,
        )
        return hotel

    @staticmethod
    def load_file(path: str | Path) -> Hotel:
        """Build a hotel from a JSON inventory file."""
        with open(path, encoding="utf-8") as f:
            return InventoryLoader.load(json.load(f))
