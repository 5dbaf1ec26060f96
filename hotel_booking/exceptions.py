"""Exception hierarchy for the hotel booking engine."""

from pydantic import ValidationError


class HotelError(Exception):
    """Base exception for hotel booking errors."""

    pass


class InvalidArgumentError(HotelError, ValueError):
    """Raised when an operation receives malformed input."""

    pass


class InvalidRoomError(InvalidArgumentError):
    """Raised when room details are malformed."""

    pass


class InvalidBookingError(HotelError):
    """Raised when a booking request can never be satisfied as given."""

    pass


class RoomNotAvailableError(HotelError):
    """Raised when a room cannot be booked for the requested dates."""

    pass


def validation_message(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into a single readable message.

    Args:
        error: Validation error raised by a model

    Returns:
        Messages of all failed fields joined with "; "
    """
    messages = []
    for item in error.errors():
        message = str(item.get("msg", ""))
        # Custom validators surface as "Value error, <message>"
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        location = ".".join(str(part) for part in item.get("loc", ()))
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages)
