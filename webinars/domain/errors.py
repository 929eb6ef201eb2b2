"""Domain error codes for the webinars module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    WEBINAR_NOT_FOUND = "WEBINAR_NOT_FOUND"
    WEBINAR_NOT_ORGANIZER = "WEBINAR_NOT_ORGANIZER"
    WEBINAR_REDUCE_SEATS = "WEBINAR_REDUCE_SEATS"
    WEBINAR_TOO_MANY_SEATS = "WEBINAR_TOO_MANY_SEATS"
    WEBINAR_NOT_ENOUGH_SEATS = "WEBINAR_NOT_ENOUGH_SEATS"
    WEBINAR_TOO_SOON = "WEBINAR_TOO_SOON"
    WEBINAR_ALREADY_EXISTS = "WEBINAR_ALREADY_EXISTS"
    INVALID_SEATS = "INVALID_SEATS"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class WebinarNotFoundError(DomainError):
    """Raised when a webinar is not found."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_NOT_FOUND,
            message="Webinar not found",
        )


class WebinarNotOrganizerError(DomainError):
    """Raised when the acting user does not organize the webinar."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_NOT_ORGANIZER,
            message="User is not allowed to update this webinar",
        )


class WebinarReduceSeatsError(DomainError):
    """Raised when a seat change does not increase the seat count."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_REDUCE_SEATS,
            message="You cannot reduce the number of seats",
        )


class WebinarTooManySeatsError(DomainError):
    """Raised when a seat count exceeds the maximum."""

    def __init__(self, maximum: int) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_TOO_MANY_SEATS,
            message=f"Webinar must have at most {maximum} seats",
        )


class WebinarNotEnoughSeatsError(DomainError):
    """Raised when a seat count is below the minimum."""

    def __init__(self, minimum: int) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_NOT_ENOUGH_SEATS,
            message=f"Webinar must have at least {minimum} seat",
        )


class WebinarTooSoonError(DomainError):
    """Raised when a webinar starts before the minimum lead time."""

    def __init__(self, lead_time_days: int) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_TOO_SOON,
            message=f"Webinar must be scheduled at least {lead_time_days} days in advance",
        )


class WebinarAlreadyExistsError(DomainError):
    """Raised when creating a webinar whose ID is already taken."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_ALREADY_EXISTS,
            message="Webinar already exists",
        )


class InvalidSeatsError(DomainError):
    """Raised when a seat count cannot be read as a whole number."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SEATS,
            message="Seats must be a whole number",
        )
