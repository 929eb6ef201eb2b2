from webinars.domain.models import User, Webinar
from webinars.domain.value_objects import (
    MAX_SEATS,
    MIN_SEATS,
    Seats,
    UserId,
    WebinarId,
    parse_seats,
)

__all__ = [
    "User",
    "Webinar",
    "UserId",
    "WebinarId",
    "Seats",
    "MIN_SEATS",
    "MAX_SEATS",
    "parse_seats",
]
