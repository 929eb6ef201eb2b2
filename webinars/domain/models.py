"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in webinars/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from webinars.domain.errors import WebinarReduceSeatsError, WebinarTooManySeatsError
from webinars.domain.value_objects import MAX_SEATS, UserId, WebinarId


@dataclass(frozen=True)
class User:
    """Domain representation of the user acting on a webinar."""

    id: UserId
    email: str = ""


@dataclass
class Webinar:
    """Domain representation of a Webinar.

    Every field except ``seats`` is fixed once the webinar exists; seats
    only change through ``update_seats``.
    """

    id: WebinarId
    organizer_id: UserId
    title: str
    start_date: datetime
    end_date: datetime
    seats: int

    def is_organized_by(self, user: User) -> bool:
        return self.organizer_id == user.id

    def update_seats(self, new_seats: int) -> None:
        """Raise the seat count to ``new_seats``.

        Raises:
            WebinarReduceSeatsError: If new_seats is not above the current count.
            WebinarTooManySeatsError: If new_seats exceeds MAX_SEATS.
        """
        if new_seats <= self.seats:
            raise WebinarReduceSeatsError()
        if new_seats > MAX_SEATS:
            raise WebinarTooManySeatsError(MAX_SEATS)
        self.seats = new_seats
