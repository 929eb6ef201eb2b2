"""Change seats use case."""

import logging

from webinars.domain import WebinarId, parse_seats
from webinars.domain.errors import DomainError, WebinarNotFoundError, WebinarNotOrganizerError
from webinars.services.commands import ChangeSeatsCommand, ChangeSeatsResult
from webinars.stores.interfaces import WebinarStore

logger = logging.getLogger(__name__)


class ChangeSeats:
    """Service for raising the seat count of an existing webinar."""

    def __init__(self, store: WebinarStore) -> None:
        self._store = store

    def execute(self, command: ChangeSeatsCommand) -> ChangeSeatsResult:
        """Raise a webinar's seat count on behalf of its organizer.

        Checks run in a fixed order: existence, then ownership, then the
        seat rules enforced by the webinar itself.

        Raises:
            InvalidSeatsError: If the seat count is not a whole number.
            WebinarNotFoundError: If the webinar does not exist.
            WebinarNotOrganizerError: If the user does not organize the webinar.
            WebinarReduceSeatsError: If the seat count would not increase.
            WebinarTooManySeatsError: If the seat count is above 1000.
        """
        try:
            seats = parse_seats(command.seats)
            webinar = self._store.find_by_id(WebinarId(command.webinar_id))
            if webinar is None:
                raise WebinarNotFoundError()
            if not webinar.is_organized_by(command.user):
                raise WebinarNotOrganizerError()
            webinar.update_seats(seats)
        except DomainError as exc:
            logger.info("Seat change rejected for webinar %s: %s", command.webinar_id, exc.code.value)
            raise

        self._store.update(webinar)
        logger.info("Webinar %s now has %d seats", webinar.id, webinar.seats)
        return ChangeSeatsResult(webinar_id=webinar.id.value, seats=webinar.seats)
