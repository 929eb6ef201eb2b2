"""Organize webinar use case.

Validates scheduling and seat rules, then persists a brand new webinar.
Nothing is written unless every rule passes.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from webinars.domain import Seats, UserId, Webinar, WebinarId, parse_seats
from webinars.domain.errors import DomainError, WebinarTooSoonError
from webinars.services.commands import OrganizeWebinarCommand, OrganizeWebinarResult
from webinars.stores.interfaces import WebinarStore

logger = logging.getLogger(__name__)

MIN_LEAD_TIME_DAYS = 3


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_aware(value: datetime) -> datetime:
    """Read naive datetimes as UTC."""
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class OrganizeWebinar:
    """Service for scheduling new webinars."""

    def __init__(
        self,
        store: WebinarStore,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], WebinarId] = WebinarId.generate,
    ) -> None:
        self._store = store
        self._clock = clock
        self._id_factory = id_factory

    def execute(self, command: OrganizeWebinarCommand) -> OrganizeWebinarResult:
        """Create a webinar and return its new ID.

        Raises:
            InvalidSeatsError: If the seat count is not a whole number.
            WebinarTooSoonError: If the webinar starts less than 3 days from now.
            WebinarTooManySeatsError: If the seat count is above 1000.
            WebinarNotEnoughSeatsError: If the seat count is below 1.
        """
        start_date = ensure_aware(command.start_date)
        end_date = ensure_aware(command.end_date)
        try:
            seats = parse_seats(command.seats)
            self._check_lead_time(start_date)
            Seats(seats)
        except DomainError as exc:
            logger.info("Webinar rejected for organizer %s: %s", command.organizer_id, exc.code.value)
            raise

        webinar = Webinar(
            id=self._id_factory(),
            organizer_id=UserId(command.organizer_id),
            title=command.title,
            start_date=start_date,
            end_date=end_date,
            seats=seats,
        )
        self._store.create(webinar)
        logger.info("Webinar %s organized by %s", webinar.id, webinar.organizer_id)
        return OrganizeWebinarResult(id=webinar.id.value)

    def _check_lead_time(self, start_date: datetime) -> None:
        if start_date - self._clock() < timedelta(days=MIN_LEAD_TIME_DAYS):
            raise WebinarTooSoonError(MIN_LEAD_TIME_DAYS)
