"""Django ORM implementation of the WebinarStore."""

import logging

from django.db import IntegrityError, transaction
from django.utils import timezone

from webinars import models
from webinars.domain import UserId, Webinar, WebinarId
from webinars.domain.errors import WebinarAlreadyExistsError, WebinarNotFoundError
from webinars.stores.interfaces import WebinarStore

logger = logging.getLogger(__name__)


class DjangoWebinarStore(WebinarStore):
    """Relational webinar store using Django ORM."""

    def create(self, webinar: Webinar) -> None:
        try:
            # Savepoint so a collision does not break an enclosing transaction.
            with transaction.atomic():
                models.Webinar.objects.create(
                    id=webinar.id.value,
                    organizer_id=webinar.organizer_id.value,
                    title=webinar.title,
                    start_date=webinar.start_date,
                    end_date=webinar.end_date,
                    seats=webinar.seats,
                )
        except IntegrityError as exc:
            if models.Webinar.objects.filter(pk=webinar.id.value).exists():
                raise WebinarAlreadyExistsError() from exc
            raise
        logger.debug("Inserted webinar %s", webinar.id)

    def find_by_id(self, webinar_id: WebinarId) -> Webinar | None:
        row = models.Webinar.objects.filter(pk=webinar_id.value).first()
        if row is None:
            return None
        return self._to_domain(row)

    def update(self, webinar: Webinar) -> None:
        updated = models.Webinar.objects.filter(pk=webinar.id.value).update(
            title=webinar.title,
            start_date=webinar.start_date,
            end_date=webinar.end_date,
            seats=webinar.seats,
            updated_at=timezone.now(),
        )
        if not updated:
            raise WebinarNotFoundError()
        logger.debug("Updated webinar %s", webinar.id)

    @staticmethod
    def _to_domain(row: models.Webinar) -> Webinar:
        return Webinar(
            id=WebinarId(row.id),
            organizer_id=UserId(row.organizer_id),
            title=row.title,
            start_date=row.start_date,
            end_date=row.end_date,
            seats=row.seats,
        )
