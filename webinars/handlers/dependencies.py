"""Wiring between HTTP handlers and the services they call."""

from webinars.services import ChangeSeats, OrganizeWebinar
from webinars.stores.django_store import DjangoWebinarStore
from webinars.stores.interfaces import WebinarStore


def get_webinar_store() -> WebinarStore:
    return DjangoWebinarStore()


def get_organize_webinar() -> OrganizeWebinar:
    return OrganizeWebinar(get_webinar_store())


def get_change_seats() -> ChangeSeats:
    return ChangeSeats(get_webinar_store())
