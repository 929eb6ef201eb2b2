"""In-memory implementation of the WebinarStore, used by unit tests."""

import logging
import threading
from collections.abc import Iterable
from dataclasses import replace

from webinars.domain import Webinar, WebinarId
from webinars.domain.errors import WebinarAlreadyExistsError, WebinarNotFoundError
from webinars.stores.interfaces import WebinarStore

logger = logging.getLogger(__name__)


class InMemoryWebinarStore(WebinarStore):
    """Dict-backed webinar store seeded at construction.

    Webinars are copied on the way in and out, so callers never hold a
    reference to stored state.
    """

    def __init__(self, webinars: Iterable[Webinar] = ()) -> None:
        self._lock = threading.Lock()
        self._webinars: dict[WebinarId, Webinar] = {
            webinar.id: replace(webinar) for webinar in webinars
        }

    def create(self, webinar: Webinar) -> None:
        with self._lock:
            if webinar.id in self._webinars:
                raise WebinarAlreadyExistsError()
            self._webinars[webinar.id] = replace(webinar)
        logger.debug("Stored webinar %s in memory", webinar.id)

    def find_by_id(self, webinar_id: WebinarId) -> Webinar | None:
        with self._lock:
            webinar = self._webinars.get(webinar_id)
        return replace(webinar) if webinar is not None else None

    def update(self, webinar: Webinar) -> None:
        with self._lock:
            if webinar.id not in self._webinars:
                raise WebinarNotFoundError()
            self._webinars[webinar.id] = replace(webinar)
        logger.debug("Updated webinar %s in memory", webinar.id)

    def snapshot(self) -> list[Webinar]:
        """Return copies of every stored webinar."""
        with self._lock:
            return [replace(webinar) for webinar in self._webinars.values()]
