"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from webinars.domain import Webinar, WebinarId


class WebinarStore(ABC):
    """Interface for webinar persistence operations."""

    @abstractmethod
    def create(self, webinar: Webinar) -> None:
        """Persist a new webinar.

        Raises:
            WebinarAlreadyExistsError: If a webinar with the same ID exists.
        """
        ...

    @abstractmethod
    def find_by_id(self, webinar_id: WebinarId) -> Webinar | None:
        """Return a webinar by ID, or None if not found."""
        ...

    @abstractmethod
    def update(self, webinar: Webinar) -> None:
        """Overwrite the persisted state of an existing webinar.

        Raises:
            WebinarNotFoundError: If no webinar with that ID exists.
        """
        ...
