"""Inputs and outputs of the webinar use cases."""

from dataclasses import dataclass
from datetime import datetime

from webinars.domain import User


@dataclass(frozen=True)
class OrganizeWebinarCommand:
    organizer_id: str
    title: str
    seats: int | str
    start_date: datetime
    end_date: datetime


@dataclass(frozen=True)
class OrganizeWebinarResult:
    id: str


@dataclass(frozen=True)
class ChangeSeatsCommand:
    user: User
    webinar_id: str
    seats: int | str


@dataclass(frozen=True)
class ChangeSeatsResult:
    webinar_id: str
    seats: int
    message: str = "Seats updated"
