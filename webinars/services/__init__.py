from webinars.services.change_seats import ChangeSeats
from webinars.services.commands import (
    ChangeSeatsCommand,
    ChangeSeatsResult,
    OrganizeWebinarCommand,
    OrganizeWebinarResult,
)
from webinars.services.organize_webinar import OrganizeWebinar

__all__ = [
    "ChangeSeats",
    "ChangeSeatsCommand",
    "ChangeSeatsResult",
    "OrganizeWebinar",
    "OrganizeWebinarCommand",
    "OrganizeWebinarResult",
]
