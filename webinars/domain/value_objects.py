"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self
from uuid import uuid4

from webinars.domain.errors import (
    InvalidSeatsError,
    WebinarNotEnoughSeatsError,
    WebinarTooManySeatsError,
)

MIN_SEATS = 1
MAX_SEATS = 1000


@dataclass(frozen=True)
class WebinarId:
    """Unique identifier for a Webinar."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("WebinarId cannot be empty")

    @classmethod
    def generate(cls) -> Self:
        return cls(value=str(uuid4()))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UserId:
    """Identifier of a user, such as a webinar organizer."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("UserId cannot be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Seats:
    """Seat count within [MIN_SEATS, MAX_SEATS]."""

    value: int

    def __post_init__(self) -> None:
        if self.value > MAX_SEATS:
            raise WebinarTooManySeatsError(MAX_SEATS)
        if self.value < MIN_SEATS:
            raise WebinarNotEnoughSeatsError(MIN_SEATS)


def parse_seats(raw: int | str) -> int:
    """Read a raw seat count from request input.

    Accepts ints and strings of decimal digits (optionally signed and
    padded with whitespace). Bounds are not checked here.

    Raises:
        InvalidSeatsError: If the input is not a whole number.
    """
    if isinstance(raw, bool):
        raise InvalidSeatsError()
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        digits = text[1:] if text[:1] in ("+", "-") else text
        if digits.isascii() and digits.isdigit():
            try:
                return int(text)
            except ValueError:
                # Longer than the interpreter will convert.
                raise InvalidSeatsError() from None
    raise InvalidSeatsError()
