"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self

from billing.domain.errors import UnknownGenreError


@dataclass(frozen=True)
class PlayId:
    """Catalog key of a Play.

    Blank ids are allowed here: on a performance they simply resolve to
    nothing in the catalog. Play itself refuses a blank id.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValueError("PlayId must be a string")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=value.strip())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Audience:
    """Non-negative integer count of attendees."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Audience must be an integer")
        if self.value < 0:
            raise ValueError("Audience cannot be negative")


class Genre(Enum):
    """Play genres we know how to price."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def parse(cls, value: str) -> Self:
        """Return the genre for a wire value.

        Raises:
            UnknownGenreError: If the value is not a recognized genre.
        """
        try:
            return cls(value)
        except ValueError:
            raise UnknownGenreError(value) from None


@dataclass(frozen=True)
class UnrecognizedGenre:
    """Genre read from catalog data that has no pricing rule.

    Kept as data so the error is raised only when a play using it is priced.
    """

    value: str


def read_genre(value: str) -> Genre | UnrecognizedGenre:
    """Return the genre for a wire value, keeping unknown values as-is."""
    try:
        return Genre(value)
    except ValueError:
        return UnrecognizedGenre(value)
