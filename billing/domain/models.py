"""Domain models for invoices and the play catalog.

These are pure domain objects with no persistence concerns.
Django ORM models are in billing/models.py (persistence layer).
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Self

from billing.domain.value_objects import Audience, Genre, PlayId, UnrecognizedGenre, read_genre


@dataclass(frozen=True)
class Play:
    """Domain representation of a Play in the catalog.

    An unrecognized genre is kept until the play is priced.
    """

    id: PlayId
    name: str
    genre: Genre | UnrecognizedGenre

    def __post_init__(self) -> None:
        if not self.id.value:
            raise ValueError("Play id cannot be empty")

    @classmethod
    def from_dict(cls, play_id: str, data: Mapping[str, Any]) -> Self:
        """Build a Play from its catalog entry ``{"name": ..., "genre": ...}``."""
        return cls(
            id=PlayId.from_string(play_id),
            name=data["name"],
            genre=read_genre(data["genre"]),
        )


@dataclass(frozen=True)
class Performance:
    """A single performance of a play on an invoice."""

    play_id: PlayId
    audience: Audience

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(
            play_id=PlayId.from_string(data["playId"]),
            audience=Audience(data["audience"]),
        )


@dataclass(frozen=True)
class Invoice:
    """Domain representation of an Invoice.

    Performance order is the order of lines on the statement.
    """

    customer: str
    performances: tuple[Performance, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(
            customer=data["customer"],
            performances=tuple(Performance.from_dict(p) for p in data.get("performances", ())),
        )


def catalog_from_dict(data: Mapping[str, Mapping[str, Any]]) -> dict[str, Play]:
    """Build a play catalog from ``{play_id: {"name": ..., "genre": ...}}``."""
    plays = (Play.from_dict(play_id, entry) for play_id, entry in data.items())
    return {str(play.id): play for play in plays}
