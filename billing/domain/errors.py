"""Domain error codes for the billing module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    UNKNOWN_GENRE = "UNKNOWN_GENRE"
    MISSING_PLAY = "MISSING_PLAY"
    INVOICE_NOT_FOUND = "INVOICE_NOT_FOUND"
    INVALID_INVOICE_ID = "INVALID_INVOICE_ID"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class UnknownGenreError(DomainError):
    """Raised when a play's genre is not one we know how to price."""

    def __init__(self, genre: object) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_GENRE,
            message=f"unknown type: {genre}",
        )
        object.__setattr__(self, "genre", genre)


class MissingPlayError(DomainError):
    """Raised when a performance references a play absent from the catalog."""

    def __init__(self, play_id: str) -> None:
        super().__init__(
            code=ErrorCode.MISSING_PLAY,
            message=f"Play not found in catalog: {play_id}",
        )
        object.__setattr__(self, "play_id", play_id)


class InvoiceNotFoundError(DomainError):
    """Raised when an invoice is not found."""

    def __init__(self, invoice_id: int) -> None:
        super().__init__(
            code=ErrorCode.INVOICE_NOT_FOUND,
            message="Invoice not found",
        )
        object.__setattr__(self, "invoice_id", invoice_id)


class InvalidInvoiceIdError(DomainError):
    """Raised when an invoice ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_INVOICE_ID,
            message="Invalid invoice ID format",
        )
