"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from billing.domain import Invoice, Play


class BillingStore(ABC):
    """Interface for invoice and play catalog persistence."""

    @abstractmethod
    def get_invoice(self, invoice_id: int) -> Invoice | None:
        """Return an invoice with its performances in order, or None if not found."""
        ...

    @abstractmethod
    def get_plays(self, play_ids: Iterable[str]) -> dict[str, Play]:
        """Return the catalog entries for the given play ids.

        Ids with no stored play are left out of the result.
        """
        ...
