"""Statement service - orchestrates loading and pricing.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging

from billing.domain import DEFAULT_PRICING, PricingConfig, StatementData, build_statement_data
from billing.domain.currency import CurrencyFormatter, usd_formatter
from billing.domain.errors import (
    InvalidInvoiceIdError,
    InvoiceNotFoundError,
    MissingPlayError,
    UnknownGenreError,
)
from billing.domain.statement import render_plain_text
from billing.stores.interfaces import BillingStore

logger = logging.getLogger(__name__)


def parse_invoice_id(invoice_id: str | int) -> int:
    """Return the invoice id as a positive integer.

    Raises:
        InvalidInvoiceIdError: If the value is not a positive integer.
    """
    if isinstance(invoice_id, bool):
        raise InvalidInvoiceIdError()
    try:
        value = int(invoice_id)
    except (TypeError, ValueError):
        raise InvalidInvoiceIdError() from None
    if value <= 0:
        raise InvalidInvoiceIdError()
    return value


class StatementService:
    """Service for invoice statement operations."""

    def __init__(
        self,
        store: BillingStore,
        config: PricingConfig = DEFAULT_PRICING,
        format_currency: CurrencyFormatter | None = None,
    ) -> None:
        self._store = store
        self._config = config
        self._format_currency = format_currency or usd_formatter(config.percent_factor)

    def get_statement_data(self, invoice_id: str | int) -> StatementData:
        """Return the priced statement for an invoice.

        Raises:
            InvalidInvoiceIdError: If the invoice_id is not a positive integer.
            InvoiceNotFoundError: If the invoice does not exist.
            MissingPlayError: If a performance references an unknown play.
            UnknownGenreError: If a play's genre has no pricing rule.
        """
        pk = parse_invoice_id(invoice_id)
        invoice = self._store.get_invoice(pk)
        if invoice is None:
            raise InvoiceNotFoundError(pk)

        try:
            catalog = self._store.get_plays(str(p.play_id) for p in invoice.performances)
            data = build_statement_data(invoice, catalog, self._config)
        except (MissingPlayError, UnknownGenreError) as exc:
            logger.warning("Cannot price invoice %s: %s", pk, exc)
            raise

        logger.info(
            "Generated statement for invoice %s: %d performances, total %d",
            pk,
            len(data.lines),
            data.total_amount,
        )
        return data

    def render(self, data: StatementData) -> str:
        """Render statement data as plain text."""
        return render_plain_text(data, self._format_currency)

    def get_statement(self, invoice_id: str | int) -> str:
        """Return the formatted text statement for an invoice."""
        return self.render(self.get_statement_data(invoice_id))
