"""Statement generation for an invoice.

Each performance is priced exactly once. The resulting StatementData feeds
both the per-line text and the totals, so the two cannot drift apart.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from billing.domain.currency import CurrencyFormatter, usd_formatter
from billing.domain.errors import MissingPlayError
from billing.domain.models import Invoice, Performance, Play
from billing.domain.pricing import DEFAULT_PRICING, PricingConfig, compute_amount, compute_credits
from billing.domain.value_objects import Genre


@dataclass(frozen=True)
class StatementLine:
    """Priced result for one performance."""

    play_id: str
    play_name: str
    genre: Genre
    audience: int
    amount: int
    credits: int


@dataclass(frozen=True)
class StatementData:
    """Everything needed to render a statement."""

    customer: str
    lines: tuple[StatementLine, ...]

    @property
    def total_amount(self) -> int:
        return sum(line.amount for line in self.lines)

    @property
    def total_credits(self) -> int:
        return sum(line.credits for line in self.lines)


def resolve_play(performance: Performance, catalog: Mapping[str, Play]) -> Play:
    """Look up the play a performance refers to.

    Raises:
        MissingPlayError: If the catalog has no such play.
    """
    play = catalog.get(str(performance.play_id))
    if play is None:
        raise MissingPlayError(str(performance.play_id))
    return play


def build_statement_data(
    invoice: Invoice,
    catalog: Mapping[str, Play],
    config: PricingConfig = DEFAULT_PRICING,
) -> StatementData:
    """Price every performance of the invoice, in invoice order.

    Raises:
        MissingPlayError: If a performance references an unknown play.
        UnknownGenreError: If a play's genre has no pricing rule.
    """
    lines = []
    for performance in invoice.performances:
        play = resolve_play(performance, catalog)
        lines.append(
            StatementLine(
                play_id=str(play.id),
                play_name=play.name,
                genre=play.genre,
                audience=performance.audience.value,
                amount=compute_amount(performance, play, config),
                credits=compute_credits(performance, play, config),
            )
        )
    return StatementData(customer=invoice.customer, lines=tuple(lines))


def render_plain_text(data: StatementData, format_currency: CurrencyFormatter) -> str:
    """Render statement data as newline-terminated text lines."""
    result = [f"Statement for {data.customer}\n"]
    for line in data.lines:
        result.append(f"  {line.play_name}: {format_currency(line.amount)} ({line.audience} seats)\n")
    result.append(f"Amount owed is {format_currency(data.total_amount)}\n")
    result.append(f"You earned {data.total_credits} credits\n")
    return "".join(result)


def generate_statement(
    invoice: Invoice,
    catalog: Mapping[str, Play],
    config: PricingConfig = DEFAULT_PRICING,
    format_currency: CurrencyFormatter | None = None,
) -> str:
    """Return the formatted text statement for an invoice.

    Nothing is rendered until every performance has been priced, so an error
    leaves no partial output.
    """
    data = build_statement_data(invoice, catalog, config)
    if format_currency is None:
        format_currency = usd_formatter(config.percent_factor)
    return render_plain_text(data, format_currency)
