"""Currency display helpers.

Scaling from minor units and formatting are kept apart so either can be
swapped without touching the pricing rules.
"""

from collections.abc import Callable
from decimal import Decimal, localcontext

CurrencyFormatter = Callable[[int], str]


def to_major_units(amount: int, percent_factor: int) -> Decimal:
    """Scale an amount in minor units (cents) to major units (dollars).

    Precision grows with the amount, so integer amounts of any size scale
    exactly whenever the factor divides into a finite decimal.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(str(abs(amount))) + len(str(percent_factor)) + 2)
        return Decimal(amount) / Decimal(percent_factor)


def format_usd(amount: Decimal) -> str:
    """Format a dollar amount as ``$1,234.50``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def usd_formatter(percent_factor: int) -> CurrencyFormatter:
    """Return a formatter turning an amount in cents into a US dollar string."""

    def usdollar(amount: int) -> str:
        return format_usd(to_major_units(amount, percent_factor))

    return usdollar
