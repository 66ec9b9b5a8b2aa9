from billing.domain.models import Invoice, Performance, Play, catalog_from_dict
from billing.domain.pricing import DEFAULT_PRICING, PricingConfig, compute_amount, compute_credits
from billing.domain.statement import StatementData, StatementLine, build_statement_data, generate_statement
from billing.domain.value_objects import Audience, Genre, PlayId, UnrecognizedGenre

__all__ = [
    "Invoice",
    "Performance",
    "Play",
    "catalog_from_dict",
    "PlayId",
    "Audience",
    "Genre",
    "UnrecognizedGenre",
    "PricingConfig",
    "DEFAULT_PRICING",
    "compute_amount",
    "compute_credits",
    "StatementData",
    "StatementLine",
    "build_statement_data",
    "generate_statement",
]
