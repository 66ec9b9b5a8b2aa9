"""Pricing rules for performances.

Amounts are integer minor currency units (cents). All rates live on a
PricingConfig so that several rate tables can coexist.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Self

from billing.domain.errors import UnknownGenreError
from billing.domain.models import Performance, Play
from billing.domain.value_objects import Genre, UnrecognizedGenre


@dataclass(frozen=True)
class PricingConfig:
    """Rates and thresholds for a statement run."""

    tragedy_base_amount: int = 40000
    tragedy_audience_threshold: int = 30
    tragedy_over_base_capacity_per_person: int = 1000
    comedy_base_amount: int = 30000
    comedy_audience_threshold: int = 20
    comedy_over_base_capacity_amount: int = 10000
    comedy_over_base_capacity_per_person: int = 500
    comedy_amount_per_audience: int = 300
    base_volume_credit_threshold: int = 30
    comedy_extra_volume_factor: int = 5
    percent_factor: int = 100

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{field.name.upper()} must be an integer")
            if value <= 0:
                raise ValueError(f"{field.name.upper()} must be positive")

    @classmethod
    def from_mapping(cls, options: Mapping[str, int]) -> Self:
        """Build a config from upper-case option names, e.g. ``TRAGEDY_BASE_AMOUNT``.

        Options not given keep their defaults.
        """
        known = {field.name for field in fields(cls)}
        kwargs = {}
        for name, value in options.items():
            key = name.lower()
            if key not in known:
                raise ValueError(f"Unknown pricing option: {name}")
            kwargs[key] = value
        return cls(**kwargs)


DEFAULT_PRICING = PricingConfig()


def compute_amount(performance: Performance, play: Play, config: PricingConfig = DEFAULT_PRICING) -> int:
    """Return the amount owed for a performance, in cents.

    Raises:
        UnknownGenreError: If the play's genre has no pricing rule.
    """
    audience = performance.audience.value
    match play.genre:
        case Genre.TRAGEDY:
            result = config.tragedy_base_amount
            if audience > config.tragedy_audience_threshold:
                result += config.tragedy_over_base_capacity_per_person * (
                    audience - config.tragedy_audience_threshold
                )
        case Genre.COMEDY:
            result = config.comedy_base_amount
            if audience > config.comedy_audience_threshold:
                result += config.comedy_over_base_capacity_amount + config.comedy_over_base_capacity_per_person * (
                    audience - config.comedy_audience_threshold
                )
            result += config.comedy_amount_per_audience * audience
        case UnrecognizedGenre(value=raw):
            raise UnknownGenreError(raw)
        case unknown:
            raise UnknownGenreError(getattr(unknown, "value", unknown))
    return result


def compute_credits(performance: Performance, play: Play, config: PricingConfig = DEFAULT_PRICING) -> int:
    """Return the volume credits earned by a performance."""
    audience = performance.audience.value
    result = max(audience - config.base_volume_credit_threshold, 0)
    if play.genre is Genre.COMEDY:
        result += audience // config.comedy_extra_volume_factor
    return result
