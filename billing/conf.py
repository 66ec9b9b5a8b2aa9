"""Pricing configuration sourced from Django settings."""

from django.conf import settings

from billing.domain.pricing import PricingConfig


def get_pricing_config() -> PricingConfig:
    """Return the PricingConfig built from ``settings.THEATER_PRICING``."""
    return PricingConfig.from_mapping(getattr(settings, "THEATER_PRICING", {}))


def get_statement_cache_timeout() -> int:
    return getattr(settings, "STATEMENT_CACHE_TIMEOUT", 300)
