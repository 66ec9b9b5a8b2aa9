"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from billing.domain import Invoice, catalog_from_dict


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def plays():
    return catalog_from_dict(
        {
            "hamlet": {"name": "Hamlet", "genre": "tragedy"},
            "as-like": {"name": "As You Like It", "genre": "comedy"},
            "othello": {"name": "Othello", "genre": "tragedy"},
        }
    )


@pytest.fixture
def invoice() -> Invoice:
    return Invoice.from_dict(
        {
            "customer": "BigCo",
            "performances": [
                {"playId": "hamlet", "audience": 55},
                {"playId": "as-like", "audience": 35},
                {"playId": "othello", "audience": 40},
            ],
        }
    )
