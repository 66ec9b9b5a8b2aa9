"""Unit tests for statement generation and currency formatting.

Run with: pytest tests/test_statement.py -v
"""

from decimal import Decimal

import pytest

from billing.domain import Invoice, PricingConfig, build_statement_data, catalog_from_dict, generate_statement
from billing.domain.currency import format_usd, to_major_units, usd_formatter
from billing.domain.errors import MissingPlayError, UnknownGenreError
from billing.domain.models import Play
from billing.domain.value_objects import PlayId

EXPECTED_BIGCO = (
    "Statement for BigCo\n"
    "  Hamlet: $650.00 (55 seats)\n"
    "  As You Like It: $580.00 (35 seats)\n"
    "  Othello: $500.00 (40 seats)\n"
    "Amount owed is $1,730.00\n"
    "You earned 47 credits\n"
)


class TestCurrency:
    """Tests for currency scaling and formatting."""

    def test_to_major_units(self):
        assert to_major_units(173000, 100) == Decimal("1730")

    def test_format_usd_grouping_and_decimals(self):
        assert format_usd(Decimal("1234567.5")) == "$1,234,567.50"
        assert format_usd(Decimal("0")) == "$0.00"

    def test_to_major_units_is_exact_for_large_amounts(self):
        amount = 10**40 + 1
        assert to_major_units(amount, 100) == Decimal("1" + "0" * 38 + ".01")
        assert format_usd(to_major_units(amount, 100)).endswith(",000.01")

    def test_formatter_uses_percent_factor(self):
        assert usd_formatter(100)(65000) == "$650.00"
        assert usd_formatter(1000)(65000) == "$65.00"


class TestGenerateStatement:
    """Tests for generate_statement."""

    def test_reference_invoice(self, invoice, plays):
        assert generate_statement(invoice, plays) == EXPECTED_BIGCO

    def test_single_tragedy(self, plays):
        invoice = Invoice.from_dict({"customer": "A", "performances": [{"playId": "hamlet", "audience": 55}]})
        data = build_statement_data(invoice, plays)
        assert data.lines[0].amount == 65000
        assert data.lines[0].credits == 25

    def test_single_comedy(self, plays):
        invoice = Invoice.from_dict({"customer": "B", "performances": [{"playId": "as-like", "audience": 25}]})
        data = build_statement_data(invoice, plays)
        assert data.lines[0].amount == 50000
        assert data.lines[0].credits == 5
        assert "  As You Like It: $500.00 (25 seats)\n" in generate_statement(invoice, plays)

    def test_empty_invoice(self, plays):
        statement = generate_statement(Invoice(customer="Empty Co"), plays)
        assert statement == "Statement for Empty Co\nAmount owed is $0.00\nYou earned 0 credits\n"

    def test_missing_play_raises(self, plays):
        invoice = Invoice.from_dict({"customer": "D", "performances": [{"playId": "ghost", "audience": 10}]})
        with pytest.raises(MissingPlayError) as excinfo:
            generate_statement(invoice, plays)
        assert excinfo.value.play_id == "ghost"

    def test_unknown_genre_raises_even_after_valid_lines(self, plays):
        catalog = dict(plays)
        catalog["henry-v"] = Play(id=PlayId("henry-v"), name="Henry V", genre="history")
        invoice = Invoice.from_dict(
            {
                "customer": "E",
                "performances": [
                    {"playId": "hamlet", "audience": 55},
                    {"playId": "henry-v", "audience": 10},
                ],
            }
        )
        with pytest.raises(UnknownGenreError):
            generate_statement(invoice, catalog)

    def test_keeps_invoice_order(self, plays):
        invoice = Invoice.from_dict(
            {
                "customer": "F",
                "performances": [
                    {"playId": "othello", "audience": 1},
                    {"playId": "hamlet", "audience": 1},
                    {"playId": "othello", "audience": 2},
                ],
            }
        )
        data = build_statement_data(invoice, plays)
        assert [(line.play_id, line.audience) for line in data.lines] == [
            ("othello", 1),
            ("hamlet", 1),
            ("othello", 2),
        ]

    def test_totals_equal_sum_of_lines(self, invoice, plays):
        data = build_statement_data(invoice, plays)
        assert data.total_amount == sum(line.amount for line in data.lines) == 173000
        assert data.total_credits == sum(line.credits for line in data.lines) == 47

    def test_custom_formatter(self, invoice, plays):
        statement = generate_statement(invoice, plays, format_currency=lambda cents: f"{cents}c")
        assert "  Hamlet: 65000c (55 seats)\n" in statement
        assert "Amount owed is 173000c\n" in statement

    def test_custom_config(self, plays):
        config = PricingConfig(tragedy_base_amount=1000, tragedy_audience_threshold=100)
        invoice = Invoice.from_dict({"customer": "G", "performances": [{"playId": "hamlet", "audience": 55}]})
        assert "  Hamlet: $10.00 (55 seats)\n" in generate_statement(invoice, plays, config)

    def test_catalog_from_json_shape(self):
        catalog = catalog_from_dict({"tempest": {"name": "The Tempest", "genre": "comedy"}})
        invoice = Invoice.from_dict({"customer": "H", "performances": [{"playId": "tempest", "audience": 0}]})
        assert generate_statement(invoice, catalog).splitlines()[1] == "  The Tempest: $300.00 (0 seats)"

    def test_unused_unknown_genre_in_catalog_is_ignored(self):
        catalog = catalog_from_dict(
            {
                "hamlet": {"name": "Hamlet", "genre": "tragedy"},
                "henry-v": {"name": "Henry V", "genre": "history"},
            }
        )
        invoice = Invoice.from_dict({"customer": "I", "performances": [{"playId": "hamlet", "audience": 55}]})
        assert "Amount owed is $650.00\n" in generate_statement(invoice, catalog)

    def test_errors_follow_invoice_order(self):
        catalog = catalog_from_dict({"henry-v": {"name": "Henry V", "genre": "history"}})
        invoice = Invoice.from_dict(
            {
                "customer": "J",
                "performances": [
                    {"playId": "ghost", "audience": 10},
                    {"playId": "henry-v", "audience": 10},
                ],
            }
        )
        with pytest.raises(MissingPlayError):
            generate_statement(invoice, catalog)

        reordered = Invoice(customer="J", performances=tuple(reversed(invoice.performances)))
        with pytest.raises(UnknownGenreError) as excinfo:
            generate_statement(reordered, catalog)
        assert excinfo.value.genre == "history"

    def test_blank_play_id_is_missing_play(self, plays):
        invoice = Invoice.from_dict({"customer": "K", "performances": [{"playId": "  ", "audience": 3}]})
        with pytest.raises(MissingPlayError) as excinfo:
            generate_statement(invoice, plays)
        assert excinfo.value.play_id == ""
