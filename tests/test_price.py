"""Tests for wishlist_scraper/utils/price.py"""

import pytest

from wishlist_scraper.utils.price import (
    PRICE_PATTERNS,
    PriceMatch,
    detect_currency,
    normalize_currency,
    parse_amount,
    parse_price,
)


class TestParsePrice:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("$19.99", PriceMatch(19.99, "USD")),
            ("1,299.99 USD", PriceMatch(1299.99, "USD")),
            ("€99,99", PriceMatch(99.99, "EUR")),
            ("£50.00", PriceMatch(50.0, "GBP")),
        ],
    )
    def test_documented_formats(self, text, expected):
        assert parse_price(text) == expected

    def test_thousands_separators(self):
        assert parse_price("$1,299.99") == PriceMatch(1299.99, "USD")
        assert parse_price("€1.299,00") == PriceMatch(1299.0, "EUR")

    def test_usd_suffix_is_case_insensitive(self):
        assert parse_price("49.00 usd") == PriceMatch(49.0, "USD")

    def test_euro_symbol_after_amount(self):
        assert parse_price("99,99 €") == PriceMatch(99.99, "EUR")

    def test_euro_with_dot_decimal_falls_back_to_scan(self):
        assert parse_price("€19.99") == PriceMatch(19.99, "EUR")

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("99,99 EUR", PriceMatch(99.99, "EUR")),
            ("EUR 1.299,99", PriceMatch(1299.99, "EUR")),
            ("1.299,00 eur", PriceMatch(1299.0, "EUR")),
            ("EUR 19.99", PriceMatch(19.99, "EUR")),
            ("1,299.00 EUR", PriceMatch(1299.0, "EUR")),
        ],
    )
    def test_euro_iso_code(self, text, expected):
        assert parse_price(text) == expected

    def test_whitespace_is_ignored(self):
        assert parse_price("  $ 1,299.99\n") == PriceMatch(1299.99, "USD")

    def test_bare_amount_defaults_to_usd(self):
        assert parse_price("99.99") == PriceMatch(99.99, "USD")

    def test_bare_amount_uses_symbol_found_elsewhere(self):
        # "$" is not directly in front of the amount, so only the scan sees it.
        assert parse_price("Sale! $-off 99.99") == PriceMatch(99.99, "USD")

    def test_bare_amount_uses_iso_code_found_elsewhere(self):
        assert parse_price("Price 25.50 GBP incl. VAT") == PriceMatch(25.5, "GBP")

    @pytest.mark.parametrize("text", ["Call for price", "", None, "   ", "Out of stock"])
    def test_unparseable_text(self, text):
        assert parse_price(text) == PriceMatch(None, None)

    def test_pattern_table_order(self):
        names = [p.name for p in PRICE_PATTERNS]
        assert names[0] == "dollar-prefix"
        assert names[-1] == "bare-amount"
        assert names.index("usd-suffix") < names.index("euro-prefix") < names.index("pound-prefix")


class TestHelpers:
    def test_detect_currency_order(self):
        assert detect_currency("£ or $") == "USD"
        assert detect_currency("only €") == "EUR"
        assert detect_currency("no marker") == "USD"

    @pytest.mark.parametrize(
        "value, expected",
        [("19.99", 19.99), ("1,299.00", 1299.0), (" 5 ", 5.0), ("-3", None), ("nan", None),
         ("inf", None), ("free", None), ("", None), (None, None)],
    )
    def test_parse_amount(self, value, expected):
        assert parse_amount(value) == expected

    def test_normalize_currency(self):
        assert normalize_currency(" eur ") == "EUR"
        assert normalize_currency("dollars") is None
        assert normalize_currency(None) is None
