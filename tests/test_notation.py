"""
Notation Grammar Unit Tests

parse / parse_raw / validate and the canonical formatter.
"""

import pytest
from decimal import Decimal

from timebucks.currency import Currency
from timebucks.exceptions import InvalidNotationError
from timebucks.models import TimeBucks
from timebucks.notation import (
    NotationParser,
    format_amount,
    format_date,
    format_notation,
    parse,
    parse_raw,
    validate,
)


CANONICAL = [
    "$1,000@1970",
    "$8,000@2024[CPI:1970]",
    "$100@1970-06-15",
    "$800@2024-12-25[CPI:1970-06-15]",
    "$0@2000",
    "$0.05@1999",
    "$1,234.56@2001-03",
    "€1,000,000@2010",
    "£50@1950[WAGE:1913]",
    "¥10,000@1990",
    "C$99.99@2020-02[GOLD:1980-07]",
    "A$12@2021-01-31",
    "CHF250@2015[GOLD:2000-01-01]",
    "$200@2024[CUSTOM:DOUBLE:1970]",
    "$1@2024[CUSTOM:X1:1970-01]",
]

INVALID = [
    "invalid notation",
    "$100",
    "100@1970",
    "₹100@1970",
    "",
    "$@1970",
    "$,100@1970",
    "$1.5@1970",
    "$1.505@1970",
    "$100@70",
    "$100@19700",
    "$100@1970-6",
    "$100@1970-13",
    "$100@1970-00",
    "$100@1970-06-32",
    "$100@1970-06-15-01",
    "$100@1970[CPI]",
    "$100@1970[cpi:1970]",
    "$100@1970[CPI:1970",
    "$100@1970[:1970]",
    "$100@1970[CPI:1970]x",
    " $100@1970",
    "$100@1970 ",
    "$-100@1970",
    "US$100@1970",
    "$100@1970[CPI:1970-13]",
]


class TestRoundTrip:
    """format(parse(s)) == s for canonical strings."""

    @pytest.mark.parametrize("notation", CANONICAL)
    def test_round_trip(self, notation):
        assert parse(notation).format() == notation

    @pytest.mark.parametrize("notation", CANONICAL)
    def test_str_matches_format(self, notation):
        value = parse(notation)

        assert str(value) == value.format()

    def test_non_canonical_separators_normalised(self):
        """Misplaced separators are accepted and rendered canonically."""
        assert parse("$1,00,0@1970").format() == "$1,000@1970"
        assert parse("$1000@1970").format() == "$1,000@1970"

    def test_zero_cents_dropped(self):
        assert parse("$1,000.00@1970").format() == "$1,000@1970"


class TestParse:
    """Decoding into TimeBucks values."""

    def setup_method(self):
        self.parser = NotationParser()

    def test_natural(self):
        value = self.parser.parse("$1,000@1970")

        assert value == TimeBucks.create(1000, "USD", 1970)
        assert value.is_natural()

    def test_calculated(self):
        value = self.parser.parse("$8,000@2024[CPI:1970]")

        assert value.is_calculated()
        assert value.amount == Decimal("8000")
        assert value.year == 2024
        assert value.method == "CPI"
        assert value.source_year == 1970
        assert value.source_month is None

    def test_full_dates(self):
        value = self.parser.parse("$800@2024-12-25[CPI:1970-06-15]")

        assert (value.year, value.month, value.day) == (2024, 12, 25)
        assert (value.source_year, value.source_month, value.source_day) == (1970, 6, 15)

    def test_decimal_amount_exact(self):
        value = self.parser.parse("$1,234.56@2001")

        assert value.amount == Decimal("1234.56")
        assert isinstance(value.amount, Decimal)

    @pytest.mark.parametrize("symbol,currency", [
        ("$", Currency.USD),
        ("€", Currency.EUR),
        ("£", Currency.GBP),
        ("¥", Currency.JPY),
        ("C$", Currency.CAD),
        ("A$", Currency.AUD),
        ("CHF", Currency.CHF),
    ])
    def test_symbols(self, symbol, currency):
        assert self.parser.parse(f"{symbol}10@2000").currency == currency

    def test_longest_symbol_wins(self):
        """C$ is Canadian dollars, not a stray C before US dollars."""
        assert self.parser.parse("C$5@2000").currency == Currency.CAD
        assert self.parser.parse("A$5@2000").currency == Currency.AUD

    def test_custom_method_with_suffix(self):
        value = self.parser.parse("$200@2024[CUSTOM:DOUBLE:1970]")

        assert value.method == "CUSTOM:DOUBLE"
        assert value.source_year == 1970

    def test_numeric_method_suffix(self):
        value = self.parser.parse("$1@2024[CUSTOM:1999:1970-01]")

        assert value.method == "CUSTOM:1999"
        assert value.source_year == 1970
        assert value.source_month == 1


class TestInvalidNotation:
    """Every failure is an InvalidNotationError carrying the input."""

    @pytest.mark.parametrize("notation", INVALID)
    def test_parse_rejects(self, notation):
        with pytest.raises(InvalidNotationError) as exc_info:
            parse(notation)

        assert exc_info.value.notation == notation
        assert str(exc_info.value) == f"Invalid TimeBucks notation: {notation}"

    @pytest.mark.parametrize("notation", INVALID)
    def test_validate_false(self, notation):
        assert validate(notation) is False

    @pytest.mark.parametrize("notation", INVALID)
    def test_parse_raw_rejects(self, notation):
        with pytest.raises(InvalidNotationError):
            parse_raw(notation)

    def test_reason_recorded(self):
        with pytest.raises(InvalidNotationError) as exc_info:
            parse("₹100@1970")

        assert exc_info.value.reason
        assert exc_info.value.error_type == "INVALID_NOTATION"

    @pytest.mark.parametrize("notation", [None, 100, b"$100@1970"])
    def test_non_string_input(self, notation):
        assert validate(notation) is False
        with pytest.raises(InvalidNotationError):
            parse(notation)


class TestValidate:

    @pytest.mark.parametrize("notation", CANONICAL)
    def test_validate_true(self, notation):
        assert validate(notation) is True


class TestParseRaw:
    """Field-only decoding."""

    def test_natural_fields(self):
        raw = parse_raw("£1,500.25@1950-04")

        assert raw.amount == Decimal("1500.25")
        assert raw.currency == Currency.GBP
        assert raw.year == 1950
        assert raw.month == 4
        assert raw.day is None
        assert raw.method is None
        assert raw.source_year is None

    def test_calculated_fields(self):
        raw = parse_raw("$800@2024-12-25[CPI:1970-06-15]")

        assert raw.method == "CPI"
        assert (raw.source_year, raw.source_month, raw.source_day) == (1970, 6, 15)

    def test_matches_parse(self):
        notation = "C$99.99@2020-02[GOLD:1980-07]"
        raw = parse_raw(notation)
        value = parse(notation)

        assert raw.amount == value.amount
        assert raw.currency == value.currency
        assert raw.method == value.method
        assert raw.source_month == value.source_month


class TestFormatter:
    """Canonical encoding."""

    @pytest.mark.parametrize("amount,expected", [
        (Decimal("0"), "0"),
        (Decimal("-0"), "0"),
        (Decimal("999"), "999"),
        (Decimal("1000"), "1,000"),
        (Decimal("8000.00"), "8,000"),
        (Decimal("1234.5"), "1,234.50"),
        (Decimal("1234567.891"), "1,234,567.89"),
        (Decimal("0.125"), "0.13"),
        (Decimal("-1500"), "-1,500"),
        (Decimal("-799.74"), "-799.74"),
        (1000, "1,000"),
        ("12.3", "12.30"),
        (Decimal("0.004"), "0"),
        (Decimal("-0.004"), "0"),
        (Decimal("999.999"), "1,000"),
    ])
    def test_format_amount(self, amount, expected):
        assert format_amount(amount) == expected

    def test_format_date(self):
        assert format_date(1970) == "1970"
        assert format_date(1970, 6) == "1970-06"
        assert format_date(1970, 6, 5) == "1970-06-05"

    def test_cny_uses_yen_sign(self):
        value = TimeBucks.create(100, Currency.CNY, 2000)

        assert format_notation(value) == "¥100@2000"

    def test_sub_cent_amount_formats_canonically(self):
        """Amounts that round to zero format as 0, which parses and formats unchanged."""
        text = format_notation(TimeBucks.create(Decimal("0.004"), Currency.USD, 2000))

        assert text == "$0@2000"
        assert format_notation(parse(text)) == text

    def test_calculated_from_transform(self):
        value = TimeBucks.create(100, "USD", 1970, 6, 15).transform("CPI", 2024, 12, 25)

        assert value.format() == "$799.74@2024-12-25[CPI:1970-06-15]"
        assert parse(value.format()) == value

    def test_transformed_value_round_trips(self):
        value = TimeBucks.create(1000, "USD", 1970).transform("GOLD", 2024)

        assert parse(value.format()) == value
