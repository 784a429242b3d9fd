"""
Notation Parser - canonical string -> TimeBucks value

Grammar (the whole input must match):

    notation    := symbol amount "@" date [ "[" method ":" date "]" ]
    symbol      := "CHF" | "C$" | "A$" | "$" | "€" | "£" | "¥"
    amount      := digit { digit | "," } [ "." digit digit ]
    date        := 4*digit [ "-" 2*digit [ "-" 2*digit ] ]
    method      := 1*upper [ ":" 1*(upper | digit) ]

Symbols are matched longest first. A method suffix is only taken when it
is itself followed by ":" (e.g. CUSTOM:FOO:1970), since the source date
always starts with ":".
"""

import logging
from decimal import Decimal, InvalidOperation

from pydantic import ValidationError

from timebucks.currency import SYMBOLS_LONGEST_FIRST, Currency, currency_for_symbol
from timebucks.exceptions import InvalidNotationError
from timebucks.models import ParsedNotation, TimeBucks

logger = logging.getLogger(__name__)

DIGITS = frozenset("0123456789")
UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


class _NotationSyntaxError(Exception):
    """Internal: scanner failure, converted to InvalidNotationError."""


class _Scanner:
    """Single forward pass over the input text."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self, literal: str) -> bool:
        return self.text.startswith(literal, self.pos)

    def expect(self, literal: str) -> None:
        if not self.peek(literal):
            raise _NotationSyntaxError(f"expected {literal!r} at position {self.pos}")
        self.pos += len(literal)

    def take_run(self, allowed: frozenset[str]) -> str:
        start = self.pos
        while not self.at_end() and self.text[self.pos] in allowed:
            self.pos += 1
        return self.text[start:self.pos]

    def take_digits(self, count: int, what: str) -> int:
        chunk = self.text[self.pos:self.pos + count]
        if len(chunk) != count or not all(c in DIGITS for c in chunk):
            raise _NotationSyntaxError(f"{what} must be {count} digits at position {self.pos}")
        self.pos += count
        return int(chunk)

    def take_symbol(self) -> Currency:
        for symbol in SYMBOLS_LONGEST_FIRST:
            if self.peek(symbol):
                currency = currency_for_symbol(symbol)
                if currency is None:
                    raise _NotationSyntaxError(f"unsupported currency symbol {symbol!r}")
                self.pos += len(symbol)
                return currency
        raise _NotationSyntaxError("missing or unsupported currency symbol")

    def take_amount(self) -> Decimal:
        if self.at_end() or self.text[self.pos] not in DIGITS:
            raise _NotationSyntaxError(f"amount must start with a digit at position {self.pos}")
        whole = self.take_run(DIGITS | {","})
        fraction = ""
        if self.peek("."):
            start = self.pos
            self.pos += 1
            self.take_digits(2, "amount fraction")
            fraction = self.text[start:self.pos]
        try:
            return Decimal(whole.replace(",", "") + fraction)
        except InvalidOperation as e:
            raise _NotationSyntaxError(f"invalid amount {whole + fraction!r}") from e

    def take_date(self) -> tuple[int, int | None, int | None]:
        year = self.take_digits(4, "year")
        month = day = None
        if self.peek("-"):
            self.pos += 1
            month = self.take_digits(2, "month")
            if not 1 <= month <= 12:
                raise _NotationSyntaxError(f"month {month:02d} out of range")
            if self.peek("-"):
                self.pos += 1
                day = self.take_digits(2, "day")
                if not 1 <= day <= 31:
                    raise _NotationSyntaxError(f"day {day:02d} out of range")
        return year, month, day

    def take_method(self) -> str:
        name = self.take_run(UPPER)
        if not name:
            raise _NotationSyntaxError(f"method must start with an uppercase letter at position {self.pos}")
        if self.peek(":"):
            end = self.pos + 1
            while end < len(self.text) and (self.text[end] in UPPER or self.text[end] in DIGITS):
                end += 1
            if end > self.pos + 1 and self.text.startswith(":", end):
                name += self.text[self.pos:end]
                self.pos = end
        return name


class NotationParser:
    """
    Decode TimeBucks notation.

    Every failure, whatever its cause, surfaces as InvalidNotationError
    carrying the offending input.
    """

    def parse_raw(self, notation: str) -> ParsedNotation:
        """Decode into plain fields without building a TimeBucks value."""
        if not isinstance(notation, str):
            raise InvalidNotationError(str(notation), reason="notation must be a string")

        scanner = _Scanner(notation)
        try:
            currency = scanner.take_symbol()
            amount = scanner.take_amount()
            scanner.expect("@")
            year, month, day = scanner.take_date()

            method = source_year = source_month = source_day = None
            if scanner.peek("["):
                scanner.pos += 1
                method = scanner.take_method()
                scanner.expect(":")
                source_year, source_month, source_day = scanner.take_date()
                scanner.expect("]")

            if not scanner.at_end():
                raise _NotationSyntaxError(f"unexpected trailing text at position {scanner.pos}")
        except _NotationSyntaxError as e:
            logger.debug(f"Rejected notation {notation!r}: {e}")
            raise InvalidNotationError(notation, reason=str(e)) from e

        return ParsedNotation(
            amount=amount,
            currency=currency,
            year=year,
            month=month,
            day=day,
            method=method,
            source_year=source_year,
            source_month=source_month,
            source_day=source_day
        )

    def parse(self, notation: str) -> TimeBucks:
        """
        Decode notation into a TimeBucks value.

        Returns:
            Natural value when there is no bracket, calculated otherwise.

        Raises:
            InvalidNotationError: If the text is not canonical notation
        """
        raw = self.parse_raw(notation)
        try:
            if raw.method is not None and raw.source_year is not None:
                return TimeBucks.create_calculated(
                    amount=raw.amount,
                    currency=raw.currency,
                    year=raw.year,
                    method=raw.method,
                    source_year=raw.source_year,
                    month=raw.month,
                    day=raw.day,
                    source_month=raw.source_month,
                    source_day=raw.source_day
                )
            return TimeBucks.create(raw.amount, raw.currency, raw.year, raw.month, raw.day)
        except ValidationError as e:
            raise InvalidNotationError(notation, reason=str(e)) from e

    def validate(self, notation: str) -> bool:
        """True iff parse() would succeed. Never raises."""
        try:
            self.parse(notation)
        except InvalidNotationError:
            return False
        return True


_default_parser = NotationParser()


def parse(notation: str) -> TimeBucks:
    return _default_parser.parse(notation)


def parse_raw(notation: str) -> ParsedNotation:
    return _default_parser.parse_raw(notation)


def validate(notation: str) -> bool:
    return _default_parser.validate(notation)
