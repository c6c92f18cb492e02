from __future__ import annotations

import abc
import datetime
import decimal
import fractions
from typing import Any, ClassVar, Optional, Type

from babel import dates as babel_dates
from dateutil import parser as dateparser

from schemafacets import errors, numeric, util

__all__ = (
    "CONVERTERS",
    "AbstractConverter",
    "DateConverter",
    "DateTimeConverter",
    "DecimalConverter",
    "FloatConverter",
    "FractionConverter",
    "IntConverter",
    "get_converter",
    "register_converter",
)


class AbstractConverter(abc.ABC):
    """Converts the limits of an operand type to and from other representations.

    Sub-classes must implement `from_string`. Conversion to `decimal.Decimal` is
    optional; a converter which can't express its type as a decimal number should
    leave `to_decimal` alone.
    """

    type: ClassVar[Type[Any]]

    def __repr__(self):
        return f"<{self.__class__.__name__}(type={util.get_name(self.type)})>"

    @abc.abstractmethod
    def from_string(self, text: str, culture: str) -> Any:
        ...

    def to_decimal(self, value: Any, culture: str) -> decimal.Decimal:
        raise errors.ConversionNotSupportedError(self.type, decimal.Decimal)


class DecimalConverter(AbstractConverter):
    type = decimal.Decimal

    def from_string(self, text: str, culture: str) -> decimal.Decimal:
        return numeric.parse_decimal(text, culture)

    def to_decimal(self, value: Any, culture: str) -> decimal.Decimal:
        if isinstance(value, str):
            return self.from_string(value, culture)
        if isinstance(value, float):
            return decimal.Decimal(repr(value))
        return decimal.Decimal(value)


class IntConverter(DecimalConverter):
    type = int

    def from_string(self, text: str, culture: str) -> int:
        value = numeric.parse_decimal(text, culture, allow_grouping=False)
        if value != value.to_integral_value():
            raise errors.AnnotationValueError(f"{text!r} is not a whole number.")
        return int(value)


class FloatConverter(DecimalConverter):
    type = float

    def from_string(self, text: str, culture: str) -> float:
        return float(numeric.parse_decimal(text, culture, allow_grouping=False))


class FractionConverter(AbstractConverter):
    """Limits written as `"n/d"` or as a decimal literal in the given culture."""

    type = fractions.Fraction

    def from_string(self, text: str, culture: str) -> fractions.Fraction:
        numerator, sep, denominator = text.partition("/")
        if not sep:
            return fractions.Fraction(numeric.parse_decimal(text, culture))
        try:
            return fractions.Fraction(int(numerator), int(denominator))
        except (ValueError, ZeroDivisionError) as e:
            raise errors.AnnotationValueError(
                f"Couldn't parse {text!r} as a fraction."
            ) from e

    def to_decimal(self, value: Any, culture: str) -> decimal.Decimal:
        if isinstance(value, str):
            value = self.from_string(value, culture)
        value = fractions.Fraction(value)
        return decimal.Decimal(value.numerator) / decimal.Decimal(value.denominator)


class DateTimeConverter(AbstractConverter):
    """Date-times are parsed leniently; day-first ordering follows the culture."""

    type = datetime.datetime

    def from_string(self, text: str, culture: str) -> datetime.datetime:
        try:
            return dateparser.parse(text, dayfirst=_is_dayfirst(culture))
        except (ValueError, OverflowError) as e:
            raise errors.AnnotationValueError(
                f"Couldn't parse {text!r} as a date-time in culture {culture!r}."
            ) from e


class DateConverter(DateTimeConverter):
    type = datetime.date

    def from_string(self, text: str, culture: str) -> datetime.date:
        return super().from_string(text, culture).date()


def _is_dayfirst(culture: str) -> bool:
    if culture == numeric.INVARIANT_CULTURE:
        return False
    pattern = babel_dates.get_date_format("short", locale=culture).pattern
    return pattern.lstrip().lower().startswith("d")


CONVERTERS: util.TypeMap[AbstractConverter] = util.TypeMap(
    {
        decimal.Decimal: DecimalConverter(),
        float: FloatConverter(),
        int: IntConverter(),
        fractions.Fraction: FractionConverter(),
        datetime.datetime: DateTimeConverter(),
        datetime.date: DateConverter(),
    }
)


def get_converter(t: Type[Any]) -> Optional[AbstractConverter]:
    """Get the converter for the operand type `t`, or its nearest parent."""
    return CONVERTERS.get_by_parent(t)


def register_converter(t: Type[Any], converter: AbstractConverter):
    """Register a converter for a custom operand type."""
    CONVERTERS[t] = converter
