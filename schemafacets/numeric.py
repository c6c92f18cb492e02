from __future__ import annotations

import decimal
from typing import Union

from babel import numbers as babel_numbers

from schemafacets import errors

__all__ = (
    "INVARIANT_CULTURE",
    "NumberT",
    "STANDARD_NUMBER_TYPES",
    "is_finite",
    "is_standard_number",
    "parse_decimal",
    "to_invariant_string",
)


INVARIANT_CULTURE = "invariant"
"""The culture-independent format: `.` as the decimal separator, no grouping."""

NumberT = Union[int, float, decimal.Decimal]
STANDARD_NUMBER_TYPES = (int, float, decimal.Decimal)

# Beyond this magnitude floats are written in exponent form.
_MAX_FIXED_FLOAT = 1e15


def is_standard_number(value) -> bool:
    return isinstance(value, STANDARD_NUMBER_TYPES) and not isinstance(value, bool)


def is_finite(value: NumberT) -> bool:
    if isinstance(value, decimal.Decimal):
        return value.is_finite()
    return not (value != value or value in (float("inf"), float("-inf")))


def to_invariant_string(value: NumberT) -> str:
    """Write a number as a decimal string which does not depend on any locale.

    Examples
    --------
    >>> import decimal
    >>> to_invariant_string(10)
    '10'
    >>> to_invariant_string(decimal.Decimal("1.50"))
    '1.50'
    >>> to_invariant_string(decimal.Decimal("1E+2"))
    '100'
    >>> to_invariant_string(2.0)
    '2'
    >>> to_invariant_string(1e15)
    '1E+15'
    >>> to_invariant_string(1.7976931348623157e308)
    '1.7976931348623157E+308'
    """
    if not is_standard_number(value):
        raise errors.AnnotationValueError(
            f"Can't write {value!r} as a number: "
            f"expected one of {[t.__name__ for t in STANDARD_NUMBER_TYPES]}."
        )
    if isinstance(value, int):
        return str(value)
    if not is_finite(value):
        raise errors.AnnotationValueError(f"Can't write non-finite {value!r}.")
    if isinstance(value, decimal.Decimal):
        if value.is_zero():
            value = value.copy_abs()
        return format(value, "f")
    if abs(value) >= _MAX_FIXED_FLOAT:
        return format(decimal.Decimal(repr(value)).normalize(), "E")
    if value.is_integer():
        return str(int(value))
    return repr(value).upper()


def parse_decimal(
    text: str, culture: str, *, allow_grouping: bool = True
) -> decimal.Decimal:
    """Parse `text` as a decimal number using the conventions of `culture`.

    The invariant culture accepts a plain decimal literal with `.` as the separator.
    Any other culture is handed to Babel, so `"1.234,5"` parses as `1234.5` in `de_DE`.
    Pass `allow_grouping=False` to reject the culture's group separator.

    Raises
    ------
    AnnotationValueError
        If the text isn't a finite number in the given culture.
    """
    if not isinstance(text, str):
        raise errors.AnnotationValueError(f"Expected a string, got {text!r}.")
    stripped = text.strip()
    if culture == INVARIANT_CULTURE:
        try:
            if "_" in stripped:
                raise decimal.InvalidOperation(stripped)
            value = decimal.Decimal(stripped)
        except decimal.InvalidOperation as e:
            raise errors.AnnotationValueError(
                f"Couldn't parse {text!r} as a number in the invariant culture."
            ) from e
    else:
        if not allow_grouping and babel_numbers.get_group_symbol(culture) in stripped:
            raise errors.AnnotationValueError(
                f"Group separators aren't allowed in {text!r} (culture {culture!r})."
            )
        try:
            value = babel_numbers.parse_decimal(stripped, locale=culture)
        except babel_numbers.NumberFormatError as e:
            raise errors.AnnotationValueError(
                f"Couldn't parse {text!r} as a number in culture {culture!r}."
            ) from e
    if not value.is_finite():
        raise errors.AnnotationValueError(f"Parsed non-finite {value!r} from {text!r}.")
    return value
