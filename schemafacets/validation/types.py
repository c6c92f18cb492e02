from __future__ import annotations

import dataclasses
import decimal
import enum
from typing import Any, ClassVar, Optional, Type, Union

from schemafacets import converters, errors, numeric, settings, util

__all__ = (
    "AnnotationKind",
    "Base64String",
    "DataKind",
    "DataType",
    "Description",
    "Length",
    "MaxLength",
    "MinLength",
    "Range",
    "ReadOnly",
    "RegularExpression",
    "StringLength",
    "ValidationAnnotationT",
)

slotted = util.slotted(dict=False, weakref=True)


class AnnotationKind(enum.Enum):
    """The tag which identifies each kind of validation annotation."""

    DATA_TYPE = "data_type"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    LENGTH = "length"
    BASE64 = "base64"
    RANGE = "range"
    REGULAR_EXPRESSION = "regular_expression"
    STRING_LENGTH = "string_length"
    READ_ONLY = "read_only"
    DESCRIPTION = "description"


class DataKind(str, enum.Enum):
    """The logical kinds of data which a member may be declared to hold."""

    CUSTOM = "custom"
    DATE_TIME = "date_time"
    DATE = "date"
    TIME = "time"
    DURATION = "duration"
    PHONE_NUMBER = "phone_number"
    CURRENCY = "currency"
    TEXT = "text"
    HTML = "html"
    MULTILINE_TEXT = "multiline_text"
    EMAIL_ADDRESS = "email_address"
    PASSWORD = "password"
    URL = "url"
    IMAGE_URL = "image_url"
    CREDIT_CARD = "credit_card"
    POSTAL_CODE = "postal_code"
    UPLOAD = "upload"


@slotted
@dataclasses.dataclass(frozen=True)
class DataType:
    """Declares the logical kind of data a member holds."""

    kind: ClassVar[AnnotationKind] = AnnotationKind.DATA_TYPE

    data_type: DataKind
    custom_data_type: Optional[str] = None

    def __post_init__(self):
        if self.data_type is DataKind.CUSTOM and not self.custom_data_type:
            raise errors.AnnotationValueError(
                "A custom data type requires <custom_data_type>."
            )


@slotted
@dataclasses.dataclass(frozen=True)
class MinLength:
    kind: ClassVar[AnnotationKind] = AnnotationKind.MIN_LENGTH

    length: int


@slotted
@dataclasses.dataclass(frozen=True)
class MaxLength:
    kind: ClassVar[AnnotationKind] = AnnotationKind.MAX_LENGTH

    length: int


@slotted
@dataclasses.dataclass(frozen=True)
class Length:
    """The combined minimum and maximum length of a string or collection."""

    kind: ClassVar[AnnotationKind] = AnnotationKind.LENGTH

    minimum_length: int
    maximum_length: int


@slotted
@dataclasses.dataclass(frozen=True)
class Base64String:
    """Marks a string member as base64-encoded data."""

    kind: ClassVar[AnnotationKind] = AnnotationKind.BASE64


@slotted
@dataclasses.dataclass(frozen=True)
class RegularExpression:
    kind: ClassVar[AnnotationKind] = AnnotationKind.REGULAR_EXPRESSION

    pattern: str


@slotted
@dataclasses.dataclass(frozen=True)
class StringLength:
    """The length of a string member. Never applies to collections."""

    kind: ClassVar[AnnotationKind] = AnnotationKind.STRING_LENGTH

    maximum_length: int
    minimum_length: int = 0


@slotted
@dataclasses.dataclass(frozen=True)
class ReadOnly:
    kind: ClassVar[AnnotationKind] = AnnotationKind.READ_ONLY

    is_read_only: bool = True


@slotted
@dataclasses.dataclass(frozen=True)
class Description:
    kind: ClassVar[AnnotationKind] = AnnotationKind.DESCRIPTION

    description: str


@slotted
@dataclasses.dataclass(eq=False)
class Range:
    """The numeric (or otherwise comparable) bounds of a member.

    Limits may be given as numbers, in which case the operand type is inferred,
    or as strings alongside an explicit `operand_type`. String limits are parsed
    lazily, on the first call to :py:meth:`is_valid`, using the converter registered
    for `operand_type`. They're parsed in the invariant culture when
    `parse_limits_in_invariant_culture` is set, else in the ambient culture
    (see :py:class:`schemafacets.settings.Settings`).

    Examples
    --------
    >>> r = Range("1.5", "10.25", operand_type=float, parse_limits_in_invariant_culture=True)
    >>> r.is_valid(None)
    True
    >>> r.minimum, r.maximum
    (1.5, 10.25)
    """

    kind: ClassVar[AnnotationKind] = AnnotationKind.RANGE

    minimum: Any
    maximum: Any
    operand_type: Optional[Type[Any]] = None
    minimum_is_exclusive: bool = False
    maximum_is_exclusive: bool = False
    parse_limits_in_invariant_culture: bool = False
    _converted: bool = dataclasses.field(default=False, init=False, repr=False)

    def __post_init__(self):
        # Slotted classes drop the class-level default of init=False fields.
        self._converted = False
        if self.operand_type is None and numeric.is_standard_number(self.minimum):
            self.operand_type = type(self.minimum)

    @property
    def culture(self) -> str:
        if self.parse_limits_in_invariant_culture:
            return numeric.INVARIANT_CULTURE
        return settings.get_settings().culture

    def is_valid(self, value: Any) -> bool:
        """Check `value` against the bounds, converting string limits first.

        `None` is always valid.

        Raises
        ------
        AnnotationStateError
            If the limits or operand type are missing, no converter exists for the
            operand type, or the minimum is greater than the maximum.
        AnnotationValueError
            If a string limit can't be parsed as the operand type, or a limit
            isn't a finite number.
        """
        self._setup_conversion()
        if value is None:
            return True
        if isinstance(value, str):
            value = converters.get_converter(self.operand_type).from_string(
                value, self.culture
            )
        if self.minimum_is_exclusive:
            above = value > self.minimum
        else:
            above = value >= self.minimum
        if self.maximum_is_exclusive:
            below = value < self.maximum
        else:
            below = value <= self.maximum
        return above and below

    def _setup_conversion(self):
        if self._converted:
            return
        if self.minimum is None or self.maximum is None:
            raise errors.AnnotationStateError(
                "Both <minimum> and <maximum> must be set for a range."
            )
        if self.operand_type is None:
            raise errors.AnnotationStateError(
                "An <operand_type> must be set for a range with non-numeric limits."
            )
        converter = converters.get_converter(self.operand_type)
        if converter is None:
            raise errors.AnnotationStateError(
                f"No converter is registered for "
                f"operand type {util.get_name(self.operand_type)!r}."
            )
        culture = self.culture
        minimum, maximum = self.minimum, self.maximum
        if isinstance(minimum, str):
            minimum = converter.from_string(minimum, culture)
        if isinstance(maximum, str):
            maximum = converter.from_string(maximum, culture)
        for limit in (minimum, maximum):
            if numeric.is_standard_number(limit) and not numeric.is_finite(limit):
                raise errors.AnnotationValueError(
                    f"Range limit {limit!r} is not a finite number."
                )
        try:
            inverted = minimum > maximum
        except (TypeError, decimal.InvalidOperation) as e:
            raise errors.AnnotationStateError(
                f"Range limits {minimum!r} and {maximum!r} can't be compared."
            ) from e
        if inverted:
            raise errors.AnnotationStateError(
                f"Range <minimum={minimum!r}> is greater than <maximum={maximum!r}>."
            )
        self.minimum, self.maximum = minimum, maximum
        self._converted = True


ValidationAnnotationT = Union[
    DataType,
    MinLength,
    MaxLength,
    Length,
    Base64String,
    Range,
    RegularExpression,
    StringLength,
    ReadOnly,
    Description,
]
"""A type-alias for the defined validation annotations."""
