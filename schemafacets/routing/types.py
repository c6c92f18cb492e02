from __future__ import annotations

import dataclasses
import enum
import re
from typing import ClassVar, Pattern, Union

from schemafacets import errors, numeric, util

__all__ = (
    "BoolConstraint",
    "DecimalConstraint",
    "FloatConstraint",
    "GuidConstraint",
    "IntConstraint",
    "LengthConstraint",
    "LongConstraint",
    "MaxConstraint",
    "MaxLengthConstraint",
    "MinConstraint",
    "MinLengthConstraint",
    "RangeConstraint",
    "RegexConstraint",
    "RouteConstraintKind",
    "RouteConstraintT",
    "StringConstraint",
)

slotted = util.slotted(dict=False, weakref=True)


class RouteConstraintKind(enum.Enum):
    """The tag which identifies each kind of route constraint."""

    MIN = "min"
    MAX = "max"
    MIN_LENGTH = "minlength"
    MAX_LENGTH = "maxlength"
    LENGTH = "length"
    RANGE = "range"
    REGEX = "regex"
    FLOAT = "float"
    DECIMAL = "decimal"
    LONG = "long"
    INT = "int"
    GUID = "guid"
    STRING = "string"
    BOOL = "bool"


def _check_non_negative(**values: int):
    for name, value in values.items():
        if value < 0:
            raise errors.ConstraintValueError(
                f"Constraint <{name}={value!r}> must be greater than or equal to 0."
            )


def _check_finite_number(**values):
    for name, value in values.items():
        if not numeric.is_standard_number(value) or not numeric.is_finite(value):
            raise errors.ConstraintValueError(
                f"Constraint <{name}={value!r}> must be a finite number."
            )


@slotted
@dataclasses.dataclass(frozen=True)
class MinConstraint:
    kind: ClassVar[RouteConstraintKind] = RouteConstraintKind.MIN

    min: int

    def __post_init__(self):
        _check_finite_number(min=self.min)


@slotted
@dataclasses.dataclass(frozen=True)
class MaxConstraint:
    kind: ClassVar[RouteConstraintKind] = RouteConstraintKind.MAX

    max: int

    def __post_init__(self):
        _check_finite_number(max=self.max)


@slotted
@dataclasses.dataclass(frozen=True)
class MinLengthConstraint:
    kind: ClassVar[RouteConstraintKind] = RouteConstraintKind.MIN_LENGTH

    min_length: int

    def __post_init__(self):
        _check_non_negative(min_length=self.min_length)


@slotted
@dataclasses.dataclass(frozen=True)
class MaxLengthConstraint:
    kind: ClassVar[RouteConstraintKind] = RouteConstraintKind.MAX_LENGTH

    max_length: int

    def __post_init__(self):
        _check_non_negative(max_length=self.max_length)


@slotted
@dataclasses.dataclass(frozen=True)
class LengthConstraint:
    """The length of a route segment. `LengthConstraint(4)` means exactly four."""

    kind: ClassVar[RouteConstraintKind] = RouteConstraintKind.LENGTH

    min_length: int
    max_length: int = None  # type: ignore[assignment]

    def __post_init__(self):
        if self.max_length is None:
            object.__setattr__(self, "max_length", self.min_length)
        _check_non_negative(min_length=self.min_length, max_length=self.max_length)
        if self.min_length > self.max_length:
            raise errors.ConstraintValueError(
                f"Constraint <min_length={self.min_length!r}> is greater than "
                f"<max_length={self.max_length!r}>."
            )


@slotted
@dataclasses.dataclass(frozen=True)
class RangeConstraint:
    kind: ClassVar[RouteConstraintKind] = RouteConstraintKind.RANGE

    min: int
    max: int

    def __post_init__(self):
        _check_finite_number(min=self.min, max=self.max)
        if self.min > self.max:
            raise errors.ConstraintValueError(
                f"Constraint <min={self.min!r}> is greater than <max={self.max!r}>."
            )


@slotted
@dataclasses.dataclass(frozen=True)
class RegexConstraint:
    kind: ClassVar[RouteConstraintKind] = RouteConstraintKind.REGEX

    regex: Union[str, Pattern]

    @property
    def pattern(self) -> str:
        """The source text of the regular expression, as it was declared."""
        if isinstance(self.regex, re.Pattern):
            return self.regex.pattern
        return self.regex


@slotted
@dataclasses.dataclass(frozen=True)
class FloatConstraint:
    kind: ClassVar[RouteConstraintKind] = RouteConstraintKind.FLOAT


@slotted
@dataclasses.dataclass(frozen=True)
class DecimalConstraint:
    kind: ClassVar[RouteConstraintKind] = RouteConstraintKind.DECIMAL


@slotted
@dataclasses.dataclass(frozen=True)
class LongConstraint:
    kind: ClassVar[RouteConstraintKind] = RouteConstraintKind.LONG


@slotted
@dataclasses.dataclass(frozen=True)
class IntConstraint:
    kind: ClassVar[RouteConstraintKind] = RouteConstraintKind.INT


@slotted
@dataclasses.dataclass(frozen=True)
class GuidConstraint:
    kind: ClassVar[RouteConstraintKind] = RouteConstraintKind.GUID


@slotted
@dataclasses.dataclass(frozen=True)
class StringConstraint:
    kind: ClassVar[RouteConstraintKind] = RouteConstraintKind.STRING


@slotted
@dataclasses.dataclass(frozen=True)
class BoolConstraint:
    kind: ClassVar[RouteConstraintKind] = RouteConstraintKind.BOOL


RouteConstraintT = Union[
    MinConstraint,
    MaxConstraint,
    MinLengthConstraint,
    MaxLengthConstraint,
    LengthConstraint,
    RangeConstraint,
    RegexConstraint,
    FloatConstraint,
    DecimalConstraint,
    LongConstraint,
    IntConstraint,
    GuidConstraint,
    StringConstraint,
    BoolConstraint,
]
"""A type-alias for the defined route constraints."""
