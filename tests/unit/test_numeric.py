from __future__ import annotations

import decimal

import pytest

from schemafacets import errors, numeric


@pytest.mark.suite(
    int=dict(given_value=10, expected_text="10"),
    negative_int=dict(given_value=-3, expected_text="-3"),
    huge_int=dict(given_value=2**70, expected_text="1180591620717411303424"),
    decimal=dict(given_value=decimal.Decimal("1.50"), expected_text="1.50"),
    decimal_exponent=dict(given_value=decimal.Decimal("1E+2"), expected_text="100"),
    decimal_negative_zero=dict(
        given_value=decimal.Decimal("-0.0"), expected_text="0.0"
    ),
    decimal_small=dict(
        given_value=decimal.Decimal("1E-10"), expected_text="0.0000000001"
    ),
    float=dict(given_value=0.1, expected_text="0.1"),
    float_integral=dict(given_value=2.0, expected_text="2"),
    float_small=dict(given_value=1e-07, expected_text="1E-07"),
    float_fixed_limit=dict(given_value=1e15, expected_text="1E+15"),
    float_below_fixed_limit=dict(
        given_value=999999999999999.0, expected_text="999999999999999"
    ),
    float_negative_large=dict(given_value=-1.5e15, expected_text="-1.5E+15"),
    float_large=dict(given_value=1e16, expected_text="1E+16"),
    float_max=dict(
        given_value=1.7976931348623157e308, expected_text="1.7976931348623157E+308"
    ),
)
def test_to_invariant_string(given_value, expected_text):
    # When
    text = numeric.to_invariant_string(given_value)
    # Then
    assert text == expected_text


@pytest.mark.suite(
    bool=dict(given_value=True),
    string=dict(given_value="1"),
    nan=dict(given_value=float("nan")),
    inf=dict(given_value=float("-inf")),
    decimal_inf=dict(given_value=decimal.Decimal("Infinity")),
)
def test_to_invariant_string_invalid(given_value):
    # When/Then
    with pytest.raises(errors.AnnotationValueError):
        numeric.to_invariant_string(given_value)


@pytest.mark.suite(
    invariant=dict(
        given_text="1.5",
        given_culture=numeric.INVARIANT_CULTURE,
        expected_value=decimal.Decimal("1.5"),
    ),
    invariant_whitespace=dict(
        given_text=" 42 ",
        given_culture=numeric.INVARIANT_CULTURE,
        expected_value=decimal.Decimal("42"),
    ),
    invariant_negative=dict(
        given_text="-0.25",
        given_culture=numeric.INVARIANT_CULTURE,
        expected_value=decimal.Decimal("-0.25"),
    ),
    german=dict(
        given_text="1.234,5",
        given_culture="de_DE",
        expected_value=decimal.Decimal("1234.5"),
    ),
    german_decimal_comma=dict(
        given_text="1,5",
        given_culture="de_DE",
        expected_value=decimal.Decimal("1.5"),
    ),
    english=dict(
        given_text="1,234.5",
        given_culture="en_US",
        expected_value=decimal.Decimal("1234.5"),
    ),
)
def test_parse_decimal(given_text, given_culture, expected_value):
    # When
    value = numeric.parse_decimal(given_text, given_culture)
    # Then
    assert value == expected_value


@pytest.mark.suite(
    invariant_grouping=dict(given_text="1,000", given_culture=numeric.INVARIANT_CULTURE),
    invariant_underscore=dict(
        given_text="1_000", given_culture=numeric.INVARIANT_CULTURE
    ),
    invariant_nan=dict(given_text="NaN", given_culture=numeric.INVARIANT_CULTURE),
    invariant_garbage=dict(given_text="ten", given_culture=numeric.INVARIANT_CULTURE),
    culture_garbage=dict(given_text="12abc", given_culture="en_US"),
    not_a_string=dict(given_text=12, given_culture="en_US"),
)
def test_parse_decimal_invalid(given_text, given_culture):
    # When/Then
    with pytest.raises(errors.AnnotationValueError):
        numeric.parse_decimal(given_text, given_culture)


@pytest.mark.suite(
    int=dict(given_value=1, expected_is_number=True),
    float=dict(given_value=1.5, expected_is_number=True),
    decimal=dict(given_value=decimal.Decimal(1), expected_is_number=True),
    bool=dict(given_value=False, expected_is_number=False),
    string=dict(given_value="1", expected_is_number=False),
    none=dict(given_value=None, expected_is_number=False),
)
def test_is_standard_number(given_value, expected_is_number):
    assert numeric.is_standard_number(given_value) is expected_is_number


@pytest.mark.suite(
    english=dict(given_text="1,000", given_culture="en_US"),
    german=dict(given_text="1.000,5", given_culture="de_DE"),
)
def test_parse_decimal_without_grouping(given_text, given_culture):
    # When/Then
    with pytest.raises(errors.AnnotationValueError):
        numeric.parse_decimal(given_text, given_culture, allow_grouping=False)


@pytest.mark.suite(
    int=dict(given_value=1, expected_is_finite=True),
    float=dict(given_value=1.5, expected_is_finite=True),
    float_nan=dict(given_value=float("nan"), expected_is_finite=False),
    float_inf=dict(given_value=float("-inf"), expected_is_finite=False),
    decimal=dict(given_value=decimal.Decimal("1.5"), expected_is_finite=True),
    decimal_nan=dict(given_value=decimal.Decimal("NaN"), expected_is_finite=False),
)
def test_is_finite(given_value, expected_is_finite):
    assert numeric.is_finite(given_value) is expected_is_finite
