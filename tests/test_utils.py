import math

import pytest

from velocidadsim.utils import format_quantity, ms_to_kmh, round_to, to_fixed


@pytest.mark.parametrize("value,decimals,expected", [
    (36.0, 2, "36.00"),
    (10.0, 2, "10.00"),
    (17.391304347826086, 2, "17.39"),
    (0.125, 2, "0.13"),       # Exact tie rounds away from zero
    (0.25, 1, "0.3"),
    (2.675, 2, "2.67"),       # Stored just below the tie
    (1.005, 2, "1.00"),
    (12.5, 1, "12.5"),
    (5.0, 0, "5"),
    (-1.25, 1, "-1.3"),
    (-0.001, 2, "0.00"),      # No negative zero
    (1e21, 2, "1000000000000000000000.00"),
])
def test_to_fixed(value, decimals, expected):
    assert to_fixed(value, decimals) == expected


def test_to_fixed_non_finite():
    assert to_fixed(math.inf, 2) == "inf"
    assert to_fixed(math.nan, 2) == "nan"


def test_round_to_returns_float():
    assert round_to(17.391304347826086, 2) == 17.39
    assert round_to(0.125, 2) == 0.13
    assert isinstance(round_to(3.0, 1), float)


def test_ms_to_kmh():
    assert ms_to_kmh(10.0) == pytest.approx(36.0)
    assert ms_to_kmh(0.0) == 0.0
    assert to_fixed(ms_to_kmh(10.0), 2) == "36.00"


@pytest.mark.parametrize("value,expected", [
    (100.0, "100"),
    (12.5, "12.5"),
    (0.1, "0.1"),
    (0.0, "0"),
])
def test_format_quantity(value, expected):
    assert format_quantity(value) == expected


@pytest.mark.parametrize("value", [
    1234567890123456789.0,
    0.30000000000000004,
    123456.789012345,
    1e-7,
    1.7976931348623157e308,
])
def test_format_quantity_round_trips(value):
    assert float(format_quantity(value)) == value


def test_format_quantity_negative_zero():
    assert format_quantity(-0.0) == "0"
