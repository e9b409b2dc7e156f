"""
Pytest configuration and shared fixtures for velocidadsim tests.

This module provides common fixtures and test data used across multiple test modules.
"""
import logging

import matplotlib

# Headless plotting; must run before anything imports pyplot
matplotlib.use("Agg")

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging() so they don't outlive captured streams."""
    yield
    logger = logging.getLogger("velocidadsim")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


# =============================================================================
# Parsing Test Data Fixtures
# =============================================================================

@pytest.fixture
def valid_number_strings():
    """
    Text accepted by the number parser with the expected value.

    Returns:
        list of tuples: (input_string, expected_value)
    """
    return [
        ("100", 100.0),
        ("  12.5  ", 12.5),           # Surrounding whitespace
        ("+3", 3.0),                  # Explicit plus sign
        ("-4", -4.0),                 # Negative (rejected later by validation)
        ("1e3", 1000.0),              # Scientific notation
        ("1E-2", 0.01),
        (".5", 0.5),                  # No integer part
        ("5.", 5.0),                  # No fraction digits
        ("0", 0.0),
    ]


@pytest.fixture
def invalid_number_strings():
    """
    Text the number parser must reject.

    Returns:
        list of strings
    """
    return [
        "",           # Empty string
        "   ",        # Whitespace only
        "abc",        # Non-numeric
        "xyz",
        "1,2",        # Decimal comma
        "12abc",      # Trailing garbage
        "inf",        # Not finite
        "Infinity",
        "nan",
        "1e400",      # Overflows to inf
        "1_000",      # Python-only digit grouping
        "0x10",       # Hex literal
        "--1",
        "1e",
        ".",
    ]


# =============================================================================
# Sweep Test Data Fixtures
# =============================================================================

@pytest.fixture
def sweep_inputs():
    """
    Validated (distance, time) pairs covering the regular case and the edges
    of the time floor and the zero-distance fallback.

    Returns:
        list of tuples: (distance_m, time_s)
    """
    return [
        (100.0, 10.0),     # Defaults
        (0.0, 5.0),        # Zero distance
        (10.0, 1.0),       # Floor above half the time
        (3.0, 0.6),        # Floor active, narrow range
        (10.0, 0.5),       # Floor would leave an empty range
        (10.0, 0.1),       # Floor would reverse the range
        (1e-3, 1e-4),
        (123.4, 56.7),
        (5000.0, 3600.0),
        (1e308, 1.0),      # 2d overflows
        (1.0, 1e308),      # 2t overflows
        (1.0, 5e-324),     # t/2 underflows to 0
        (5e-324, 1.0),     # d/10 underflows to 0
        (1.0, 0.5000000000000001),  # Floored range narrower than 21 floats
    ]


@pytest.fixture
def extreme_input_strings():
    """
    Finite inputs that pass validation but sit at the edges of the float range.

    Returns:
        list of tuples: (distance_text, time_text)
    """
    return [
        ("1e308", "1"),
        ("1", "1e308"),
        ("1", "5e-324"),
        ("5e-324", "1"),
        ("1.7976931348623157e308", "2.2250738585072014e-308"),
    ]
