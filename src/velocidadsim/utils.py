import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

from velocidadsim.config import MS_TO_KMH

# Enough significant digits to quantize any finite double without overflow
_DECIMAL_PRECISION = 400


def ms_to_kmh(speed: float) -> float:
    """Convert m/s to km/h."""
    return speed * MS_TO_KMH


def to_fixed(value: float, decimals: int) -> str:
    """
    Format a number with exactly `decimals` digits after the decimal point.

    Rounds half away from zero on the exact binary value of the float, so
    2.675 (stored as 2.67499999...) gives "2.67" while 0.125 gives "0.13".
    This differs from format(value, '.2f'), which rounds exact ties to even.
    Non-finite values are returned as 'inf', '-inf' or 'nan'.
    """
    if not math.isfinite(value):
        return str(value)

    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PRECISION
        quantum = Decimal(1).scaleb(-decimals)
        rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    if rounded == 0:
        # No "-0.00"
        rounded = abs(rounded)
    return f"{rounded:f}"


def round_to(value: float, decimals: int) -> float:
    """Round like to_fixed() but keep the result numeric."""
    return float(to_fixed(value, decimals))


def format_quantity(value: float) -> str:
    """
    Shortest text that reads back as the same value (100.0 -> '100', 12.5 -> '12.5').

    Large and small magnitudes keep repr's exponent form.
    """
    if value == 0:
        return "0"
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text
