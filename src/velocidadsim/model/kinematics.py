"""
Uniform Motion Kinematics
=========================
Pure computations behind the calculator: parsing and validating the raw
inputs, computing the speed, and sampling the two sweeps shown in the charts.

Nothing in this module touches the GUI or holds state; every function is a
function of its arguments only.

Classes:
    ValidationError: Why a pair of inputs was rejected.
    CalculationResult: A validated distance/time pair and its speed.
    Calculation: Outcome of validate_and_compute (result or error).
    SamplePoint: One point of a sweep.
    SampledSeries: 21 evenly spaced points over one independent variable.
"""
from __future__ import annotations

import logging
import math
import re
import sys
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterator, Optional

import numpy as np
import matplotlib.pyplot as plt

from velocidadsim.config import (
    SAMPLE_INTERVALS, TIME_SWEEP_MIN_FACTOR, TIME_SWEEP_MAX_FACTOR, TIME_SWEEP_FLOOR,
    DISTANCE_SWEEP_MAX_FACTOR, DISTANCE_SWEEP_FALLBACK, SPEED_DECIMALS, LABEL_DECIMALS,
    REFERENCE_LINE_COLOR,
)
from velocidadsim.utils import ms_to_kmh, round_to, to_fixed

if TYPE_CHECKING:
    import numpy.typing as npt
    from matplotlib.axes import Axes

logger = logging.getLogger(__name__)

# Plain decimal literal: optional sign, digits with optional fraction, optional exponent.
# float() alone would also accept "inf", "nan" and "1_000".
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

# Sweep bounds are kept inside the normal float range
_LARGEST_FLOAT = sys.float_info.max
_SMALLEST_NORMAL = sys.float_info.min


class ValidationError(Enum):
    """Classified reason the user input was rejected. The value is the user-facing message."""
    NON_NUMERIC = "Please enter valid numeric values"
    NEGATIVE_DISTANCE = "Distance cannot be negative"
    NON_POSITIVE_TIME = "Time must be greater than zero"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class CalculationResult:
    """
    A validated input pair and its speed.

    speed is stored unrounded; rounding is a display concern.
    """
    distance: float  # m, >= 0
    time: float  # s, > 0
    speed: float  # m/s

    @property
    def speed_kmh(self) -> float:
        """Display-only equivalent of the speed in km/h."""
        return ms_to_kmh(self.speed)


@dataclass(frozen=True)
class Calculation:
    """Outcome of validate_and_compute. Exactly one of result/error is set."""
    result: Optional[CalculationResult] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.result is not None


@dataclass(frozen=True)
class SamplePoint:
    label: str  # independent variable, 1 decimal
    value: float  # speed, rounded to 2 decimals
    x: float  # independent variable, unrounded


@dataclass(frozen=True)
class SampledSeries:
    """
    Evenly spaced sweep over one independent variable with the other held fixed.

    Behaves as a read-only sequence of SamplePoint. The remaining fields are
    chart metadata; `reference` is the actual input value to highlight.
    """
    points: tuple[SamplePoint, ...]
    title: str
    x_label: str
    y_label: str
    reference: float

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[SamplePoint]:
        return iter(self.points)

    def __getitem__(self, index: int) -> SamplePoint:
        return self.points[index]

    @property
    def labels(self) -> list[str]:
        return [p.label for p in self.points]

    @property
    def xs(self) -> npt.NDArray[np.float64]:
        return np.array([p.x for p in self.points], dtype=np.float64)

    @property
    def values(self) -> npt.NDArray[np.float64]:
        return np.array([p.value for p in self.points], dtype=np.float64)

    def plot(self, ax: Optional[Axes] = None, color: str = 'b') -> Axes:
        """
        Plot the sweep with matplotlib.

        Args:
            ax: Axes to draw into. A new figure is created when omitted.
            color: Line colour.

        Returns:
            The axes that were drawn into.
        """
        if ax is None:
            plt.rcParams["figure.constrained_layout.use"] = True
            _, ax = plt.subplots(figsize=(7, 5))

        ax.plot(self.xs, self.values, color=color, lw=2, marker='o', markersize=3)
        ax.axvline(self.reference, color=REFERENCE_LINE_COLOR, linestyle='--', lw=1, label='Current')

        ax.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        ax.minorticks_on()
        ax.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

        ax.set_title(self.title)
        ax.set_xlabel(self.x_label)
        ax.set_ylabel(self.y_label)
        ax.legend(loc='best')
        return ax


def parse_number(text: str) -> Optional[float]:
    """
    Parse user text as a finite decimal number.

    Accepts surrounding whitespace, a leading sign and scientific notation.

    Returns:
        The parsed value, or None if the text is not a finite decimal number.
    """
    stripped = text.strip()
    if not _DECIMAL_RE.fullmatch(stripped):
        return None
    value = float(stripped)
    if not math.isfinite(value):
        # e.g. "1e400" overflows to inf
        return None
    return value


def validate_and_compute(distance_text: str, time_text: str) -> Calculation:
    """
    Validate raw distance/time input and compute the speed.

    Checks run in order and the first failure wins: both values must be
    numeric, the distance must not be negative, the time must be positive.
    Never raises for any text input.

    Args:
        distance_text: Distance in meters, as typed by the user.
        time_text: Time in seconds, as typed by the user.

    Returns:
        Calculation carrying either the result or the validation error.
    """
    distance = parse_number(distance_text)
    time = parse_number(time_text)

    if distance is None or time is None:
        error = ValidationError.NON_NUMERIC
    elif distance < 0:
        error = ValidationError.NEGATIVE_DISTANCE
    elif time <= 0:
        error = ValidationError.NON_POSITIVE_TIME
    else:
        speed = distance / time
        logger.debug(f"Computed speed {speed} m/s from d={distance} m, t={time} s")
        return Calculation(result=CalculationResult(distance=distance, time=time, speed=speed))

    logger.debug(f"Rejected input (d={distance_text!r}, t={time_text!r}): {error.name}")
    return Calculation(error=error)


def _check_sweep_inputs(distance: float, time: float) -> None:
    if not (math.isfinite(distance) and math.isfinite(time)):
        raise ValueError(f"Sweep inputs must be finite, got d={distance}, t={time}")
    if distance < 0:
        raise ValueError(f"Distance must not be negative, got {distance}")
    if time <= 0:
        raise ValueError(f"Time must be greater than zero, got {time}")


def _sample_range(start: float, stop: float) -> npt.NDArray[np.float64]:
    """
    start + step * i for i in 0..SAMPLE_INTERVALS, step = (stop - start) / SAMPLE_INTERVALS.

    The last point falls back to `stop` when start + step * SAMPLE_INTERVALS
    overflows, which happens only for stop close to the largest float.
    """
    step = (stop - start) / SAMPLE_INTERVALS
    head = start + step * np.arange(SAMPLE_INTERVALS, dtype=np.float64)
    last = start + step * SAMPLE_INTERVALS
    return np.append(head, last if math.isfinite(last) else stop)


def _is_ascending(xs: npt.NDArray[np.float64]) -> bool:
    return bool(np.all(np.diff(xs) > 0))


def _build_points(xs: npt.NDArray[np.float64], speeds: npt.NDArray[np.float64]) -> tuple[SamplePoint, ...]:
    return tuple(
        SamplePoint(
            label=to_fixed(float(x), LABEL_DECIMALS),
            value=round_to(float(v), SPEED_DECIMALS),
            x=float(x),
        )
        for x, v in zip(xs, speeds)
    )


def sample_over_time(distance: float, time: float) -> SampledSeries:
    """
    Sweep the time from half to twice its value with the distance fixed.

    The lower bound is floored at 1 s, so for short times the sweep is not
    centred on the actual time. When the floor would leave no strictly
    ascending range (time <= 0.5 s, or barely above) the unfloored lower bound
    is used. Bounds are clamped to the normal float range, so the largest and
    the subnormal times still give 21 finite, ascending points.

    Args:
        distance: Fixed distance in meters.
        time: Actual time in seconds.

    Returns:
        21 points ascending in time.
    """
    _check_sweep_inputs(distance, time)

    # Subnormal times would underflow the lower bound to 0
    sweep_time = max(time, 2 * _SMALLEST_NORMAL)
    max_t = min(sweep_time * TIME_SWEEP_MAX_FACTOR, _LARGEST_FLOAT)
    min_t = sweep_time * TIME_SWEEP_MIN_FACTOR

    times = _sample_range(max(TIME_SWEEP_FLOOR, min_t), max_t)
    if not _is_ascending(times):
        times = _sample_range(min_t, max_t)

    with np.errstate(over='ignore'):
        speeds = distance / times

    return SampledSeries(
        points=_build_points(times, speeds),
        title="Impact of Time on Speed",
        x_label="Time (s)",
        y_label="Speed (m/s)",
        reference=time,
    )


def sample_over_distance(distance: float, time: float) -> SampledSeries:
    """
    Sweep the distance from 0 to twice its value with the time fixed.

    A zero distance falls back to a 0..100 m sweep. The upper bound is
    clamped to the normal float range like in sample_over_time.

    Args:
        distance: Actual distance in meters.
        time: Fixed time in seconds.

    Returns:
        21 points ascending in distance.
    """
    _check_sweep_inputs(distance, time)

    if distance == 0:
        max_d = DISTANCE_SWEEP_FALLBACK
    else:
        # Subnormal distances leave too few representable values below 2d
        max_d = min(max(distance, _SMALLEST_NORMAL) * DISTANCE_SWEEP_MAX_FACTOR, _LARGEST_FLOAT)

    distances = _sample_range(0.0, max_d)
    with np.errstate(over='ignore'):
        speeds = distances / time

    return SampledSeries(
        points=_build_points(distances, speeds),
        title="Impact of Distance on Speed",
        x_label="Distance (m)",
        y_label="Speed (m/s)",
        reference=distance,
    )


def compute_sweeps(result: CalculationResult) -> tuple[SampledSeries, SampledSeries]:
    """Both sweeps for a validated result: (over time, over distance)."""
    return (
        sample_over_time(result.distance, result.time),
        sample_over_distance(result.distance, result.time),
    )
