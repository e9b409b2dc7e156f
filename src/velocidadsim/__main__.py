"""Command-line interface."""
import argparse
import logging
import sys
from typing import Optional, Sequence

import matplotlib.pyplot as plt

from velocidadsim.config import (
    DEFAULT_DISTANCE_TEXT, DEFAULT_TIME_TEXT, SPEED_DECIMALS, TIME_CHART_COLOR, DISTANCE_CHART_COLOR
)
from velocidadsim.logging_config import setup_logging
from velocidadsim.model.kinematics import SampledSeries
from velocidadsim.model.state import CalculatorState
from velocidadsim.utils import to_fixed

# "python -m" runs this module as __main__
logger = logging.getLogger("velocidadsim.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="velocidadsim-cli",
        description="Compute uniform-motion speed (v = d / t) and its time/distance sweeps.",
    )
    parser.add_argument("-d", "--distance", default=DEFAULT_DISTANCE_TEXT,
                        help=f"Distance in meters (default: {DEFAULT_DISTANCE_TEXT})")
    parser.add_argument("-t", "--time", default=DEFAULT_TIME_TEXT,
                        help=f"Time in seconds (default: {DEFAULT_TIME_TEXT})")
    parser.add_argument("--plot", action="store_true", help="Show both sweeps in a matplotlib window")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")
    return parser


def format_series(series: SampledSeries) -> str:
    lines = [series.title, f"  {series.x_label:>14} | {series.y_label}"]
    lines += [f"  {p.label:>14} | {to_fixed(p.value, SPEED_DECIMALS)}" for p in series]
    return "\n".join(lines)


def plot_sweeps(time_series: SampledSeries, distance_series: SampledSeries) -> None:
    plt.rcParams["figure.constrained_layout.use"] = True
    _, (ax_time, ax_distance) = plt.subplots(1, 2, figsize=(12, 5))
    time_series.plot(ax_time, color=TIME_CHART_COLOR)
    distance_series.plot(ax_distance, color=DISTANCE_CHART_COLOR)
    plt.show()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)
    logger.debug(f"CLI arguments: {args}")

    state = CalculatorState(distance_text=args.distance, time_text=args.time)
    if not state.calculate():
        print(f"Error: {state.error_message}", file=sys.stderr)
        return 1

    result = state.result
    print(f"Speed: {to_fixed(result.speed, SPEED_DECIMALS)} m/s "
          f"({to_fixed(result.speed_kmh, SPEED_DECIMALS)} km/h)")
    print()
    print(format_series(state.time_series))
    print()
    print(format_series(state.distance_series))

    if args.plot:
        plot_sweeps(state.time_series, state.distance_series)

    return 0


if __name__ == "__main__":
    sys.exit(main())
