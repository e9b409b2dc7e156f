"""
Calculator State (Data Model)
=============================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the current input texts, the last result or
   error, and both chart series in one place.
2. Decoupling: Views read from this object and only ask it to recalculate;
   the kinematics module stays free of any state.

Classes:
    CalculatorState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional

from velocidadsim.config import DEFAULT_DISTANCE_TEXT, DEFAULT_TIME_TEXT
from velocidadsim.model.kinematics import (
    CalculationResult, SampledSeries, ValidationError, compute_sweeps, validate_and_compute
)

logger = logging.getLogger(__name__)


@dataclass
class CalculatorState:
    """
    Holds the inputs and the last computed outputs.
    Pass this instance to the main window and the CLI.

    Outputs are only replaced by calculate(); editing the texts does not
    invalidate them.
    """
    distance_text: str = DEFAULT_DISTANCE_TEXT
    time_text: str = DEFAULT_TIME_TEXT

    result: Optional[CalculationResult] = None
    error: Optional[ValidationError] = None
    time_series: Optional[SampledSeries] = None
    distance_series: Optional[SampledSeries] = None

    @property
    def is_valid(self) -> bool:
        return self.result is not None

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error is not None else None

    def set_inputs(self, distance_text: str, time_text: str) -> None:
        self.distance_text = distance_text
        self.time_text = time_text

    def calculate(self) -> bool:
        """
        Validate the current texts and recompute every output.

        On failure the result and both series are cleared and the error is set.

        Returns:
            True if the inputs were valid.
        """
        calculation = validate_and_compute(self.distance_text, self.time_text)

        if not calculation.ok:
            self.result = None
            self.error = calculation.error
            self.time_series = None
            self.distance_series = None
            logger.info(f"Validation failed: {calculation.error.message}")
            return False

        time_series, distance_series = compute_sweeps(calculation.result)
        self.result = calculation.result
        self.error = None
        self.time_series = time_series
        self.distance_series = distance_series
        logger.info(
            f"Speed {self.result.speed:.2f} m/s "
            f"(d={self.result.distance} m, t={self.result.time} s)"
        )
        return True

    def reset(self) -> None:
        """Restore the default inputs and recalculate."""
        self.distance_text = DEFAULT_DISTANCE_TEXT
        self.time_text = DEFAULT_TIME_TEXT
        self.calculate()
        logger.info("Calculator state has been reset.")
