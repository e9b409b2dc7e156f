"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
Abstraction: It prevents magic numbers (default inputs, sweep sizes, slider
ranges, colours) from being scattered throughout the model and the views.

Exports:
    DEFAULT_DISTANCE_TEXT (str): Initial content of the distance field.
    DEFAULT_TIME_TEXT (str): Initial content of the time field.
    SAMPLE_INTERVALS (int): Number of intervals in a sweep (points = intervals + 1).
    MS_TO_KMH (float): Display factor from m/s to km/h.
"""

VISIBLE_APP_NAME = "VelocidadSim"

# Inputs shown on startup
DEFAULT_DISTANCE_TEXT: str = "100"
DEFAULT_TIME_TEXT: str = "10"

# Sweeps
SAMPLE_INTERVALS: int = 20
TIME_SWEEP_MIN_FACTOR: float = 0.5
TIME_SWEEP_MAX_FACTOR: float = 2.0
TIME_SWEEP_FLOOR: float = 1.0  # s
DISTANCE_SWEEP_MAX_FACTOR: float = 2.0
DISTANCE_SWEEP_FALLBACK: float = 100.0  # m, used when distance is 0

# Display
MS_TO_KMH: float = 3.6
SPEED_DECIMALS: int = 2
LABEL_DECIMALS: int = 1

# Sliders (integer steps)
DISTANCE_SLIDER_RANGE: tuple[int, int] = (0, 1000)  # m
TIME_SLIDER_RANGE: tuple[int, int] = (1, 120)  # s

# Charts
TIME_CHART_COLOR = '#3b82f6'  # Blue
DISTANCE_CHART_COLOR = '#10b981'  # Green
REFERENCE_LINE_COLOR = '#ef4444'  # Red
