"""
The VIEW layer: Qt widgets only. Reads from CalculatorState and asks it to
recalculate; never computes anything itself.
"""
