import pytest

from velocidadsim.model.kinematics import ValidationError
from velocidadsim.model.state import CalculatorState


def test_defaults_are_not_calculated_until_asked():
    state = CalculatorState()
    assert state.distance_text == "100"
    assert state.time_text == "10"
    assert state.result is None
    assert state.error is None
    assert not state.is_valid


def test_initial_calculation_with_defaults():
    state = CalculatorState()
    assert state.calculate() is True

    assert state.result.speed == 10.0
    assert state.result.speed_kmh == pytest.approx(36.0)
    assert state.error is None
    assert state.error_message is None
    assert len(state.time_series) == 21
    assert len(state.distance_series) == 21


def test_zero_distance_scenario():
    state = CalculatorState(distance_text="0", time_text="5")
    assert state.calculate()

    assert state.result.speed == 0.0
    assert state.distance_series[-1].x == 100.0


@pytest.mark.parametrize("distance_text,time_text,expected", [
    ("50", "-1", ValidationError.NON_POSITIVE_TIME),
    ("xyz", "10", ValidationError.NON_NUMERIC),
    ("-5", "10", ValidationError.NEGATIVE_DISTANCE),
])
def test_failed_validation_clears_outputs(distance_text, time_text, expected):
    state = CalculatorState()
    state.calculate()

    state.set_inputs(distance_text, time_text)
    assert state.calculate() is False

    assert state.error is expected
    assert state.error_message == expected.message
    assert state.result is None
    assert state.time_series is None
    assert state.distance_series is None


def test_successful_calculation_clears_previous_error():
    state = CalculatorState(distance_text="abc")
    state.calculate()
    assert state.error is ValidationError.NON_NUMERIC

    state.set_inputs("30", "4")
    assert state.calculate()
    assert state.error is None
    assert state.result.speed == 7.5


def test_editing_inputs_keeps_last_outputs():
    state = CalculatorState()
    state.calculate()
    result = state.result

    state.set_inputs("1", "1")
    assert state.result is result


def test_reset_restores_defaults_and_recalculates():
    state = CalculatorState(distance_text="abc", time_text="0")
    state.calculate()

    state.reset()

    assert state.distance_text == "100"
    assert state.time_text == "10"
    assert state.is_valid
    assert state.result.speed == 10.0
