"""
Input validation utilities for cycle parameters.
"""
from typing import Optional, Tuple

from src.models.cycle import CycleParameters
from src.services.constants import (
    CYCLE_DURATION_RANGE,
    PERIOD_DURATION_RANGE,
    STRESS_VALUE_RANGE
)

def _out_of_range(value: float, bounds: Tuple[float, float]) -> bool:
    low, high = bounds
    return not low <= value <= high

def validate_cycle_parameters(params: CycleParameters) -> Tuple[bool, Optional[str]]:
    """
    Validate cycle parameters against the accepted input ranges.

    Args:
        params: Cycle parameters to check

    Returns:
        Tuple of (is_valid, error_message)
    """
    if _out_of_range(params.cycle_duration, CYCLE_DURATION_RANGE):
        return False, "Cycle duration must be between {} and {} days".format(*CYCLE_DURATION_RANGE)

    if _out_of_range(params.period_duration, PERIOD_DURATION_RANGE):
        return False, "Period duration must be between {} and {} days".format(*PERIOD_DURATION_RANGE)

    if _out_of_range(params.stress_value, STRESS_VALUE_RANGE):
        return False, "Stress value must be between {:g} and {:g}".format(*STRESS_VALUE_RANGE)

    return True, None
