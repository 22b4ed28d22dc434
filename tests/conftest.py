"""
Pytest configuration and shared fixtures.
"""
import os
from dataclasses import dataclass
from datetime import date

import pytest

os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "1")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from src.models.cycle import CycleParameters, DisplayedMonth, JointType

@dataclass
class FakeLambdaContext:
    """Minimal Lambda context accepted by the powertools logger."""
    function_name: str = "cycle-calendar-test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:eu-west-1:123456789012:function:cycle-calendar-test"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"

@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    """Create a fake Lambda context."""
    return FakeLambdaContext()

@pytest.fixture
def january_2024() -> DisplayedMonth:
    """January 2024, which starts on a Monday."""
    return DisplayedMonth(year=2024, month=1)

@pytest.fixture
def regular_params() -> CycleParameters:
    """28-day cycle with a 5-day period starting 2024-01-01."""
    return CycleParameters(
        last_period_date=date(2024, 1, 1),
        cycle_duration=28,
        period_duration=5,
        joint_type=JointType.KNEE,
        stress_value=5.0
    )

@pytest.fixture
def unset_params() -> CycleParameters:
    """Parameters without a last period date."""
    return CycleParameters()
