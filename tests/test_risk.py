"""Tests for the injury-risk calculation service."""
import pytest

from src.models.cycle import JointParameters, JointType
from src.models.phase import CyclePhase
from src.services.exceptions import InvalidJointParametersError, UnknownJointTypeError
from src.services.risk import (
    calculate_risk,
    calculate_exposure,
    clamp_risk,
    explain_risk,
    format_risk,
    get_joint_parameters
)

def test_knee_late_luteal_example():
    """Test knee at stress 5 in late luteal gives 2.83."""
    risk = calculate_risk(CyclePhase.LATE_LUTEAL, 5.0, JointType.KNEE)

    assert risk == pytest.approx(5 / 3 * 1.7)
    assert format_risk(risk) == "2.83"

@pytest.mark.parametrize("phase", list(CyclePhase))
def test_ankle_at_baseline_is_zero(phase):
    """Test stress equal to the ankle baseline gives zero risk for any phase."""
    assert calculate_risk(phase, 5.8, JointType.ANKLE) == 0.0

def test_risk_below_baseline_is_clamped_to_zero():
    """Test negative exposure is clamped to zero."""
    assert calculate_risk(CyclePhase.LATE_FOLLICULAR, 2.0, JointType.ANKLE) == 0.0

def test_risk_above_range_is_clamped_to_ten():
    """Test out-of-range stress is clamped to ten."""
    assert calculate_risk(CyclePhase.LATE_FOLLICULAR, 30.0, JointType.KNEE) == 10.0

def test_risk_always_within_bounds():
    """Test risk stays in [0, 10] for every valid stress, joint and phase."""
    stress_values = [step / 10 for step in range(0, 101)]
    for joint_type in JointType:
        for phase in CyclePhase:
            for stress in stress_values:
                assert 0.0 <= calculate_risk(phase, stress, joint_type) <= 10.0

def test_risk_accepts_plain_values():
    """Test string phase and joint values are accepted."""
    assert calculate_risk("ovulation", 3.0, "knee") == pytest.approx(1.3)

def test_unknown_phase_uses_default_factor():
    """Test an unknown phase uses a factor of 1.0."""
    assert calculate_risk("unclassified", 1.5, JointType.KNEE) == pytest.approx(0.5)

def test_unknown_joint_type():
    """Test an unsupported joint raises."""
    with pytest.raises(UnknownJointTypeError, match="elbow"):
        calculate_risk(CyclePhase.MENSTRUAL, 5.0, "elbow")

def test_zero_span_joint_fails_fast():
    """Test a joint with Smax equal to Sbase raises instead of dividing by zero."""
    with pytest.raises(InvalidJointParametersError):
        calculate_exposure(4.0, JointParameters(s_base=3.0, s_max=3.0))

def test_joint_parameters():
    """Test the fixed joint table."""
    assert get_joint_parameters(JointType.ANKLE) == JointParameters(s_base=5.8, s_max=9.0)
    assert get_joint_parameters("knee") == JointParameters(s_base=0.0, s_max=3.0)

def test_explain_risk():
    """Test the formula breakdown."""
    breakdown = explain_risk(CyclePhase.LATE_LUTEAL, 5.0, JointType.KNEE)

    assert breakdown["s_base"] == 0.0
    assert breakdown["s_max"] == 3.0
    assert breakdown["factor"] == 1.7
    assert breakdown["exposure"] == pytest.approx(5 / 3)
    assert format_risk(breakdown["risk"]) == "2.83"

def test_clamp_risk():
    """Test raw risk values are bounded to [0, 10]."""
    assert clamp_risk(-1.5) == 0.0
    assert clamp_risk(4.2) == 4.2
    assert clamp_risk(12.0) == 10.0

@pytest.mark.parametrize("stress", [0.0, 2.0, 5.8, 9.0, 10.0, 40.0])
def test_explain_risk_matches_calculate_risk(stress):
    """Test the breakdown reports the same risk as the calculation."""
    for joint_type in JointType:
        for phase in CyclePhase:
            assert explain_risk(phase, stress, joint_type)["risk"] == calculate_risk(phase, stress, joint_type)
