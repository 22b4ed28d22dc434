"""
Service module for the joint injury-risk model.

The risk of a day is the normalized biomechanical exposure of the selected
joint multiplied by the hormonal factor of the day's phase:

    E = (S - Sbase) / (Smax - Sbase)
    risk = clamp(E * F, 0, 10)

Typical usage:
    >>> risk = calculate_risk(CyclePhase.LATE_LUTEAL, 5.0, JointType.KNEE)
    >>> format_risk(risk)
    '2.83'
"""
from typing import Dict, Union

from src.models.cycle import JointParameters, JointType
from src.services.constants import JOINT_PARAMETERS, MIN_RISK, MAX_RISK
from src.services.exceptions import InvalidJointParametersError, UnknownJointTypeError
from src.services.phase import PhaseKey, get_risk_factor

def get_joint_parameters(joint_type: Union[JointType, str]) -> JointParameters:
    """
    Get the stress baseline and maximum for a joint.

    Raises:
        UnknownJointTypeError: If the joint has no parameters
    """
    try:
        return JOINT_PARAMETERS[JointType(joint_type)]
    except (KeyError, ValueError):
        raise UnknownJointTypeError(f"No stress parameters for joint type: {joint_type}")

def clamp_risk(value: float) -> float:
    """Bound a raw risk value to [0, 10]."""
    return max(MIN_RISK, min(MAX_RISK, value))

def calculate_exposure(stress_value: float, joint: JointParameters) -> float:
    """
    Normalize a stress value against a joint's baseline and maximum.

    Args:
        stress_value: Biomechanical stress (0-10)
        joint: Joint stress parameters

    Returns:
        Exposure E, unbounded

    Raises:
        InvalidJointParametersError: If Smax equals Sbase
    """
    span = joint.s_max - joint.s_base
    if span == 0:
        raise InvalidJointParametersError(
            f"Joint parameters have zero stress span (Sbase=Smax={joint.s_base})"
        )
    return (stress_value - joint.s_base) / span

def calculate_risk(
    phase: PhaseKey,
    stress_value: float,
    joint_type: Union[JointType, str]
) -> float:
    """
    Calculate the injury risk for a phase, stress value and joint.

    Args:
        phase: Cycle phase of the day
        stress_value: Biomechanical stress (0-10)
        joint_type: Joint being evaluated

    Returns:
        Risk score clamped to [0, 10]

    Example:
        >>> calculate_risk(CyclePhase.MENSTRUAL, 5.8, JointType.ANKLE)
        0.0
    """
    exposure = calculate_exposure(stress_value, get_joint_parameters(joint_type))
    factor = get_risk_factor(phase)
    return clamp_risk(exposure * factor)

def format_risk(risk: float) -> str:
    """Format a risk score with two decimals."""
    return f"{risk:.2f}"

def explain_risk(
    phase: PhaseKey,
    stress_value: float,
    joint_type: Union[JointType, str]
) -> Dict[str, float]:
    """
    Break down the terms of the risk formula.

    Returns:
        Dictionary with keys stress_value, s_base, s_max, exposure,
        factor and risk
    """
    joint = get_joint_parameters(joint_type)
    exposure = calculate_exposure(stress_value, joint)
    factor = get_risk_factor(phase)
    return {
        "stress_value": stress_value,
        "s_base": joint.s_base,
        "s_max": joint.s_max,
        "exposure": exposure,
        "factor": factor,
        "risk": clamp_risk(exposure * factor),
    }
