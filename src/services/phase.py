"""
Service module for classifying cycle days into hormonal phases.

This module maps a normalized cycle day to one of the six fixed phases and
exposes lookups for each phase's display color, label and risk multiplier.

Typical usage:
    >>> day = normalize_cycle_day(days_diff, cycle_duration=28)
    >>> phase = classify_phase(day, period_duration=5)
    >>> factor = get_risk_factor(phase)
"""
from typing import Optional, Union

from src.models.phase import CyclePhase, PhaseInfo
from src.services.constants import (
    PHASE_INFO,
    PHASE_DAY_THRESHOLDS,
    HIGH_RISK_PHASES,
    DEFAULT_RISK_FACTOR,
    UNCLASSIFIED_COLOR
)
from src.utils.logging import logger

PhaseKey = Union[CyclePhase, str]

def classify_phase(day_of_cycle: int, period_duration: int) -> CyclePhase:
    """
    Determine the phase for a day of the cycle.

    Menstruation takes precedence over the fixed cutoffs, so a period longer
    than 7 days shortens (or removes) the early follicular phase. The cutoffs
    are not scaled to the configured cycle length.

    Args:
        day_of_cycle: Day in the cycle (1-based), already normalized
        period_duration: Length of the period in days

    Returns:
        Phase for the given day

    Example:
        >>> classify_phase(1, 5)
        <CyclePhase.MENSTRUAL: 'menstrual'>
        >>> classify_phase(12, 5)
        <CyclePhase.LATE_FOLLICULAR: 'late_follicular'>
    """
    if day_of_cycle <= period_duration:
        return CyclePhase.MENSTRUAL

    for last_day, phase in PHASE_DAY_THRESHOLDS:
        if day_of_cycle <= last_day:
            return phase

    return CyclePhase.LATE_LUTEAL

def normalize_cycle_day(days_diff: int, cycle_duration: int) -> int:
    """
    Convert a day offset from the last period into a 1-based cycle day.

    Offsets before the last period wrap backwards into the previous cycle.

    Args:
        days_diff: Whole days between a date and the last period start
        cycle_duration: Cycle length in days

    Returns:
        Cycle day in [1, cycle_duration]

    Example:
        >>> normalize_cycle_day(-3, 28)
        26
    """
    return ((days_diff % cycle_duration) + cycle_duration) % cycle_duration + 1

def get_phase_info(phase: PhaseKey) -> Optional[PhaseInfo]:
    """
    Look up the attributes of a phase.

    Returns None and logs a warning for an unknown phase, which can only
    happen when a caller passes a raw value the classifier never produces.
    """
    info = PHASE_INFO.get(phase)
    if info is None:
        logger.warning("Unclassified phase in lookup", extra={"phase": str(phase)})
    return info

def get_risk_factor(phase: PhaseKey) -> float:
    """Get the hormonal risk multiplier F for a phase."""
    info = get_phase_info(phase)
    return info.factor if info else DEFAULT_RISK_FACTOR

def get_phase_color(phase: PhaseKey) -> str:
    """Get the display color tag for a phase."""
    info = get_phase_info(phase)
    return info.color if info else UNCLASSIFIED_COLOR

def get_phase_label(phase: PhaseKey) -> str:
    """Get the display label for a phase."""
    info = get_phase_info(phase)
    return info.label if info else str(phase)

def is_high_risk_phase(phase: PhaseKey) -> bool:
    """Check whether a phase is flagged as high injury risk."""
    return phase in HIGH_RISK_PHASES
