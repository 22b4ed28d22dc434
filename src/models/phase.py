"""
Phase model definition for hormonal cycle phases.
"""
from enum import Enum
from pydantic import BaseModel, ConfigDict

class CyclePhase(str, Enum):
    """
    Hormonal phases used by the injury-risk calendar.
    """
    MENSTRUAL = "menstrual"
    EARLY_FOLLICULAR = "early_follicular"
    LATE_FOLLICULAR = "late_follicular"   # High risk
    OVULATION = "ovulation"
    EARLY_LUTEAL = "early_luteal"
    LATE_LUTEAL = "late_luteal"           # High risk

class PhaseInfo(BaseModel):
    """
    Display and risk attributes attached to a phase.
    """
    model_config = ConfigDict(frozen=True)

    label: str
    color: str
    factor: float
