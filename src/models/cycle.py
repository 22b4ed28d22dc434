"""
Cycle parameter and calendar day model definitions.
"""
from enum import Enum
from datetime import date, timedelta
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from src.models.phase import CyclePhase

class JointType(str, Enum):
    """Joints supported by the risk model."""
    ANKLE = "ankle"
    KNEE = "knee"

class JointParameters(BaseModel):
    """
    Baseline and maximum biomechanical stress for a joint.
    """
    model_config = ConfigDict(frozen=True)

    s_base: float
    s_max: float

class CycleParameters(BaseModel):
    """
    Snapshot of the user's cycle inputs.

    Ranges are not enforced here; see src.utils.validators for boundary checks.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    last_period_date: Optional[date] = None
    cycle_duration: int = 28
    period_duration: int = 5
    joint_type: JointType = JointType.KNEE
    stress_value: float = 5.0

class DisplayedMonth(BaseModel):
    """
    Year and month currently shown in the calendar grid.
    """
    model_config = ConfigDict(frozen=True)

    year: int
    month: int = Field(..., ge=1, le=12)

    @classmethod
    def from_date(cls, value: date) -> "DisplayedMonth":
        """Build the month that contains the given date."""
        return cls(year=value.year, month=value.month)

    @property
    def first_day(self) -> date:
        """First calendar day of the month."""
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        """Last calendar day of the month."""
        return self.shift(1).first_day - timedelta(days=1)

    def contains(self, value: date) -> bool:
        """Check whether a date falls inside this month."""
        return value.year == self.year and value.month == self.month

    def shift(self, direction: int) -> "DisplayedMonth":
        """
        Move forwards or backwards by a number of months.

        Args:
            direction: Months to move, negative for the past

        Returns:
            New DisplayedMonth
        """
        index = self.year * 12 + (self.month - 1) + direction
        return DisplayedMonth(year=index // 12, month=index % 12 + 1)

class DayDescriptor(BaseModel):
    """
    One cell of the calendar grid.
    """
    model_config = ConfigDict(frozen=True)

    date: date
    day_of_cycle: int
    phase: CyclePhase
    phase_color: str
    risk_factor: float
    is_high_risk: bool
    is_current_month: bool = True
