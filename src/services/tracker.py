"""
Calendar session service.

This module holds the caller-side state of the calendar: the current cycle
parameter snapshot, the displayed month and the selected day. Every change
rebuilds the calendar from scratch.

Typical usage:
    tracker = CycleTracker()
    tracker.update_parameters(last_period_date=date(2024, 1, 1))
    tracker.navigate_month(1)
    day = tracker.select_day(date(2024, 2, 10))
    risk = tracker.selected_day_risk()
"""
from typing import Any, List, Optional
from datetime import date

from src.models.cycle import CycleParameters, DayDescriptor, DisplayedMonth
from src.services.calendar import generate_calendar, get_high_risk_days
from src.services.risk import calculate_risk
from src.utils.logging import logger

class CycleTracker:
    """Session state for the injury-risk calendar."""

    def __init__(
        self,
        parameters: Optional[CycleParameters] = None,
        displayed_month: Optional[DisplayedMonth] = None
    ):
        self.parameters = parameters or CycleParameters()
        self.displayed_month = displayed_month or DisplayedMonth.from_date(date.today())
        self.selected_day: Optional[DayDescriptor] = None
        self.calendar_days: List[DayDescriptor] = []
        self._refresh()

    def update_parameters(self, **changes: Any) -> List[DayDescriptor]:
        """
        Replace fields of the parameter snapshot and rebuild the calendar.

        Args:
            **changes: CycleParameters fields to replace

        Returns:
            Regenerated calendar days
        """
        self.parameters = CycleParameters(**{**self.parameters.model_dump(), **changes})
        return self._refresh()

    def navigate_month(self, direction: int) -> DisplayedMonth:
        """Move the displayed month and rebuild the calendar."""
        self.displayed_month = self.displayed_month.shift(direction)
        self._refresh()
        return self.displayed_month

    def select_day(self, target_date: date) -> Optional[DayDescriptor]:
        """
        Select a cell of the current grid by date.

        Returns:
            Selected DayDescriptor, or None if the date is not on the grid
        """
        self.selected_day = self._find_day(target_date)
        return self.selected_day

    def selected_day_risk(self) -> Optional[float]:
        """Risk of the selected day with the current stress value and joint."""
        if self.selected_day is None:
            return None
        return calculate_risk(
            self.selected_day.phase,
            self.parameters.stress_value,
            self.parameters.joint_type
        )

    def high_risk_days(self) -> List[DayDescriptor]:
        """High-risk days inside the displayed month."""
        return get_high_risk_days(self.calendar_days, self.displayed_month)

    def _find_day(self, target_date: date) -> Optional[DayDescriptor]:
        for day in self.calendar_days:
            if day.date == target_date:
                return day
        return None

    def _refresh(self) -> List[DayDescriptor]:
        self.calendar_days = generate_calendar(self.parameters, self.displayed_month)

        # Keep the selection pointing at the regenerated cell
        if self.selected_day is not None:
            self.selected_day = self._find_day(self.selected_day.date)

        logger.debug("Refreshed calendar session", extra={
            "days": len(self.calendar_days),
            "has_selection": self.selected_day is not None
        })
        return self.calendar_days
