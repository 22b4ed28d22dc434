"""
Service module for building the monthly phase calendar.

The calendar is a fixed 6 x 7 grid starting on the Sunday on or before the
first day of the displayed month. Every cell is classified from the offset
between its date and the last period start, so dates before the last period
fall into the previous cycle.

Typical usage:
    >>> params = CycleParameters(last_period_date=date(2024, 1, 1))
    >>> days = generate_calendar(params, DisplayedMonth(year=2024, month=1))
    >>> risky = get_high_risk_days(days, DisplayedMonth(year=2024, month=1))
"""
from typing import List, Optional
from datetime import date, timedelta

from src.models.cycle import CycleParameters, DayDescriptor, DisplayedMonth
from src.services.constants import CALENDAR_GRID_SIZE, DAYS_PER_WEEK
from src.services.phase import (
    classify_phase,
    normalize_cycle_day,
    get_phase_color,
    get_risk_factor,
    is_high_risk_phase
)
from src.utils.logging import logger

def get_grid_start(displayed_month: DisplayedMonth) -> date:
    """
    Get the Sunday on or before the first day of the month.

    Example:
        >>> get_grid_start(DisplayedMonth(year=2024, month=2))
        datetime.date(2024, 1, 28)
    """
    first_of_month = displayed_month.first_day
    # isoweekday: Monday=1 .. Sunday=7, so Sunday maps to 0
    return first_of_month - timedelta(days=first_of_month.isoweekday() % DAYS_PER_WEEK)

def describe_day(
    target_date: date,
    params: CycleParameters,
    displayed_month: Optional[DisplayedMonth] = None
) -> DayDescriptor:
    """
    Classify a single date against the cycle parameters.

    Args:
        target_date: Date to classify
        params: Cycle parameters with a last period date set
        displayed_month: Month shown in the grid, if the day is a grid cell

    Returns:
        DayDescriptor for the date
    """
    days_diff = (target_date - params.last_period_date).days
    day_of_cycle = normalize_cycle_day(days_diff, params.cycle_duration)
    phase = classify_phase(day_of_cycle, params.period_duration)

    return DayDescriptor(
        date=target_date,
        day_of_cycle=day_of_cycle,
        phase=phase,
        phase_color=get_phase_color(phase),
        risk_factor=get_risk_factor(phase),
        is_high_risk=is_high_risk_phase(phase),
        is_current_month=displayed_month is None or displayed_month.contains(target_date)
    )

def generate_calendar(params: CycleParameters, displayed_month: DisplayedMonth) -> List[DayDescriptor]:
    """
    Generate the 42 calendar cells for the displayed month.

    Args:
        params: Cycle parameters
        displayed_month: Month shown in the grid

    Returns:
        42 DayDescriptor objects in row-major, Sunday-first order, or an
        empty list when no last period date is set
    """
    if params.last_period_date is None:
        return []

    start = get_grid_start(displayed_month)
    days = [
        describe_day(start + timedelta(days=offset), params, displayed_month)
        for offset in range(CALENDAR_GRID_SIZE)
    ]

    logger.debug("Generated calendar", extra={
        "year": displayed_month.year,
        "month": displayed_month.month,
        "grid_start": start.isoformat(),
        "cycle_duration": params.cycle_duration,
        "period_duration": params.period_duration
    })
    return days

def is_in_month(day: DayDescriptor, displayed_month: DisplayedMonth) -> bool:
    """Check whether a calendar cell belongs to the displayed month."""
    return displayed_month.contains(day.date)

def get_high_risk_days(days: List[DayDescriptor], displayed_month: DisplayedMonth) -> List[DayDescriptor]:
    """
    Filter high-risk days inside the displayed month.

    Padding cells from adjacent months are excluded.
    """
    return [
        day for day in days
        if day.is_high_risk and is_in_month(day, displayed_month)
    ]
