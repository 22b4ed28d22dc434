"""
Lambda handler for the injury-risk calendar.
"""
from typing import Dict, List, Optional
from datetime import date
import json

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import BaseModel, Field, ValidationError, field_validator

from src.models.cycle import CycleParameters, DayDescriptor, DisplayedMonth, JointType
from src.services.constants import (
    CYCLE_DURATION_RANGE,
    PERIOD_DURATION_RANGE,
    STRESS_VALUE_RANGE,
    DEFAULT_CYCLE_DURATION,
    DEFAULT_PERIOD_DURATION,
    DEFAULT_STRESS_VALUE
)
from src.services.tracker import CycleTracker
from src.services.report import (
    format_month_label,
    generate_month_summary,
    generate_day_report,
    generate_legend,
    generate_week_header
)
from src.services.risk import format_risk
from src.utils.logging import logger
from src.utils.validators import validate_cycle_parameters

tracer = Tracer()

class CalendarRequest(BaseModel):
    """Calendar request model."""
    last_period_date: Optional[date] = None
    cycle_duration: int = Field(
        DEFAULT_CYCLE_DURATION, ge=CYCLE_DURATION_RANGE[0], le=CYCLE_DURATION_RANGE[1]
    )
    period_duration: int = Field(
        DEFAULT_PERIOD_DURATION, ge=PERIOD_DURATION_RANGE[0], le=PERIOD_DURATION_RANGE[1]
    )
    joint_type: JointType = JointType.KNEE
    stress_value: float = Field(
        DEFAULT_STRESS_VALUE, ge=STRESS_VALUE_RANGE[0], le=STRESS_VALUE_RANGE[1]
    )
    year: Optional[int] = Field(None, ge=1, le=9999)
    month: Optional[int] = Field(None, ge=1, le=12)
    selected_date: Optional[date] = None

    @field_validator("last_period_date", "selected_date", mode="before")
    @classmethod
    def empty_date_is_unset(cls, value):
        """An empty date input means the date is not set."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

class SelectedDay(BaseModel):
    """Details for the selected calendar day."""
    day: DayDescriptor
    risk: float
    risk_display: str
    report: str

class CalendarResponse(BaseModel):
    """Calendar response model."""
    month_label: str
    days: List[DayDescriptor]
    high_risk_days: List[DayDescriptor]
    summary: str
    legend: List[str]
    week_days: List[str]
    selected_day: Optional[SelectedDay] = None

def _response(status_code: int, body: str) -> Dict:
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json'},
        'body': body
    }

@logger.inject_lambda_context
@tracer.capture_lambda_handler
def handler(event: Dict, context: LambdaContext) -> Dict:
    """
    Handle calendar generation requests.

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context

    Returns:
        API Gateway Lambda proxy response
    """
    try:
        request = CalendarRequest.model_validate(json.loads(event.get('body') or '{}'))
        response = build_calendar(request)

        return _response(200, response.model_dump_json())

    except (ValidationError, ValueError) as e:
        logger.warning('Invalid calendar request', extra={'error': str(e)})
        return _response(400, json.dumps({'error': str(e)}))

    except Exception as e:
        logger.exception('Failed to build calendar')
        return _response(500, json.dumps({'error': str(e)}))

def build_calendar(request: CalendarRequest) -> CalendarResponse:
    """
    Build the calendar, month summary and selected day details.

    Args:
        request: Calendar request

    Returns:
        Calendar response

    Raises:
        ValueError: If the parameters are outside the accepted ranges
    """
    params = CycleParameters(
        last_period_date=request.last_period_date,
        cycle_duration=request.cycle_duration,
        period_duration=request.period_duration,
        joint_type=request.joint_type,
        stress_value=request.stress_value
    )

    is_valid, error = validate_cycle_parameters(params)
    if not is_valid:
        raise ValueError(error)

    today = date.today()
    displayed_month = DisplayedMonth(
        year=request.year if request.year is not None else today.year,
        month=request.month if request.month is not None else today.month
    )

    tracker = CycleTracker(params, displayed_month)

    selected = None
    if request.selected_date and tracker.select_day(request.selected_date):
        risk = tracker.selected_day_risk()
        selected = SelectedDay(
            day=tracker.selected_day,
            risk=risk,
            risk_display=format_risk(risk),
            report=generate_day_report(tracker.selected_day, params)
        )

    logger.info("Built calendar", extra={
        "year": displayed_month.year,
        "month": displayed_month.month,
        "has_period_date": params.last_period_date is not None,
        "has_selection": selected is not None
    })

    return CalendarResponse(
        month_label=format_month_label(displayed_month),
        days=tracker.calendar_days,
        high_risk_days=tracker.high_risk_days(),
        summary=generate_month_summary(tracker.calendar_days, displayed_month),
        legend=generate_legend(),
        week_days=generate_week_header(),
        selected_day=selected
    )
