"""
Service-level exceptions.

This module contains exceptions that can be raised by the calendar
and risk services.
"""

class CalendarError(Exception):
    """Base exception for cycle calendar errors."""
    pass

class RiskCalculationError(CalendarError):
    """Base exception for risk calculation errors."""
    pass

class InvalidJointParametersError(RiskCalculationError):
    """Raised when a joint's maximum stress equals its baseline."""
    pass

class UnknownJointTypeError(RiskCalculationError, ValueError):
    """Raised when no stress parameters exist for a joint type."""
    pass
