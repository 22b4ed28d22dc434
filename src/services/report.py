"""
Service module for rendering calendar summaries as text.

Typical usage:
    >>> summary = generate_month_summary(days, displayed_month)
    >>> details = generate_day_report(selected_day, params)
"""
from typing import List

from src.models.cycle import CycleParameters, DayDescriptor, DisplayedMonth
from src.services.calendar import get_high_risk_days
from src.services.constants import (
    PHASE_INFO,
    MONTH_NAMES,
    DAY_NAMES,
    JOINT_LABELS,
    HIGH_RISK_RECOMMENDATION,
    HIGH_RISK_DAY_WARNING
)
from src.services.phase import get_phase_label
from src.services.risk import explain_risk, format_risk

def format_month_label(displayed_month: DisplayedMonth) -> str:
    """Format a month as e.g. 'Enero 2024'."""
    return f"{MONTH_NAMES[displayed_month.month - 1]} {displayed_month.year}"

def format_number(value: float) -> str:
    """Format a number without a trailing '.0' for whole values."""
    return f"{value:g}"

def generate_month_summary(days: List[DayDescriptor], displayed_month: DisplayedMonth) -> str:
    """
    Generate the month summary with the high-risk days.

    Args:
        days: Calendar days for the displayed month
        displayed_month: Month shown in the grid

    Returns:
        Formatted summary string
    """
    high_risk_days = get_high_risk_days(days, displayed_month)

    report = [
        f"📅 Resumen del Mes: {format_month_label(displayed_month)}",
        f"Días de alto riesgo: {len(high_risk_days)}",
    ]

    if high_risk_days:
        report.extend([
            "",
            "⚠️ Fechas de alto riesgo:",
            *[
                f"• {day.date.day}/{day.date.month} - {get_phase_label(day.phase)}"
                for day in high_risk_days
            ]
        ])

    report.extend([
        "",
        "💡 Recomendación:",
        HIGH_RISK_RECOMMENDATION
    ])

    return "\n".join(report)

def generate_day_report(day: DayDescriptor, params: CycleParameters) -> str:
    """
    Generate the detail report for a selected day.

    Args:
        day: Selected calendar day
        params: Current cycle parameters (stress value and joint)

    Returns:
        Formatted report string including the risk formula breakdown
    """
    breakdown = explain_risk(day.phase, params.stress_value, params.joint_type)

    report = [
        "🗓️ Información del Día",
        f"Fecha: {day.date.day}/{day.date.month}/{day.date.year}",
        f"Fase: {get_phase_label(day.phase)}",
        f"Factor hormonal: {day.risk_factor:.1f}x",
        f"Riesgo estimado: {format_risk(breakdown['risk'])}/10",
        f"Articulación: {JOINT_LABELS[params.joint_type]}",
    ]

    if day.is_high_risk:
        report.extend([
            "",
            "⚠️ Día de alto riesgo",
            HIGH_RISK_DAY_WARNING
        ])

    report.extend([
        "",
        "🧮 Cálculo del riesgo:",
        "E = (S - Sbase) / (Smax - Sbase)",
        "Riesgo = E × F",
        "Donde:",
        f"S = {format_number(breakdown['stress_value'])}",
        f"F = {day.risk_factor:.1f}",
        f"Sbase={format_number(breakdown['s_base'])}, Smax={format_number(breakdown['s_max'])}",
    ])

    return "\n".join(report)

def generate_legend() -> List[str]:
    """Legend lines pairing each phase label with its color tag."""
    return [f"{info.label}: {info.color}" for info in PHASE_INFO.values()]

def generate_week_header() -> List[str]:
    """Weekday column headers, Sunday first."""
    return list(DAY_NAMES)
